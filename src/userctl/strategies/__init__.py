"""Input strategies — interchangeable sources of validated user records.

All strategies satisfy :class:`~userctl.strategies.base.InputStrategy`.
"""

from userctl.strategies.base import InputStrategy, ParseReporter
from userctl.strategies.file import FileInputStrategy
from userctl.strategies.generated import RandomInputStrategy
from userctl.strategies.manual import ManualInputStrategy

__all__ = [
    "FileInputStrategy",
    "InputStrategy",
    "ManualInputStrategy",
    "ParseReporter",
    "RandomInputStrategy",
]
