"""userctl — collect, validate and generate user records."""

__version__ = "0.1.0"
