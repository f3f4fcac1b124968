"""Domain layer — the user record, field validators, and the random generator.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
