"""Domain layer — employee records, salary rules, and input validators.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
