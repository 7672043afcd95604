"""Domain layer — model entities, validation, and href derivation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
