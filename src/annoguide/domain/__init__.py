"""Domain layer: constraints, entities, and the JSON codec.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
