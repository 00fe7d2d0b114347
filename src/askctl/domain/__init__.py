"""Domain layer: answer types, rules, and the type registry.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
