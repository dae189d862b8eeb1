"""Domain layer — geometry models and the bounding-box computation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
