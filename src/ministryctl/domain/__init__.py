"""Domain layer — calendar arithmetic, roster and attendance models.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
