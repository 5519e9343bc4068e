"""Domain layer — coercion targets, strict parsers, and the variable accessor.

This layer depends only on stdlib and pydantic.
It must never import from resolver or config.
"""
