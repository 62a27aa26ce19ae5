"""Deterministic test data generators.

- CategoryFixture: seeded valid names, descriptions and categories
"""

from .category import CategoryFixture

__all__ = [
    "CategoryFixture",
]
