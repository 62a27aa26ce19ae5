"""Core domain logic for the catalog.

This package has zero external dependencies and holds the pure
business rules: the Category aggregate and the field validation
rules it enforces.
"""

from .exceptions import EntityValidationError
from .models import Category
from .validation import DomainValidation

__all__ = [
    "Category",
    "DomainValidation",
    "EntityValidationError",
]
