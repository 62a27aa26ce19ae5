"""Reusable field validation rules for domain entities.

Each rule either returns normally or raises EntityValidationError with a
message naming the offending field. Rules are independent of any entity,
so aggregates compose them in whatever order their invariants require.
"""

from .exceptions import EntityValidationError


class DomainValidation:
    """Stateless field-level validation rules.

    All methods are static as the class carries no state.
    """

    @staticmethod
    def require_not_null(value: object | None, field_name: str) -> None:
        """Reject a missing value."""
        if value is None:
            raise EntityValidationError(f"{field_name} should not be null")

    @staticmethod
    def require_not_null_or_empty(value: str | None, field_name: str) -> None:
        """Reject a missing, empty or whitespace-only string."""
        if value is None or not value.strip():
            raise EntityValidationError(
                f"{field_name} should not be empty or null"
            )

    @staticmethod
    def require_min_length(value: str, min_length: int, field_name: str) -> None:
        """Reject a string shorter than min_length.

        A string of exactly min_length characters is accepted.
        """
        if len(value) < min_length:
            raise EntityValidationError(
                f"{field_name} should be at least {min_length} characters long"
            )

    @staticmethod
    def require_max_length(value: str, max_length: int, field_name: str) -> None:
        """Reject a string longer than max_length.

        A string of exactly max_length characters is accepted.
        """
        if len(value) > max_length:
            raise EntityValidationError(
                f"{field_name} should be less or equal {max_length} characters long"
            )
