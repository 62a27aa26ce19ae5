"""Domain models for the catalog.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar

from .validation import DomainValidation

logger = logging.getLogger(__name__)


@dataclass
class Category:
    """A catalog category: the aggregate root of the catalog domain.

    Identity (id) and creation time (created_at) are assigned once, after
    the initial field values pass validation, and are never reassigned by
    any operation on the entity.

    State Transitions:
        The entity is either active or inactive:
        - ANY → ACTIVE (activate)
        - ANY → INACTIVE (deactivate)
        The initial state comes from the is_active constructor argument.

    Note: This dataclass is intentionally mutable so that update, activate
    and deactivate can change state in place. Writes should go through
    those methods; direct attribute assignment skips validation.
    """

    NAME_MIN_LENGTH: ClassVar[int] = 3
    NAME_MAX_LENGTH: ClassVar[int] = 255
    DESCRIPTION_MAX_LENGTH: ClassVar[int] = 10_000

    name: str
    description: str
    is_active: bool = True
    id: str = field(init=False)  # UUID
    created_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        """Validate the initial fields, then stamp identity and creation time."""
        self._validate_name(self.name)
        DomainValidation.require_not_null(self.description, "Description")
        self._validate_description(self.description)

        self.id = str(uuid.uuid4())
        self.created_at = datetime.now(timezone.utc)

        logger.debug(
            f"Category {self.id} created",
            extra={
                "category_id": self.id,
                "category_name": self.name,
                "is_active": self.is_active,
            },
        )

    @classmethod
    def _validate_name(cls, name: str | None) -> None:
        DomainValidation.require_not_null_or_empty(name, "Name")
        DomainValidation.require_min_length(name, cls.NAME_MIN_LENGTH, "Name")
        DomainValidation.require_max_length(name, cls.NAME_MAX_LENGTH, "Name")

    @classmethod
    def _validate_description(cls, description: str) -> None:
        DomainValidation.require_max_length(
            description, cls.DESCRIPTION_MAX_LENGTH, "Description"
        )

    def update(self, name: str, description: str | None = None) -> None:
        """Replace the name and, optionally, the description.

        Both values are validated before either is written, so a failed
        update leaves the category unchanged.

        Args:
            name: The new category name.
            description: The new description. None keeps the current
                description; pass "" to clear it.

        Raises:
            EntityValidationError: If the new name or description breaks
                a field rule.
        """
        self._validate_name(name)
        if description is not None:
            self._validate_description(description)

        self.name = name
        if description is not None:
            self.description = description

        logger.debug(
            f"Category {self.id} updated",
            extra={
                "category_id": self.id,
                "category_name": self.name,
                "description_changed": description is not None,
            },
        )

    def activate(self) -> None:
        """Transition category to active status."""
        self.is_active = True
        logger.debug(
            f"Category {self.id} activated",
            extra={"category_id": self.id},
        )

    def deactivate(self) -> None:
        """Transition category to inactive status."""
        self.is_active = False
        logger.debug(
            f"Category {self.id} deactivated",
            extra={"category_id": self.id},
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly snapshot of the category."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
        }
