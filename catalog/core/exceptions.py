"""Exceptions raised by the catalog core domain."""


class EntityValidationError(ValueError):
    """A field value violated a domain validation rule.

    Subclasses ValueError so callers that treat invariant violations as
    ValueError keep working. The message is the rule's exact template text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
