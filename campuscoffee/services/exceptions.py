"""Domain exceptions for the CampusCoffee services."""


class CampusCoffeeError(Exception):
    """Base exception for all service errors. str() is safe to show to users."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CampusCoffeeError):
    """A referenced POS, user or review does not exist."""

    def __init__(self, entity: str, entity_id: int | None) -> None:
        super().__init__(f"{entity} with id {entity_id} does not exist.")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(CampusCoffeeError):
    """A business rule was violated."""
    pass
