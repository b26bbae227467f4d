"""Generation-time errors raised while deriving entity shapes."""
from typing import Optional


class EntityDerivationError(ValueError):
    """Base class for derivation errors.

    Each error names the entity and, when applicable, the offending field so it
    can be reported as a single build diagnostic.
    """

    def __init__(self, entity: str, message: str, field: Optional[str] = None):
        self.entity = entity
        self.field = field
        self.message = message
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        if self.field:
            return f"{self.entity}.{self.field}: {self.message}"
        return f"{self.entity}: {self.message}"


class InvalidEntityDefinition(EntityDerivationError):
    """Structurally malformed entity definition."""


class MissingStorageLocation(EntityDerivationError):
    def __init__(self, entity: str):
        super().__init__(entity, "No table_name given for entity")


class NonNamedField(EntityDerivationError):
    def __init__(self, entity: str, position: int):
        self.position = position
        super().__init__(entity, f"Field at position {position} has no name")


class UnknownFlag(EntityDerivationError):
    def __init__(self, entity: str, field: str, token: str, expected: str):
        self.token = token
        super().__init__(
            entity,
            f"Unknown flag {token}. Expected a value in ({expected})",
            field=field,
        )


class DuplicateField(EntityDerivationError):
    def __init__(self, entity: str, field: str):
        super().__init__(entity, "Field is declared more than once", field=field)


class VisibleNameCollision(EntityDerivationError):
    def __init__(self, entity: str, field: str, visible_name: str, other: str):
        self.visible_name = visible_name
        super().__init__(
            entity,
            f"Visible name '{visible_name}' collides with field '{other}'",
            field=field,
        )
