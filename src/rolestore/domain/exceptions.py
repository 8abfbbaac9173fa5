"""Domain exceptions."""


class RoleStoreError(Exception):
    """Base exception for the role store."""

    pass


class NotFound(RoleStoreError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


class StoreError(RoleStoreError):
    """Connection or query failure in the relational store."""

    pass


class ValidationError(RoleStoreError):
    """Validation failed for input data."""

    pass
