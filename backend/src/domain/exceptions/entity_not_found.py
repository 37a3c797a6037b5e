"""
EntityNotFoundError - Raised when a referenced thread, message or notification does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, entity: str = "Entity", entity_id: str | None = None):
        if entity_id:
            message = f"{entity} {entity_id} not found"
        else:
            message = f"{entity} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id
