"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
        self.message = message


class OwnerNotFoundError(EntityNotFoundError):
    """Raised when no owner exists for the requested identifier."""

    def __init__(self, owner_id: str):
        super().__init__(f"Owner '{owner_id}' not found")
        self.owner_id = owner_id


class PetNotFoundError(EntityNotFoundError):
    """Raised when no pet exists for the requested identifier."""

    def __init__(self, pet_id: str):
        super().__init__(f"Pet '{pet_id}' not found")
        self.pet_id = pet_id
