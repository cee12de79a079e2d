"""
DOMAIN EXCEPTIONS - Lookup failures

These exceptions are raised by the application layer and are not caught by
controllers. The application-level exception handler maps them to HTTP 404.
"""

from petclinic.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    OwnerNotFoundError,
    PetNotFoundError,
)

__all__ = [
    "EntityNotFoundError",
    "OwnerNotFoundError",
    "PetNotFoundError",
]
