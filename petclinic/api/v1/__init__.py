"""
API v1 Package
===============

Version 1 controllers.
"""
from .pet_controller import router as pet_router
from .owner_controller import router as owner_router

__all__ = ["pet_router", "owner_router"]
