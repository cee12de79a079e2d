"""
Domain Layer
============

Pure domain models, constants, exceptions and repository interfaces.
"""
