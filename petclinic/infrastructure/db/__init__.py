"""
Database Infrastructure
=======================

MongoDB and in-memory implementations of the domain repositories.
"""
