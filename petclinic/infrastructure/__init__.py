"""
Infrastructure Layer
====================

External concerns and framework-specific implementations.
"""
