"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Pet form operations (create pet, update pet)
- Services: Application services that coordinate the use cases
- Forms: Request binding and field validation
"""
