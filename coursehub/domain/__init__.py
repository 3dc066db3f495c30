"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Users, courses, certificates and the document that holds them
- Value Objects: Identifiers, progress percentages, ratings
- Domain Services: The progress/certificate workflow and read-only projections
"""
