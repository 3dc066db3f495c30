"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use cases: one load (and, for mutations, one save) of the document each
- DTOs: Data transfer objects for use case output
- Protocols: Interfaces for external dependencies such as the document store
"""
