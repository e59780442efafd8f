"""Application layer - use cases and orchestration.

Structure:
- commands/: command dataclasses and handlers (write operations)
- queries/: query dataclasses and handlers (read operations)
- dtos/: result objects returned by handlers

The application layer orchestrates domain logic and depends on domain
protocols only; adapters are injected by the container.
"""
