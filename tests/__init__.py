"""Test suite for the identity service.

- unit/: handlers, adapters and domain rules in isolation
- api/: routers through TestClient with stubbed handlers
- integration/: full account lifecycle over in-memory repositories
"""
