"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, the access gate dependencies, trace
middleware and RFC 9457 error responses. It is thin: it builds
commands/queries, dispatches them to the application layer and translates
results to HTTP responses.

Structure:
- routers/system.py: root and health endpoints
- routers/api/middleware/: trace middleware, access gate, auth dependencies
- routers/api/v1/: resource routers and error handling

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
