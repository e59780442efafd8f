"""Domain layer - pure business logic.

Structure:
- entities/: Account and Region
- enums/: roles, statuses, passcode purposes, token classes
- value_objects/: verified token claims
- protocols/: ports implemented by the infrastructure layer
- validators/ and types.py: shared input validation

The domain layer has no dependency on any framework or infrastructure.
"""
