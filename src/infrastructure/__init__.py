"""Infrastructure layer: adapters behind the domain protocols.

- persistence/: SQLAlchemy models, async engine and repositories
- security/: bcrypt hashing, JWT issuing, TOTP passcodes
- email/, sms/: passcode delivery (SMTP, Eskiz, logging stubs)
- notifications/: background dispatch of passcodes
- logging/: structlog console adapter
"""
