"""Email service implementations.

- SmtpEmailService: SMTP transport
- StubEmailService: log-only delivery for development/testing
"""

from src.infrastructure.email.smtp_email_service import SmtpEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SmtpEmailService",
    "StubEmailService",
]
