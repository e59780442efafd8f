"""SMS service implementations.

- EskizSmsService: Eskiz HTTP API
- StubSmsService: log-only delivery for development/testing
"""

from src.infrastructure.sms.eskiz_sms_service import EskizSmsService
from src.infrastructure.sms.stub_sms_service import StubSmsService

__all__ = ["EskizSmsService", "StubSmsService"]
