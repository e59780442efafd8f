"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits them.
"""

from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_dispatcher_protocol import (
    NotificationDispatcherProtocol,
)
from src.domain.protocols.otp_protocol import OtpProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.region_repository import RegionRepository
from src.domain.protocols.sms_protocol import SMSProtocol
from src.domain.protocols.token_issuer_protocol import TokenIssuerProtocol

__all__ = [
    "AccountRepository",
    "EmailProtocol",
    "LoggerProtocol",
    "NotificationDispatcherProtocol",
    "OtpProtocol",
    "PasswordHashingProtocol",
    "RegionRepository",
    "SMSProtocol",
    "TokenIssuerProtocol",
]
