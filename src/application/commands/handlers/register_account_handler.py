"""Registration handler.

Flow:
1. Check the requested role may self-register
2. Check the role's required profile fields (CEO needs image, year, region)
3. Check email uniqueness
4. Check the referenced region exists
5. Hash password (worker thread, bcrypt is CPU-bound)
6. Create Account (status INACTIVE)
7. Generate email verification passcode
8. Schedule delivery by email and SMS (fire-and-forget)
9. Return Success(account)

A registration racing this one for the same email is settled by the
store's unique index; the repository reports it as a Conflict.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Adapters are injected via protocols
"""

import asyncio
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterAccount
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import (
    SELF_REGISTRATION_ROLES,
    AccountRole,
    AccountStatus,
    OtpPurpose,
)
from src.domain.errors import AccountError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    NotificationDispatcherProtocol,
    OtpProtocol,
    PasswordHashingProtocol,
    RegionRepository,
)

# Request field name -> command attribute
_CEO_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("image", "image"),
    ("year", "birth_year"),
    ("region_id", "region_id"),
)


class RegisterAccountHandler:
    """Handler for RegisterAccount command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        region_repo: RegionRepository,
        password_service: PasswordHashingProtocol,
        otp_service: OtpProtocol,
        notification_dispatcher: NotificationDispatcherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._region_repo = region_repo
        self._password_service = password_service
        self._otp_service = otp_service
        self._notification_dispatcher = notification_dispatcher
        self._logger = logger

    async def handle(self, cmd: RegisterAccount) -> Result[Account, DomainError]:
        """Handle account registration.

        Returns:
            Success(Account) with the new INACTIVE account.
            Failure(ValidationError) if the role or its required fields are wrong.
            Failure(ConflictError) if the email is already registered.
            Failure(NotFoundError) if the region does not exist.

        Side Effects:
            - Creates the account
            - Schedules passcode delivery (email, and SMS when phone is set)
        """
        validation_error = self._validate_role_fields(cmd)
        if validation_error is not None:
            return Failure(error=validation_error)

        existing = await self._account_repo.find_by_email(cmd.email)
        if existing is not None:
            self._logger.info("registration_rejected", reason="email_exists")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=AccountError.EMAIL_EXISTS,
                    resource_type="Account",
                    conflicting_field="email",
                )
            )

        if cmd.region_id is not None:
            region = await self._region_repo.find_by_id(cmd.region_id)
            if region is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.REGION_NOT_FOUND,
                        message=AccountError.REGION_NOT_FOUND,
                        resource_type="Region",
                        resource_id=str(cmd.region_id),
                    )
                )

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.password
        )

        now = datetime.now(UTC)
        account = Account(
            id=uuid7(),
            name=cmd.name,
            email=cmd.email,
            phone=cmd.phone,
            password_hash=password_hash,
            role=cmd.role,
            status=AccountStatus.INACTIVE,
            image=cmd.image,
            birth_year=cmd.birth_year,
            region_id=cmd.region_id,
            created_at=now,
            updated_at=now,
        )

        match await self._account_repo.create(account):
            case Failure(error=error):
                self._logger.info("registration_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=created):
                account = created

        code = self._otp_service.generate(account.email, OtpPurpose.EMAIL_VERIFICATION)
        self._notification_dispatcher.dispatch_otp(
            email=account.email,
            phone=account.phone,
            code=code,
            purpose=OtpPurpose.EMAIL_VERIFICATION,
        )

        self._logger.info(
            "account_registered",
            account_id=str(account.id),
            role=account.role.value,
        )
        return Success(value=account)

    def _validate_role_fields(self, cmd: RegisterAccount) -> ValidationError | None:
        if cmd.role not in SELF_REGISTRATION_ROLES:
            allowed = ", ".join(
                sorted(role.value for role in SELF_REGISTRATION_ROLES)
            )
            return ValidationError(
                code=ErrorCode.INVALID_ROLE,
                message=AccountError.ROLE_NOT_ALLOWED.format(roles=allowed),
                field="role",
            )

        if cmd.role == AccountRole.CEO:
            for request_field, attribute in _CEO_REQUIRED_FIELDS:
                if getattr(cmd, attribute) is None:
                    return ValidationError(
                        code=ErrorCode.MISSING_FIELD,
                        message=AccountError.FIELD_REQUIRED_FOR_ROLE.format(
                            field=request_field, role=cmd.role.value
                        ),
                        field=request_field,
                    )

        return None
