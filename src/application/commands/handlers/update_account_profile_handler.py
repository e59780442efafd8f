"""Profile update handler.

Any authenticated account may edit its own profile; only ADMIN may edit
other accounts. Role, status, email and password are not profile fields.
"""

from src.application.commands.account_commands import UpdateAccountProfile
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.account import PROFILE_FIELDS, Account
from src.domain.enums import AccountRole
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, LoggerProtocol, RegionRepository


class UpdateAccountProfileHandler:
    """Handler for UpdateAccountProfile command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        region_repo: RegionRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._region_repo = region_repo
        self._logger = logger

    async def handle(self, cmd: UpdateAccountProfile) -> Result[Account, DomainError]:
        """Handle profile update.

        Returns:
            Success(Account) with the changes applied.
            Failure(NotFoundError) if the account or the new region is absent.
            Failure(AuthorizationError) if a non-ADMIN edits someone else.
            Failure(ValidationError) if a change targets a non-profile field.
        """
        account = await self._account_repo.find_by_id(cmd.target_account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=str(cmd.target_account_id),
                )
            )

        if cmd.acting_role != AccountRole.ADMIN and not account.is_owned_by(
            cmd.acting_account_id
        ):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=AccountError.UPDATE_FORBIDDEN.format(
                        role=cmd.acting_role.value
                    ),
                    required_permission=AccountRole.ADMIN.value,
                )
            )

        unknown = sorted(set(cmd.changes) - PROFILE_FIELDS)
        if unknown:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"Not a profile field: {', '.join(unknown)}",
                    field=unknown[0],
                )
            )

        region_id = cmd.changes.get("region_id")
        if region_id is not None and await self._region_repo.find_by_id(region_id) is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REGION_NOT_FOUND,
                    message=AccountError.REGION_NOT_FOUND,
                    resource_type="Region",
                    resource_id=str(region_id),
                )
            )

        if not cmd.changes:
            return Success(value=account)

        account.update_profile(**cmd.changes)
        match await self._account_repo.update(account):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=updated):
                self._logger.info(
                    "account_updated",
                    account_id=str(updated.id),
                    updated_by=str(cmd.acting_account_id),
                    fields=sorted(cmd.changes),
                )
                return Success(value=updated)
