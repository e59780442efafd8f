"""Role promotion handler.

The caller's ADMIN role is enforced by the access gate before this handler
runs; the handler only enforces the rules that depend on the target.
"""

from src.application.commands.account_commands import PromoteRole
from src.application.dtos import RoleChange
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, LoggerProtocol


class PromoteRoleHandler:
    """Handler for PromoteRole command."""

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: PromoteRole) -> Result[RoleChange, DomainError]:
        """Handle role promotion.

        Returns:
            Success(RoleChange) with ``changed=False`` when the target already
                had the role (nothing is written).
            Failure(NotFoundError) if the target does not exist.
            Failure(AuthorizationError) with SELF_PROMOTION_DENIED when the
                caller targets their own account.
        """
        target = await self._account_repo.find_by_id(cmd.target_account_id)
        if target is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.PROMOTION_TARGET_NOT_FOUND.format(
                        account_id=cmd.target_account_id
                    ),
                    resource_type="Account",
                    resource_id=str(cmd.target_account_id),
                )
            )

        if target.is_owned_by(cmd.acting_account_id):
            self._logger.warning(
                "self_promotion_denied", account_id=str(cmd.acting_account_id)
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.SELF_PROMOTION_DENIED,
                    message=AccountError.SELF_PROMOTION,
                )
            )

        previous_role = target.role
        if not target.change_role(cmd.role):
            return Success(value=RoleChange(account=target, changed=False))

        match await self._account_repo.update(target):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=updated):
                self._logger.info(
                    "role_changed",
                    account_id=str(updated.id),
                    changed_by=str(cmd.acting_account_id),
                    previous_role=previous_role.value,
                    role=updated.role.value,
                )
                return Success(value=RoleChange(account=updated, changed=True))
