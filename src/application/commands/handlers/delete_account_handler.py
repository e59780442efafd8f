"""Account deletion handler (self or ADMIN)."""

from src.application.commands.account_commands import DeleteAccount
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import AccountRole
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, LoggerProtocol


class DeleteAccountHandler:
    """Handler for DeleteAccount command."""

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: DeleteAccount) -> Result[Account, DomainError]:
        """Handle account deletion.

        Returns:
            Success(Account) with the deleted account.
            Failure(NotFoundError) if the account does not exist.
            Failure(AuthorizationError) if a non-ADMIN deletes someone else.
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
                    message=AccountError.DELETE_FORBIDDEN.format(
                        role=cmd.acting_role.value
                    ),
                    required_permission=AccountRole.ADMIN.value,
                )
            )

        result = await self._account_repo.delete(account.id)
        if isinstance(result, Success):
            self._logger.info(
                "account_deleted",
                account_id=str(account.id),
                deleted_by=str(cmd.acting_account_id),
            )
        return result
