"""Query handlers."""

from src.application.queries.handlers.get_account_handler import GetAccountHandler
from src.application.queries.handlers.list_accounts_handler import ListAccountsHandler
from src.application.queries.handlers.list_regions_handler import ListRegionsHandler

__all__ = ["GetAccountHandler", "ListAccountsHandler", "ListRegionsHandler"]
