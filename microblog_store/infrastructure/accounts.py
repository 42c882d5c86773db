"""
Account store - identity and join-date indexes over accounts
"""
from datetime import datetime
from typing import List, Optional
import logging

from ..domain.models import Account
from ..domain.repositories import IAccountRepository
from .ordered_index import OrderedIndex

logger = logging.getLogger(__name__)


class AccountStore(IAccountRepository):
    """In-memory account repository backed by two ordered indexes"""

    def __init__(self):
        self._by_id: OrderedIndex[int, Account] = OrderedIndex()
        self._by_date: OrderedIndex[datetime, Account] = OrderedIndex()

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, account_id: int) -> bool:
        return account_id in self._by_id

    def add_account(self, account: Account) -> bool:
        """Store a new account; False if the id is already taken"""
        if account.id in self._by_id:
            logger.debug(f"Rejected duplicate account {account.id}")
            return False

        self._by_id.insert(account.id, account)
        self._by_date.insert(account.joined_at, account)
        logger.debug(f"Added account {account.id}")
        return True

    def get_account(self, account_id: int) -> Optional[Account]:
        return self._by_id.get(account_id)

    def list_accounts(self) -> List[Account]:
        return list(self._by_date.values())

    def search(self, query: Optional[str]) -> List[Account]:
        """Accounts whose display name contains query (case sensitive)"""
        if not query:
            return []
        return [
            account for account in self._by_date.values()
            if query in account.display_name
        ]

    def list_joined_before(self, cutoff: Optional[datetime]) -> List[Account]:
        """Accounts with joined_at <= cutoff, most recent first"""
        if cutoff is None:
            return []
        return list(self._by_date.walk(lambda joined_at: 0 if joined_at <= cutoff else 1))
