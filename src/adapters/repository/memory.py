"""
In-memory account repository - Implements AddAccount protocol.

Keeps created accounts in a per-process dict. Nothing survives a restart;
this adapter exists so the API can be wired and exercised without a
database.
"""

import logging
import uuid

from src.domain.exceptions import AccountCreationError
from src.domain.models import AccountModel, AddAccountModel

logger = logging.getLogger(__name__)


class InMemoryAccountRepository:
    """
    Implements AddAccount protocol with a dict keyed by account id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Only accessed from the event loop, so no locking is needed.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, AccountModel] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Create and store an account.

        The password is accepted but never stored or logged.

        Raises:
            AccountCreationError: If the email is already in use
                (case-insensitive)
        """
        email_key = account.email.strip().lower()
        if any(existing.email.strip().lower() == email_key for existing in self._accounts.values()):
            raise AccountCreationError("Email already in use")

        created = AccountModel(id=uuid.uuid4().hex, name=account.name, email=account.email)
        self._accounts[created.id] = created
        logger.info("[ACCOUNT] Created id: %s Email: %s", created.id, created.email)
        return created

    def get(self, account_id: str) -> AccountModel | None:
        """Return the account with this id, or None."""
        return self._accounts.get(account_id)
