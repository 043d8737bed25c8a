from dataclasses import replace
from typing import Iterable, Iterator, Mapping, Union

from atm.domain import Account
from atm.errors import AccountNotFound
from atm.logging_config import get_logger

logger = get_logger("directory")

AccountRecord = Union[Account, Mapping[str, object]]


def _to_account(record: AccountRecord) -> Account:
    if isinstance(record, Account):
        return record
    return Account(name=record["name"], id=record["id"], balance=record["balance"])


class AccountDirectory:
    """In-memory accounts keyed by id.

    Records are immutable; a balance change swaps in a new ``Account``.
    Every read or update of an unknown id raises ``AccountNotFound``.
    """

    def __init__(self):
        self._accounts: dict[int, Account] = {}

    def initialize(self, records: Iterable[AccountRecord]) -> None:
        """Add every record, keeping whatever is already stored.

        When an id is already present the stored record wins and the new one
        is ignored, whether it came from an earlier call or earlier in ``records``.
        """
        added = 0
        for record in records:
            acc = _to_account(record)
            if acc.id in self._accounts:
                logger.debug("Ignoring duplicate account id %s", acc.id)
                continue
            self._accounts[acc.id] = acc
            added += 1
        logger.info("Initialized %d account(s), directory holds %d", added, len(self._accounts))

    def lookup(self, account_id: int) -> Account:
        try:
            return self._accounts[account_id]
        except KeyError:
            raise AccountNotFound(account_id) from None

    def get_balance(self, account_id: int) -> int:
        return self.lookup(account_id).balance

    def get_name(self, account_id: int) -> str:
        return self.lookup(account_id).name

    def update_balance(self, account_id: int, new_balance: int) -> None:
        old = self.lookup(account_id)
        self._accounts[account_id] = replace(old, balance=new_balance)
        logger.info(
            "Balance for account %s set to %d (was %d)",
            account_id, new_balance, old.balance,
            extra={"account_id": account_id},
        )

    def accounts(self) -> tuple[Account, ...]:
        return tuple(self)

    def __iter__(self) -> Iterator[Account]:
        for account_id in sorted(self._accounts):
            yield self._accounts[account_id]

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts
