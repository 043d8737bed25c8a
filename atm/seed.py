import json
from pathlib import Path
from typing import Optional, Union

from atm.directory import AccountDirectory
from atm.domain import Account
from atm.logging_config import get_logger

logger = get_logger("seed")

PathLike = Union[str, Path]


def _check_int(value, field: str, index: int) -> int:
    # bool is an int subclass, reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"accounts[{index}].{field} must be an integer, got {value!r}")
    return value


def _parse_account(raw, index: int) -> Account:
    if not isinstance(raw, dict):
        raise ValueError(f"accounts[{index}] must be an object, got {type(raw).__name__}")
    missing = {"name", "id", "balance"} - raw.keys()
    if missing:
        raise ValueError(f"accounts[{index}] is missing {', '.join(sorted(missing))}")
    if not isinstance(raw["name"], str):
        raise ValueError(f"accounts[{index}].name must be a string, got {raw['name']!r}")
    return Account(
        name=raw["name"],
        id=_check_int(raw["id"], "id", index),
        balance=_check_int(raw["balance"], "balance", index),
    )


def load_seed(path: PathLike) -> tuple[Account, ...]:
    """Read the accounts listed in a JSON seed file.

    The document looks like ``{"accounts": [{"name": ..., "id": ..., "balance": ...}]}``.
    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` for a
    malformed one.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("accounts"), list):
        raise ValueError(f"{path}: expected an object with an 'accounts' list")

    accounts = tuple(_parse_account(a, i) for i, a in enumerate(data["accounts"]))
    logger.debug("Loaded %d account(s) from %s", len(accounts), path)
    return accounts


def load_directory(path: PathLike, directory: Optional[AccountDirectory] = None) -> AccountDirectory:
    if directory is None:
        directory = AccountDirectory()
    directory.initialize(load_seed(path))
    return directory
