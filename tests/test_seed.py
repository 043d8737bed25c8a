import json
from pathlib import Path

import pytest

from atm.directory import AccountDirectory
from atm.domain import Account
from atm.seed import load_directory, load_seed

SEED = Path(__file__).resolve().parent.parent / "data" / "accounts.json"


def write_seed(tmp_path, data):
    path = tmp_path / "accounts.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_bundled_seed():
    accounts = load_seed(SEED)

    assert len(accounts) >= 3
    assert accounts[0] == Account("Alice", 1, 500)
    assert len({a.id for a in accounts}) == len(accounts)


def test_load_seed(tmp_path):
    path = write_seed(tmp_path, {"accounts": [
        {"name": "Alice", "id": 1, "balance": 500},
        {"name": "Bob", "id": 2, "balance": -20},
    ]})

    assert load_seed(path) == (Account("Alice", 1, 500), Account("Bob", 2, -20))


def test_load_seed_empty_list(tmp_path):
    assert load_seed(write_seed(tmp_path, {"accounts": []})) == ()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"users": []},
        {"accounts": {"name": "Alice"}},
        {"accounts": ["Alice"]},
        {"accounts": [{"name": "Alice", "id": 1}]},
        {"accounts": [{"name": "Alice", "id": "1", "balance": 5}]},
        {"accounts": [{"name": "Alice", "id": 1, "balance": 5.5}]},
        {"accounts": [{"name": "Alice", "id": True, "balance": 5}]},
        {"accounts": [{"name": 7, "id": 1, "balance": 5}]},
    ],
)
def test_load_seed_rejects_malformed(tmp_path, data):
    with pytest.raises(ValueError):
        load_seed(write_seed(tmp_path, data))


def test_load_seed_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed(tmp_path / "nope.json")


def test_load_directory(tmp_path):
    path = write_seed(tmp_path, {"accounts": [{"name": "Alice", "id": 1, "balance": 500}]})

    directory = load_directory(path)

    assert directory.get_balance(1) == 500


def test_load_directory_into_existing(tmp_path):
    path = write_seed(tmp_path, {"accounts": [
        {"name": "Alice", "id": 1, "balance": 500},
        {"name": "Bob", "id": 2, "balance": 1200},
    ]})
    directory = AccountDirectory()
    directory.initialize([Account("Zed", 1, 3)])

    result = load_directory(path, directory)

    assert result is directory
    assert directory.get_name(1) == "Zed"
    assert directory.get_name(2) == "Bob"
