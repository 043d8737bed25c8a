"""Errors raised by the account directory and the teller helpers."""


class AtmError(Exception):
    pass


class AccountNotFound(AtmError, LookupError):
    """Raised when no account exists for the requested id."""

    def __init__(self, account_id: int):
        super().__init__(f"Account with ID {account_id} does not exist")
        self.account_id = account_id


class ParseError(AtmError, ValueError):
    """Raised when console input is not a valid integer."""

    def __init__(self, text: str):
        super().__init__(f"Expected an integer, got {text!r}")
        self.text = text
