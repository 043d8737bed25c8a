"""Teller helpers: acquiring input from the customer, presenting results
and dispensing cash.

Each helper takes an optional ``Console``; without one it talks to
stdin/stdout.
"""

from typing import Optional

from atm.console import Console
from atm.domain import Action, Balance, CashBreakdown, Deposit, Finished, Next, Withdraw
from atm.logging_config import get_logger

logger = get_logger("teller")

ID_PROMPT = "Enter customer id: "
AMOUNT_PROMPT = "Enter amount: "
ACTION_PROMPT = "Enter action: (B) Balance (-) Withdraw (+) Deposit (=) Done (X) Exit: "

HUNDRED = 100
FIFTY = 50
TWENTY = 20


def _console(console: Optional[Console]) -> Console:
    return console if console is not None else Console()


def _rem(a: int, b: int) -> int:
    # truncated remainder, sign follows the dividend
    r = abs(a) % b
    return -r if a < 0 else r


def acquire_id(console: Optional[Console] = None) -> int:
    console = _console(console)
    console.prompt(ID_PROMPT)
    return console.read_int()


def acquire_amount(console: Optional[Console] = None) -> int:
    console = _console(console)
    console.prompt(AMOUNT_PROMPT)
    return console.read_int()


def acquire_action(console: Optional[Console] = None) -> Action:
    """Prompt until the customer enters a recognized action token.

    ``+`` and ``-`` go on to ask for an amount; a bad amount raises
    ``ParseError`` instead of re-prompting.
    """
    console = _console(console)
    while True:
        console.prompt(ACTION_PROMPT)
        token = console.read_line().strip()
        if token == "B":
            return Balance()
        if token == "+":
            return Deposit(acquire_amount(console))
        if token == "-":
            return Withdraw(acquire_amount(console))
        if token == "=":
            return Next()
        if token == "X":
            return Finished()
        logger.debug("Unrecognized action token %r", token)


def cash_breakdown(amount: int) -> CashBreakdown:
    notes = []
    remaining = amount
    while True:
        if remaining >= HUNDRED:
            notes.append(HUNDRED)
            remaining -= HUNDRED
        elif remaining >= FIFTY:
            notes.append(FIFTY)
            remaining -= FIFTY
        elif remaining > TWENTY:
            notes.append(TWENTY)
            remaining -= TWENTY
        else:
            break
    # Leftover comes from the requested amount, not from `remaining`
    # (e.g. 40 gives one twenty and reports 0). Kept for compatibility.
    leftover = _rem(_rem(amount, FIFTY), TWENTY)
    return CashBreakdown(notes=tuple(notes), leftover=leftover)


def format_cash(breakdown: CashBreakdown) -> str:
    tags = "".join(f"[{note} @ 1]" for note in breakdown.notes)
    return f"Here's your cash: {tags} and {breakdown.leftover} more"


def present_message(text: str, console: Optional[Console] = None) -> None:
    _console(console).write_line(text)


def deliver_cash(amount: int, console: Optional[Console] = None) -> None:
    """Dispense ``amount`` (by printing it); account balances are untouched."""
    breakdown = cash_breakdown(amount)
    logger.info("Dispensing %d as %s, leftover %d", amount, list(breakdown.notes), breakdown.leftover)
    present_message(format_cash(breakdown), console)
