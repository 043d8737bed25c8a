from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Account:
    name: str        
    id: int          
    balance: int     


# Actions a customer can request at the teller
@dataclass(frozen=True)
class Balance:
    pass


@dataclass(frozen=True)
class Withdraw:
    amount: int


@dataclass(frozen=True)
class Deposit:
    amount: int


@dataclass(frozen=True)
class Next:
    pass  # done with this customer, move on to the next one


@dataclass(frozen=True)
class Finished:
    pass  # shut the machine down


Action = Union[Balance, Withdraw, Deposit, Next, Finished]


@dataclass(frozen=True)
class CashBreakdown:
    notes: tuple[int, ...]  # denominations in emission order
    leftover: int
