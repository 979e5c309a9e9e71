"""
ledger.py — Ledger value type and ledger arithmetic

================================================================================
DESIGN PRINCIPLES
================================================================================

1. A LEDGER IS A TYPE
   Ledger wraps a pyrsistent PMap. A dict with the same keys and values is
   NOT a ledger: every operation rejects it with InvalidArgument.

2. IMMUTABILITY
   Frozen dataclass over a persistent map. Every operation returns a new
   Ledger; the inputs are never touched. Safe to share across threads.

3. ABSENT MEANS ZERO
   A currency missing from a ledger counts as 0 in every sum. No ledgers at
   all sum to the empty ledger, the additive identity.

4. NO HIDDEN COPIES
   sum_ledgers() of a single ledger returns that very object.

5. ONE NUMBER TYPE PER ECONOMY
   Amounts are added with +, so their types must mix: int with float,
   int with Decimal, int with Fraction. Decimal and float do not mix; a sum
   over both raises TypeError. Pick one of them per economy.

================================================================================
USAGE
================================================================================

    from merchant import Ledger, sum_ledgers, scale, in_the_black

    wallet = Ledger.of(GOLD=0)
    expenses = Ledger.of(GOLD=-5)
    profits = Ledger.of(GOLD=10, SILVER=3)

    total = sum_ledgers(wallet, expenses, profits)
    total.get("GOLD")    # 5
    total.get("SILVER")  # 3

    income = scale(Ledger.of(GOLD=2, INFLUENCE=5), 3)
    income.get("INFLUENCE")  # 15

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Number
from typing import Any, Iterator, Mapping, Optional, Tuple, Union
import operator

from pyrsistent import PMap, pmap

from .errors import InvalidArgument, require_ledger


Amount = Union[int, float, Decimal, Fraction]


# ==============================================================================
# LEDGER
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Ledger:
    """
    Immutable mapping from currency name to amount.

    INVARIANTS:
    1. _balances is always a PMap (persistent, hashable)
    2. equality is structural: same currencies, same amounts
    3. reading an absent currency through get(currency, 0) yields 0

    USAGE:
        wallet = Ledger.of(GOLD=10)
        wallet = wallet + Ledger.of(GOLD=-5)   # Ledger.of(GOLD=5)
        wallet * 2                             # Ledger.of(GOLD=10)

    Currencies that are not valid Python identifiers go through from_dict():
        Ledger.from_dict({"Magic Sword": 1})
    """
    _balances: PMap

    def __post_init__(self) -> None:
        if not isinstance(self._balances, PMap):
            raise InvalidArgument(
                f"Ledger wraps a pyrsistent PMap, got {type(self._balances).__name__}. "
                f"Use Ledger.from_dict() for other mappings."
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, **balances: Amount) -> Ledger:
        """Ledger from keyword arguments: Ledger.of(GOLD=5, SILVER=2)."""
        return cls(pmap(balances))

    @classmethod
    def from_dict(cls, data: Mapping[str, Amount]) -> Ledger:
        """Ledger from any mapping. The mapping is copied, never kept."""
        return cls(pmap(data))

    @classmethod
    def empty(cls) -> Ledger:
        """The empty ledger. Additive identity for sum_ledgers()."""
        return cls(pmap())

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def get(self, currency: str, default: Optional[Amount] = None) -> Optional[Amount]:
        return self._balances.get(currency, default)

    def __getitem__(self, currency: str) -> Amount:
        return self._balances[currency]

    def __contains__(self, currency: object) -> bool:
        return currency in self._balances

    def __iter__(self) -> Iterator[str]:
        return iter(self._balances)

    def __len__(self) -> int:
        return len(self._balances)

    def keys(self):
        return self._balances.keys()

    def values(self):
        return self._balances.values()

    def items(self):
        return self._balances.items()

    def is_empty(self) -> bool:
        return len(self._balances) == 0

    # -------------------------------------------------------------------------
    # Operators (thin wrappers over the module functions)
    # -------------------------------------------------------------------------

    def __add__(self, other: Ledger) -> Ledger:
        if not isinstance(other, Ledger):
            raise InvalidArgument(
                f"Operation not allowed: Ledger + {type(other).__name__}. "
                f"Wrap it with Ledger.from_dict() first."
            )
        return sum_ledgers(self, other)

    def __sub__(self, other: Ledger) -> Ledger:
        if not isinstance(other, Ledger):
            raise InvalidArgument(
                f"Operation not allowed: Ledger - {type(other).__name__}."
            )
        return sum_ledgers(self, scale(other, -1))

    def __neg__(self) -> Ledger:
        return scale(self, -1)

    def __mul__(self, factor: Amount) -> Ledger:
        if isinstance(factor, Ledger) or not isinstance(factor, Number):
            return NotImplemented
        return scale(self, factor)

    def __rmul__(self, factor: Amount) -> Ledger:
        return self.__mul__(factor)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Plain dict copy, e.g. for a rendering layer."""
        return dict(self._balances)

    def __repr__(self) -> str:
        body = ", ".join(
            f"{currency}={amount!r}"
            for currency, amount in sorted(self._balances.items())
        )
        return f"Ledger({body})"

    def __str__(self) -> str:
        return self.__repr__()


# ==============================================================================
# LEDGER ARITHMETIC
# ==============================================================================

def sum_ledgers(*ledgers: Ledger) -> Ledger:
    """
    Add any number of ledgers together, currency by currency.

    A currency missing from an operand counts as 0; every currency of every
    operand is kept.

    Returns:
        - no ledgers: the empty ledger
        - one ledger: that same ledger object
        - otherwise: a new ledger with the summed amounts

    Raises:
        InvalidArgument: if any operand is not a Ledger (checked before
        anything is merged)
    """
    for ledger in ledgers:
        require_ledger(ledger, "sum_ledgers")

    if not ledgers:
        return Ledger.empty()
    if len(ledgers) == 1:
        return ledgers[0]

    first, *rest = ledgers
    merged = first._balances.update_with(
        operator.add, *(ledger._balances for ledger in rest)
    )
    return Ledger(merged)


def scale(ledger: Ledger, factor: Amount) -> Ledger:
    """
    Multiply every amount in the ledger by factor.

    Handy for turning a per-unit effect into the effect of n units:
        scale(Ledger.of(GOLD=2, INFLUENCE=5), salesfolk)

    The key set is preserved, including currencies that scale to 0.
    """
    require_ledger(ledger, "scale")
    return Ledger(pmap({
        currency: amount * factor
        for currency, amount in ledger.items()
    }))


def in_the_black(ledger: Ledger) -> bool:
    """True if no amount is negative. True for the empty ledger."""
    require_ledger(ledger, "in_the_black")
    return all(amount >= 0 for amount in ledger.values())


def in_the_red(ledger: Ledger) -> bool:
    """True if every amount is negative. True for the empty ledger."""
    require_ledger(ledger, "in_the_red")
    return all(amount < 0 for amount in ledger.values())


def currencies(*ledgers: Ledger) -> Tuple[str, ...]:
    """Every currency that appears in any of the ledgers, each exactly once."""
    for ledger in ledgers:
        require_ledger(ledger, "currencies")
    return tuple(dict.fromkeys(
        currency for ledger in ledgers for currency in ledger
    ))


def total_of(currency: str, *ledgers: Ledger) -> Any:
    """
    Sum of a single currency across the ledgers.

    0 when no ledgers are given or the currency appears in none of them.
    """
    for ledger in ledgers:
        require_ledger(ledger, "total_of")
    return sum_ledgers(*ledgers).get(currency, 0)
