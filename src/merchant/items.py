"""
items.py — Items, their costs and effects, applied to a wallet

================================================================================
MODEL
================================================================================

An Item has a type (its currency name inside a wallet), an optional cost and
an optional effect. Both are functions of a caller-defined state:

    cost(state)   -> Ledger of deltas applied once, when the item is bought
    effect(state) -> Ledger of deltas produced per owned unit, per tick

The wallet counts items the same way it counts gold: Ledger.of(GOLD=10,
Sword=2) holds ten gold and two swords.

================================================================================
GAME LOOP
================================================================================

    sword = Item("Sword", cost=lambda s: Ledger.of(GOLD=-5),
                 effect=lambda s: Ledger.of(MAGIC=2))

    charged = buy(sword, wallet)
    if in_the_black(charged):           # buy() never checks affordability
        wallet = add_item(sword, charged)

    income = effects(catalog, wallet)   # recompute after every purchase
    wallet = wallet + income            # on every tick

purchase() and tick() bundle these two steps.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, Mapping, Optional, TypeVar, Union
import logging

from .errors import InvalidArgument, require_callable, require_ledger, require_ledger_result
from .ledger import Amount, Ledger, in_the_black, scale, sum_ledgers

logger = logging.getLogger(__name__)

S = TypeVar("S")


# ==============================================================================
# ITEM
# ==============================================================================

@dataclass(frozen=True)
class Item(Generic[S]):
    """
    Something that can be bought and owned.

    Attributes:
        type: currency name under which the wallet counts this item
        cost: state -> Ledger, one-time deltas (usually negative). None = free.
        effect: state -> Ledger, deltas per owned unit. None = inert.

    The operations below also accept any object exposing the same
    attributes, e.g. a SimpleNamespace loaded from a catalog.
    """
    type: str
    cost: Optional[Callable[[S], Ledger]] = None
    effect: Optional[Callable[[S], Ledger]] = None

    def __post_init__(self) -> None:
        require_callable(self, "cost")
        require_callable(self, "effect")


Items = Union[Iterable[Any], Mapping[Any, Any]]


# ==============================================================================
# COSTS
# ==============================================================================

def cost(item: Any, state: Any = None) -> Ledger:
    """
    The cost ledger of an item for the given state.

    A missing item, or an item without a cost, is free: the empty ledger.

    Raises:
        InvalidArgument: if the item's cost is set but not callable
    """
    if item is None or getattr(item, "cost", None) is None:
        return Ledger.empty()
    require_callable(item, "cost")
    return item.cost(state)


def all_costs(items: Items, state: Any = None) -> Dict[Any, Ledger]:
    """
    Cost ledgers for a whole catalog.

    A mapping keeps its own keys: {"doggo": Item("Doggo", ...)} gives
    {"doggo": <cost>}. Any other iterable is keyed by item type.
    """
    if isinstance(items, Mapping):
        return {key: cost(item, state) for key, item in items.items()}
    return {item.type: cost(item, state) for item in items}


def _checked_cost(item: Any, state: Any) -> Ledger:
    cost_ledger = cost(item, state)
    require_ledger_result(item, "cost", cost_ledger)
    return cost_ledger


# ==============================================================================
# WALLET OPERATIONS
# ==============================================================================

def buy(item: Any, wallet: Ledger, state: Any = None) -> Ledger:
    """
    Apply the item's cost to the wallet.

    Affordability is NOT checked: the returned wallet may hold negative
    amounts. Check it with in_the_black() and discard it if needed.

    Returns:
        wallet itself if the item is None or has no cost,
        otherwise sum_ledgers(cost, wallet)

    Raises:
        InvalidArgument: cost not callable, cost result not a Ledger,
        or wallet not a Ledger
    """
    if item is None or getattr(item, "cost", None) is None:
        return wallet
    return sum_ledgers(_checked_cost(item, state), wallet)


def add_item(item: Any, wallet: Ledger, amount: Amount = 1) -> Ledger:
    """
    Add amount units of the item to the wallet. The cost is not applied.

    amount is not range-checked: a negative amount takes units away, 0 adds
    the currency with no change in count.

    Raises:
        InvalidArgument: item is None or has no type, or wallet not a Ledger
    """
    if item is None or getattr(item, "type", None) is None:
        raise InvalidArgument(
            f"merchant.add_item requires an item with a type, got {item!r}"
        )
    return sum_ledgers(wallet, Ledger.from_dict({item.type: amount}))


def effects(items: Items, wallet: Ledger, state: Any = None) -> Ledger:
    """
    Combined per-tick effect of every item held in the wallet.

    Each item's effect(state) is scaled by how many of that item the wallet
    holds (0 if none). Items without an effect contribute nothing.

    Raises:
        InvalidArgument: wallet not a Ledger, effect not callable,
        or effect result not a Ledger
    """
    require_ledger(wallet, "effects")
    if isinstance(items, Mapping):
        items = items.values()

    produced = []
    for item in items:
        if getattr(item, "effect", None) is None:
            continue
        require_callable(item, "effect")
        per_unit = item.effect(state)
        require_ledger_result(item, "effect", per_unit)
        produced.append(scale(per_unit, wallet.get(item.type, 0)))

    return sum_ledgers(*produced)


# ==============================================================================
# CONVENIENCE FUNCTIONS
# ==============================================================================

def can_afford(item: Any, wallet: Ledger, state: Any = None) -> bool:
    """True if buying the item leaves no negative amount in the wallet."""
    return in_the_black(buy(item, wallet, state))


def purchase(item: Any, wallet: Ledger, state: Any = None, amount: int = 1) -> Ledger:
    """
    Buy amount units of the item if the wallet can pay for all of them.

    The cost is evaluated once for the given state and multiplied by amount.

    Returns:
        the wallet with the cost applied and the units added, or
        wallet itself (unchanged) if the purchase would leave it in the red

    Raises:
        ValueError: if amount <= 0
        InvalidArgument: as buy()
    """
    if amount <= 0:
        raise ValueError(f"amount must be > 0, got: {amount}")
    if item is None:
        return wallet

    charged = sum_ledgers(scale(_checked_cost(item, state), amount), wallet)
    if not in_the_black(charged):
        logger.debug(f"Cannot afford {amount} x {item.type}: {charged}")
        return wallet

    logger.debug(f"Bought {amount} x {item.type}")
    return add_item(item, charged, amount)


def tick(items: Items, wallet: Ledger, state: Any = None, ticks: int = 1) -> Ledger:
    """
    Advance the economy: add the items' effects to the wallet, ticks times.

    Effects are computed once from the current wallet, so units produced
    during these ticks do not compound until the next call.

    Raises:
        ValueError: if ticks <= 0
        InvalidArgument: as effects()
    """
    if ticks <= 0:
        raise ValueError(f"ticks must be > 0, got: {ticks}")
    produced = effects(items, wallet, state)
    if ticks != 1:
        produced = scale(produced, ticks)
    return sum_ledgers(wallet, produced)
