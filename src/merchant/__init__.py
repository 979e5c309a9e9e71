"""
merchant — Ledger arithmetic for resource economies

Immutable ledgers (currency name -> amount) and the pure functions that
combine them, scale them, and apply item costs and effects to a wallet.

================================================================================
QUICK START
================================================================================

    from merchant import Item, Ledger, buy, add_item, effects, in_the_black

    sword = Item(
        "Sword",
        cost=lambda state: Ledger.of(GOLD=-5),
        effect=lambda state: Ledger.of(MAGIC=2),
    )

    wallet = Ledger.of(GOLD=10)

    charged = buy(sword, wallet)        # Ledger(GOLD=5)
    if in_the_black(charged):
        wallet = add_item(sword, charged)   # Ledger(GOLD=5, Sword=1)

    income = effects([sword], wallet)   # Ledger(MAGIC=2)
    wallet = wallet + income            # once per tick

================================================================================
"""

import logging

from .errors import InvalidArgument

from .ledger import (
    Amount,
    Ledger,
    sum_ledgers,
    scale,
    in_the_black,
    in_the_red,
    currencies,
    total_of,
)

from .items import (
    Item,
    cost,
    all_costs,
    buy,
    add_item,
    effects,
    can_afford,
    purchase,
    tick,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "InvalidArgument",
    # Ledger
    "Amount",
    "Ledger",
    "sum_ledgers",
    "scale",
    "in_the_black",
    "in_the_red",
    "currencies",
    "total_of",
    # Items
    "Item",
    "cost",
    "all_costs",
    "buy",
    "add_item",
    "effects",
    "can_afford",
    "purchase",
    "tick",
]
