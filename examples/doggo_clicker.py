#!/usr/bin/env python3
"""
doggo_clicker.py — A tiny clicker economy driven by merchant

================================================================================
THE GAME
================================================================================

- Cuddling gives you 1 cuddle.
- A doggo costs 1 cuddle.
- Every doggo you own produces 100 cuddles per tick.

The game keeps two ledgers:

    wallet  — what you hold (cuddles AND doggos, same namespace)
    income  — what the wallet gains on every tick

income is recomputed with effects() after every purchase, and folded into
the wallet with sum_ledgers() on every tick.

================================================================================
"""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from merchant import (
    Item,
    Ledger,
    add_item,
    buy,
    effects,
    in_the_black,
    purchase,
    sum_ledgers,
    tick,
)


CUDDLES = "cuddles"

POUCH = {
    "doggo": Item(
        "Doggo",
        cost=lambda state: Ledger.from_dict({CUDDLES: -1}),
        effect=lambda state: Ledger.from_dict({CUDDLES: 100}),
    ),
}

TICKS_PER_SECOND = 5


def show(label, wallet, income):
    doggos = wallet.get(POUCH["doggo"].type, 0)
    per_second = income.get(CUDDLES, 0) * TICKS_PER_SECOND
    print(
        f"{label:<28} cuddles={wallet.get(CUDDLES, 0):<6} "
        f"doggos={doggos:<3} ({per_second} cuddles/s)"
    )


def demonstrate_step_by_step():
    """The loop spelled out with the primitive operations."""
    print("=" * 60)
    print("STEP BY STEP")
    print("=" * 60)
    print()

    wallet = Ledger.empty()
    income = Ledger.empty()
    doggo = POUCH["doggo"]

    # Too poor: buy() happily goes negative, the caller decides.
    charged = buy(doggo, wallet)
    print(f">>> buy(doggo, {wallet})")
    print(f"{charged}  in the black? {in_the_black(charged)}")
    print()

    wallet = sum_ledgers(wallet, Ledger.from_dict({CUDDLES: 1}))
    show("cuddle", wallet, income)

    charged = buy(doggo, wallet)
    if in_the_black(charged):
        wallet = add_item(doggo, charged)
        income = effects(POUCH, wallet)
    show("buy a doggo", wallet, income)

    for _ in range(3):
        wallet = sum_ledgers(wallet, income)
        show("tick", wallet, income)
    print()


def demonstrate_helpers():
    """The same loop with purchase() and tick()."""
    print("=" * 60)
    print("WITH HELPERS")
    print("=" * 60)
    print()

    wallet = Ledger.from_dict({CUDDLES: 1})
    wallet = purchase(POUCH["doggo"], wallet)
    show("purchase a doggo", wallet, effects(POUCH, wallet))

    wallet = tick(POUCH, wallet, ticks=TICKS_PER_SECOND)
    show("one second later", wallet, effects(POUCH, wallet))

    wallet = purchase(POUCH["doggo"], wallet, amount=10)
    show("purchase 10 doggos", wallet, effects(POUCH, wallet))

    refused = purchase(POUCH["doggo"], wallet, amount=10_000)
    print(f"purchase 10000 doggos refused? {refused is wallet}")
    print()


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    demonstrate_step_by_step()
    demonstrate_helpers()


if __name__ == "__main__":
    main()
