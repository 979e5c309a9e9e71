"""
errors.py — InvalidArgument and the shape checks shared by every operation

All merchant failures are wrong-type inputs: something that is not a Ledger
where a Ledger is required, or a cost/effect attribute that cannot be called.
They are raised synchronously, before any ledger is merged.
"""

from __future__ import annotations
from typing import Any


class InvalidArgument(TypeError):
    """Raised when an operation receives an argument of the wrong shape."""


def require_ledger(value: Any, func_name: str) -> None:
    """
    Raise InvalidArgument unless value is a Ledger.

    The check is on the type, not the contents: a dict or a bare PMap with
    the same keys and values is still rejected.
    """
    # Imported here: ledger.py imports this module.
    from .ledger import Ledger

    if not isinstance(value, Ledger):
        raise InvalidArgument(
            f"merchant.{func_name} requires a Ledger, "
            f"got {type(value).__name__}"
        )


def require_ledger_result(item: Any, attribute: str, result: Any) -> None:
    """Raise InvalidArgument if a cost/effect function did not return a Ledger."""
    from .ledger import Ledger

    if not isinstance(result, Ledger):
        raise InvalidArgument(
            f'The {attribute} of the item of type "{getattr(item, "type", "?")}" '
            f"returned {type(result).__name__}, not a Ledger."
        )


def require_callable(item: Any, attribute: str) -> None:
    """
    Raise InvalidArgument if item.<attribute> is set but not callable.

    A missing or None attribute is fine: items are free and inert by default.
    """
    value = getattr(item, attribute, None)
    if value is None:
        return
    if not callable(value):
        raise InvalidArgument(
            f'The item of type "{getattr(item, "type", "?")}" has a '
            f"{attribute} attribute that is not callable."
        )
