"""Order capability consumed by the payment calculator.

The calculator never builds or validates orders.  It only needs something
that can answer two questions: how much is due, and what to call it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Order(Protocol):
    """Anything exposing a final payable amount and a display name.

    ``final_value`` is read through ``float()``, so ints, ``Decimal`` and
    numeric strings are accepted and printed in float form (``12`` prints
    as ``12.0``).  Precision beyond a double is lost.
    """

    @property
    def final_value(self) -> float: ...

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class PaymentOrder:
    """Plain immutable order built from user input.

    No invariants are enforced: zero, negative and non-finite amounts as
    well as empty names are all accepted as given.
    """

    name: str
    final_value: float
