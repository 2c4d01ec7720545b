"""Hand-written order doubles for testing.

The calculator only depends on the ``Order`` protocol, so these are plain
classes with no relation to ``PaymentOrder``.
"""

from __future__ import annotations


class FakeOrder:

    def __init__(self, final_value: float, name: str) -> None:
        self.final_value = final_value
        self.name = name


class CountingOrder:
    """Records how many times each field was read."""

    def __init__(self, final_value: float, name: str) -> None:
        self._final_value = final_value
        self._name = name
        self.reads: dict[str, int] = {"final_value": 0, "name": 0}

    @property
    def final_value(self) -> float:
        self.reads["final_value"] += 1
        return self._final_value

    @property
    def name(self) -> str:
        self.reads["name"] += 1
        return self._name


class BrokenOrder:
    """An order whose amount cannot be read."""

    name = "Broken"

    @property
    def final_value(self) -> float:
        raise RuntimeError("pricing backend unavailable")
