from collections import deque
from typing import Iterable, List, Tuple

import pytest

from bombo.services.range_store import RangeStore
from bombo.services.roster_store import RosterStore


class ScriptedRandom:
    """Devuelve valores prefijados y registra los rangos pedidos."""

    def __init__(self, values: Iterable[int]):
        self._values = deque(values)
        self.calls: List[Tuple[int, int]] = []

    def uniform(self, lo: int, hi: int) -> int:
        self.calls.append((lo, hi))
        value = self._values.popleft()
        assert lo <= value <= hi, f"{value} fuera de [{lo}, {hi}]"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def roster():
    return RosterStore()


@pytest.fixture
def range_store():
    return RangeStore()
