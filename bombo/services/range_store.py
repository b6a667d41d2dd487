from __future__ import annotations

import logging
from typing import List

from bombo.api.schemas import RangeSnapshot
from bombo.core.errors import DomainError

logger = logging.getLogger(__name__)

# tope de N: el pozo sin repetir se materializa completo en memoria
MAX_N = 1_000_000


class RangeStore:
    """Estado del modo B: sorteo de enteros en ``1..N``.

    ``N = 0`` significa "sin configurar". El pozo sólo se usa con
    ``no_repeat`` activo; sin él queda vacío y el historial admite
    repeticiones.
    """

    def __init__(self, no_repeat: bool = True) -> None:
        self._n = 0
        self._no_repeat = no_repeat
        self._pool: List[int] = []
        self._history: List[int] = []

    @property
    def n(self) -> int:
        return self._n

    @property
    def no_repeat(self) -> bool:
        return self._no_repeat

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    # ------------- Configuración -------------
    def set_n(self, n: int) -> None:
        if n <= 0 or n > MAX_N:
            self._n = 0
            self._pool = []
            self._history = []
            if n <= 0:
                raise DomainError(f"N debe ser mayor que 0 (recibido {n})")
            raise DomainError(f"N no puede superar {MAX_N} (recibido {n})")
        self._n = n
        self.reset()

    def toggle_no_repeat(self) -> bool:
        self._no_repeat = not self._no_repeat
        if self._no_repeat:
            self.reset()
        else:
            # el historial se conserva; el pozo deja de aplicar
            self._pool = []
        logger.debug("RANGE_TOGGLE no_repeat=%s", self._no_repeat)
        return self._no_repeat

    def reset(self) -> None:
        self._pool = list(range(1, self._n + 1)) if self._no_repeat else []
        self._history = []
        logger.debug("RANGE_RESET n=%d pool=%d", self._n, len(self._pool))

    # ------------- Mutaciones del motor -------------
    def commit_draw(self, index: int) -> int:
        value = self._pool.pop(index)
        self._history.append(value)
        return value

    def record(self, value: int) -> int:
        if not 1 <= value <= self._n:
            raise ValueError(f"{value} fuera de [1, {self._n}]")
        self._history.append(value)
        return value

    def snapshot(self) -> RangeSnapshot:
        return RangeSnapshot(
            n=self._n,
            no_repeat=self._no_repeat,
            remaining=len(self._pool) if self._no_repeat else None,
            drawn=len(self._history),
            pool=tuple(self._pool),
            history=tuple(self._history),
        )
