"""Extracciones sobre los pozos de ambos modos.

Siempre se sortea un índice dentro del pozo restante explícito, nunca un
valor de ``[1, N]`` reintentado hasta que no esté repetido: así cada candidato
disponible tiene la misma probabilidad. El generador se consulta antes de
mutar el estado y la mutación es una sola llamada al store, de modo que un
error deja el store intacto.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, Optional, Protocol

from bombo.core.errors import EmptyPool, NotConfigured
from bombo.services.range_store import RangeStore
from bombo.services.roster_store import RosterStore

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    def uniform(self, lo: int, hi: int) -> int: ...


def draw_from_roster(store: RosterStore, rng: UniformSource) -> str:
    size = store.pool_size
    if size == 0:
        raise EmptyPool("No queda nadie por sortear; cargue nombres o reinicie.")
    idx = rng.uniform(0, size - 1)
    winner = store.commit_draw(idx)
    logger.debug("ROSTER_DRAW idx=%d winner=%s left=%d", idx, winner, store.pool_size)
    return winner


def draw_from_range(store: RangeStore, rng: UniformSource) -> int:
    if store.n == 0:
        raise NotConfigured("Todavía no se configuró N.")
    if store.no_repeat:
        size = store.pool_size
        if size == 0:
            raise EmptyPool("No quedan números; reinicie o desactive 'sin repetir'.")
        idx = rng.uniform(0, size - 1)
        value = store.commit_draw(idx)
        logger.debug("RANGE_DRAW idx=%d value=%d left=%d", idx, value, store.pool_size)
        return value

    value = store.record(rng.uniform(1, store.n))
    logger.debug("RANGE_DRAW value=%d (con repetición)", value)
    return value


# ---------------- Vista previa (cosmética) ----------------
def preview_roster(
    store: RosterStore, frames: int, rng: Optional[random.Random] = None
) -> Iterator[str]:
    """Nombres al azar del pozo para la animación; no toca el estado."""
    pool = store.snapshot().pool
    if not pool:
        return
    rng = rng or random.Random()
    for _ in range(frames):
        yield rng.choice(pool)


def preview_range(
    store: RangeStore, frames: int, rng: Optional[random.Random] = None
) -> Iterator[int]:
    """Números al azar de ``[1, N]`` para la animación; no toca el estado."""
    if store.n == 0:
        return
    rng = rng or random.Random()
    for _ in range(frames):
        yield rng.randint(1, store.n)

