from __future__ import annotations

import logging
from typing import Iterable, List

from bombo.api.schemas import RosterSnapshot
from bombo.core.errors import IoError
from bombo.services.roster_io import read_roster_lines, write_history_csv
from bombo.services.utils import dedup_preserve_order, trim_entry

logger = logging.getLogger(__name__)


class RosterStore:
    """Estado del modo A: nómina completa, pozo disponible e historial.

    Invariantes tras cada operación: ``pool`` e ``history`` son disjuntos,
    juntos reconstruyen ``all`` y ``all`` no tiene duplicados.
    """

    def __init__(self) -> None:
        self._all: List[str] = []
        self._pool: List[str] = []
        self._history: List[str] = []

    # ------------- Carga -------------
    def add_many(self, lines: Iterable[str]) -> int:
        """Agrega nombres (recortados, sin vacíos) conservando el orden.

        Devuelve las líneas aceptadas antes de quitar duplicados; el
        crecimiento neto se ve en ``snapshot().total``. Un nombre ya presente
        en la nómina no vuelve al pozo aunque ya haya salido sorteado.
        """
        added = 0
        fresh: List[str] = []
        for line in lines:
            name = trim_entry(line)
            if not name:
                continue
            added += 1
            fresh.append(name)

        known = set(self._all)
        new_names = [n for n in dedup_preserve_order(fresh) if n not in known]
        self._all.extend(new_names)
        self._pool.extend(new_names)
        logger.debug("ROSTER_ADD accepted=%d new=%d total=%d", added, len(new_names), len(self._all))
        return added

    def load_file(self, path: str) -> int:
        """Carga un archivo UTF-8 de un nombre por línea.

        Si la lectura falla a mitad de archivo, lo leído hasta ese punto se
        conserva y se relanza el :class:`IoError`.
        """
        names: List[str] = []
        try:
            for name in read_roster_lines(path):
                names.append(name)
        except IoError:
            if names:
                self.add_many(names)
            raise
        return self.add_many(names)

    # ------------- Ciclo de vida -------------
    def reset(self) -> None:
        self._pool = list(self._all)
        self._history = []
        logger.debug("ROSTER_RESET pool=%d", len(self._pool))

    def commit_draw(self, index: int) -> str:
        """Mueve ``pool[index]`` al historial; el resto del pozo mantiene su orden."""
        winner = self._pool.pop(index)
        self._history.append(winner)
        return winner

    # ------------- Consultas / export -------------
    def export_history(self, path: str) -> None:
        write_history_csv(path, self._history)

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(
            total=len(self._all),
            remaining=len(self._pool),
            drawn=len(self._history),
            all=tuple(self._all),
            pool=tuple(self._pool),
            history=tuple(self._history),
        )

    @property
    def pool_size(self) -> int:
        return len(self._pool)
