# bombo/api/schemas.py
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict

# -------- Modo A: nómina --------
class RosterSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    remaining: int
    drawn: int
    all: Tuple[str, ...] = ()
    pool: Tuple[str, ...] = ()
    history: Tuple[str, ...] = ()

    def status_line(self) -> str:
        return (
            f"Estado: total {self.total} / disponibles {self.remaining}"
            f" / extraídos {self.drawn}"
        )

# -------- Modo B: rango 1..N --------
class RangeSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: int
    no_repeat: bool
    # None cuando se permiten repeticiones (el pozo no aplica)
    remaining: Optional[int]
    drawn: int
    pool: Tuple[int, ...] = ()
    history: Tuple[int, ...] = ()

    def sorted_history(self) -> List[int]:
        return sorted(self.history)

    def status_line(self) -> str:
        remaining = "-" if self.remaining is None else str(self.remaining)
        return (
            f"Estado: N={self.n} / sin repetir={'sí' if self.no_repeat else 'no'}"
            f" / disponibles={remaining} / extraídos={self.drawn}"
        )
