"""Fuente de aleatoriedad inyectable para los sorteos.

Cada sorteo recibe una instancia de :class:`RandomSource`; ningún módulo del
motor usa el estado global de ``random``. Con la misma semilla la secuencia
de resultados es idéntica, lo que permite reproducir una sesión.
"""

from __future__ import annotations

import random
import time
from typing import Optional


class RandomSource:
    """Generador uniforme de enteros sobre ``random.Random`` (Mersenne Twister).

    No es criptográficamente seguro.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def uniform(self, lo: int, hi: int) -> int:
        """Entero uniforme en el rango cerrado ``[lo, hi]``."""
        if lo > hi:
            raise ValueError(f"rango vacío: lo={lo} > hi={hi}")
        return self._rng.randint(lo, hi)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"

