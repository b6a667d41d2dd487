"""Lectura de nóminas (archivo o teclado) y exportación del historial a CSV."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from bombo.core.errors import IoError
from bombo.services.utils import trim_entry

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def read_roster_lines(path: str) -> Iterator[str]:
    """Genera los nombres no vacíos de un archivo UTF-8, uno por línea.

    El archivo se lee en binario y se corta por ``\\n``; en UTF-8 ese byte
    nunca aparece dentro de una secuencia multibyte, así que cada línea se
    decodifica completa. Cualquier fallo (apertura, lectura o UTF-8 inválido)
    se convierte en :class:`IoError`; los nombres ya entregados quedan
    entregados.
    """
    try:
        fh = open(path, "rb")
    except OSError as e:
        logger.warning("ROSTER_OPEN_FAILED path=%s err=%s", path, e)
        raise IoError(path, e.strerror) from e

    with fh:
        lineno = 0
        try:
            for raw in fh:
                lineno += 1
                text = raw.decode("utf-8")
                if lineno == 1 and text.startswith(_BOM):
                    text = text[len(_BOM):]
                name = trim_entry(text)
                if name:
                    yield name
        except UnicodeDecodeError as e:
            logger.warning("ROSTER_DECODE_FAILED path=%s line=%d", path, lineno)
            raise IoError(path, f"UTF-8 inválido en la línea {lineno}") from e
        except OSError as e:
            logger.warning("ROSTER_READ_FAILED path=%s line=%d err=%s", path, lineno, e)
            raise IoError(path, e.strerror) from e


def iter_interactive_names(lines: Iterable[str]) -> Iterator[str]:
    """Nombres tecleados hasta la primera línea en blanco (o fin de entrada)."""
    for line in lines:
        name = trim_entry(line)
        if not name:
            return
        yield name


def write_history_csv(path: str, history: Sequence[str]) -> None:
    """Escribe ``indice,nombre`` por cada extracción, sin cabecera.

    Los nombres se escriben tal cual, sin comillas ni escapes: una coma
    dentro de un nombre queda como separador extra al releer el archivo.

    Crea o sobrescribe el archivo; con historial vacío queda un archivo de
    cero bytes.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            for i, name in enumerate(history, start=1):
                f.write(f"{i},{name}\n")
    except OSError as e:
        logger.warning("HISTORY_EXPORT_FAILED path=%s err=%s", path, e)
        raise IoError(path, e.strerror) from e
    logger.debug("HISTORY_EXPORTED path=%s rows=%d", path, len(history))

