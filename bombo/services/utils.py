from typing import Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)

# solo espacios ASCII, tabuladores y fin de línea
_TRIM_CHARS = " \t\r\n"


def trim_entry(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def dedup_preserve_order(items: Iterable[T]) -> List[T]:
    seen = set()
    out: List[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
