from __future__ import annotations

from typing import Optional


class DrawError(Exception):
    """Error recuperable del motor de sorteos.

    El menú activo la captura y muestra ``[kind] message``; nunca termina
    el proceso.
    """

    kind = "DrawError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"


class InvalidInput(DrawError):
    kind = "InvalidInput"


class DomainError(DrawError):
    kind = "DomainError"


class NotConfigured(DrawError):
    kind = "NotConfigured"


class EmptyPool(DrawError):
    kind = "EmptyPool"


class IoError(DrawError):
    kind = "IoError"

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"No se pudo acceder al archivo: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason

