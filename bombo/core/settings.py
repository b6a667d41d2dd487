from os import getcwd, getenv, path
from typing import Optional

from pydantic import BaseModel
from dotenv import load_dotenv

from bombo.core.rng import RandomSource

# =====================================================
# Cargar .env desde el directorio de trabajo (opcional)
# =====================================================
ENV_PATH = path.join(getcwd(), ".env")
load_dotenv(ENV_PATH)
# =====================================================

_TRUE = {"1", "true", "yes", "on", "si", "sí"}
_FALSE = {"0", "false", "no", "off"}


def env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool) -> bool:
    raw = getenv(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


class Settings(BaseModel):
    seed: Optional[int] = env_int("BOMBO_SEED")

    animation: bool = env_bool("BOMBO_ANIMATION", True)
    animation_frames: int = env_int("BOMBO_ANIMATION_FRAMES", 26)
    animation_delay_ms: int = env_int("BOMBO_ANIMATION_DELAY_MS", 45)

    pause: bool = env_bool("BOMBO_PAUSE", True)
    log_level: str = getenv("BOMBO_LOG_LEVEL", "WARNING").upper()


settings = Settings()


def make_rng(cfg: Optional[Settings] = None) -> RandomSource:
    """Generador del proceso; sin semilla configurada usa el reloj."""
    cfg = cfg or settings
    return RandomSource(cfg.seed)
