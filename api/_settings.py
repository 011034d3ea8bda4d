from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ._utils import _env


DEFAULT_PORT = 8080
DEFAULT_API_URL = "https://api.metalpriceapi.com/v1/latest"
DEFAULT_STATIC_DIR = "public"


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    api_url: str = DEFAULT_API_URL
    api_key: str = ""
    timeout: Optional[float] = None
    log_level: str = "INFO"
    static_dir: str = DEFAULT_STATIC_DIR


def _pick_port() -> int:
    raw = _env("PORT", str(DEFAULT_PORT))
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid PORT: {raw!r}")


def _pick_timeout() -> Optional[float]:
    # Unset means no timeout on the outbound call (transport default).
    raw = _env("METALPRICE_TIMEOUT_SECONDS")
    if not raw:
        return None
    try:
        t = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid METALPRICE_TIMEOUT_SECONDS: {raw!r}")
    return t if t > 0 else None


def load_settings() -> Settings:
    """
    Reads settings from the environment, after loading a local .env if present.
    Real environment variables win over .env values.
    """
    load_dotenv(override=False)

    return Settings(
        port=_pick_port(),
        api_url=_env("METALPRICE_API_URL", DEFAULT_API_URL),
        api_key=_env("METALPRICE_API_KEY"),
        timeout=_pick_timeout(),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        static_dir=_env("STATIC_DIR", DEFAULT_STATIC_DIR),
    )
