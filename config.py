import logging
import os
from dataclasses import dataclass

DEFAULT_PORT = 5000
DEFAULT_API_URL = "http://localhost:5000"

@dataclass
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Reads settings from the environment once; the result is passed to create_app."""
        env = os.environ if environ is None else environ
        port_raw = env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}")
        log_level = env.get("LOG_LEVEL", "INFO").upper()
        # getLevelName maps known names to ints and anything else to "Level <name>"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")
        api_url = env.get("API_URL") or env.get("REACT_APP_API_URL") or DEFAULT_API_URL
        return cls(
            port=port,
            host=env.get("HOST", "0.0.0.0"),
            api_url=api_url.rstrip("/"),
            log_level=log_level,
        )
