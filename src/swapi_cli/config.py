import logging
import os
from dotenv import load_dotenv

# Load .env (if present) so env-based configuration works in dev
load_dotenv()

# Env vars whose values could not be used; the CLI warns about them once logging is up
IGNORED_ENV: list[str] = []


def _float_env(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        IGNORED_ENV.append(name)
        return None


def _level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        IGNORED_ENV.append(name)
        return default
    return level


# Remote API (overrideable via env or --base-url)
SWAPI_BASE_URL = os.getenv("SWAPI_BASE_URL", "https://swapi.dev/api")

# Request timeout in seconds; unset means wait for the server indefinitely
SWAPI_TIMEOUT = _float_env("SWAPI_TIMEOUT")

LOG_LEVEL = _level_env("LOG_LEVEL", "WARNING")

# Single exit status for every runtime failure (0xBAD)
EXIT_FAILURE = 0xBAD
