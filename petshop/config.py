from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Arquivo SQLite relativo ao diretório de trabalho do processo
DB_PATH = Path(os.getenv("PETSHOP_DB_PATH", "petshop.db"))
DB_ECHO = _env_bool("PETSHOP_DB_ECHO")

POOL_SIZE = int(os.getenv("PETSHOP_POOL_SIZE", "5"))
POOL_TIMEOUT = float(os.getenv("PETSHOP_POOL_TIMEOUT", "30"))
BUSY_TIMEOUT = float(os.getenv("PETSHOP_BUSY_TIMEOUT", "5"))

HOST = os.getenv("PETSHOP_HOST", "127.0.0.1")
PORT = int(os.getenv("PETSHOP_PORT", "3000"))

LOG_LEVEL = os.getenv("PETSHOP_LOG_LEVEL", "INFO").upper()

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"
