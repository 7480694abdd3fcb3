"""Runtime configuration and logging setup for payinstruct.

Values come from the environment (optionally a local .env file).
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("PAYINSTRUCT_LOG_LEVEL", "INFO")

# Audit job
AUDIT_ENABLED = _env_flag("PAYINSTRUCT_AUDIT_ENABLED", "true")
AUDIT_MAX_EVENTS = int(os.getenv("PAYINSTRUCT_AUDIT_MAX_EVENTS", "1000"))

# Server
HOST = os.getenv("PAYINSTRUCT_HOST", "0.0.0.0")
PORT = int(os.getenv("PAYINSTRUCT_PORT", "8000"))
RELOAD = _env_flag("PAYINSTRUCT_RELOAD", "false")


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure application logging on stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
