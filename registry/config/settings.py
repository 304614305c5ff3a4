"""
Configuration management - loads and validates environment variables
"""
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# ============================================
# Report Configuration (read per invocation)
# ============================================

ROSTER_URL_VAR = "ROSTER_URL"
WEBHOOK_URL_VAR = "PUBLISH_WEBHOOK_URL"
MESSAGE_IDS_VAR = "PUBLISH_MESSAGE_IDS"
SECRET_VAR = "SHARED_SECRET"

REQUIRED_VARS = (ROSTER_URL_VAR, WEBHOOK_URL_VAR, MESSAGE_IDS_VAR)


@dataclass(frozen=True)
class Settings:
    """Everything one report invocation needs from the environment."""

    roster_url: str = ""
    webhook_url: str = ""
    message_ids: Tuple[str, ...] = ()
    secret: str = ""

    def value_of(self, var_name: str):
        return {
            ROSTER_URL_VAR: self.roster_url,
            WEBHOOK_URL_VAR: self.webhook_url,
            MESSAGE_IDS_VAR: self.message_ids,
            SECRET_VAR: self.secret,
        }[var_name]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Nothing is validated here; an empty value stays empty so the caller can
    report which variable is missing.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        Frozen Settings instance
    """
    if environ is None:
        environ = os.environ

    return Settings(
        roster_url=environ.get(ROSTER_URL_VAR, "").strip(),
        webhook_url=environ.get(WEBHOOK_URL_VAR, "").strip().rstrip("/"),
        message_ids=tuple(environ.get(MESSAGE_IDS_VAR, "").split()),
        secret=environ.get(SECRET_VAR, ""),
    )


# ============================================
# Server Configuration
# ============================================

try:
    SERVER_PORT = int(os.getenv("PORT", "8000"))
    PUBLISH_INTERVAL_MINUTES = int(os.getenv("PUBLISH_INTERVAL_MINUTES", "0"))
except ValueError:
    print("❌ Error: PORT and PUBLISH_INTERVAL_MINUTES must be integers!")
    sys.exit(1)

if PUBLISH_INTERVAL_MINUTES < 0:
    print(f"⚠️  Warning: Invalid PUBLISH_INTERVAL_MINUTES ({PUBLISH_INTERVAL_MINUTES}), scheduler disabled")
    PUBLISH_INTERVAL_MINUTES = 0

TRIGGER_PATH = "/voter-registration"

# ============================================
# Export all settings
# ============================================

__all__ = [
    'Settings',
    'load_settings',
    'ROSTER_URL_VAR',
    'WEBHOOK_URL_VAR',
    'MESSAGE_IDS_VAR',
    'SECRET_VAR',
    'REQUIRED_VARS',
    'SERVER_PORT',
    'PUBLISH_INTERVAL_MINUTES',
    'TRIGGER_PATH'
]
