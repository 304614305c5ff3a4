"""
Request authorization and configuration checks.
"""
import hmac
from typing import Optional

from ..config.settings import REQUIRED_VARS, Settings
from ..errors import AuthorizationFailure, ConfigurationMissing


def check_secret(provided: Optional[str], settings: Settings) -> None:
    """Raise AuthorizationFailure unless `provided` equals the shared secret exactly"""
    if provided is None or not settings.secret:
        raise AuthorizationFailure("Invalid secret")
    if not hmac.compare_digest(provided.encode("utf-8"), settings.secret.encode("utf-8")):
        raise AuthorizationFailure("Invalid secret")


def check_settings(settings: Settings) -> None:
    """Raise ConfigurationMissing for the first empty required variable"""
    for var_name in REQUIRED_VARS:
        if not settings.value_of(var_name):
            raise ConfigurationMissing(var_name)
