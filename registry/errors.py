"""
Exceptions raised while producing and publishing the registration report.
"""


class RegistryError(Exception):
    """Base error for the report publisher."""


class AuthorizationFailure(RegistryError):
    """The request did not carry the shared secret."""


class ConfigurationMissing(RegistryError):
    """A required environment variable is empty or unset."""

    def __init__(self, field: str):
        super().__init__(f"Missing environment variable {field}")
        self.field = field


class MalformedRoster(RegistryError):
    """The roster export does not have the expected rows or columns."""


class MalformedDate(MalformedRoster):
    """A roster cell could not be read as a DD/MM/YYYY date."""
