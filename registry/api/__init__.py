from .client import RegistryAPI

__all__ = ["RegistryAPI"]
