from .settings import VaultSettings, get_settings

__all__ = ["VaultSettings", "get_settings"]
