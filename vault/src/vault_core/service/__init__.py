"""Vault service layer."""

from .access import AccessPolicy
from .facade import VaultFacade, get_vault_facade
from .permission_registry import PermissionRegistry
from .vault_store import VaultStore

__all__ = ["AccessPolicy", "PermissionRegistry", "VaultFacade", "VaultStore", "get_vault_facade"]
