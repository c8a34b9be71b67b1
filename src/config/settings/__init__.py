"""Agregador de settings do serviço de erasure.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Roblox settings
from config.settings.roblox import (
    DEFAULT_DATASTORE_NAME,
    DEFAULT_ENTRY_KEY_PREFIX,
    OPEN_CLOUD_BASE_URL,
    SIGNATURE_HEADER,
    SIGNATURE_TOLERANCE_SECONDS,
    RobloxSettings,
    get_roblox_settings,
)

__all__ = [
    # Constants
    "DEFAULT_DATASTORE_NAME",
    "DEFAULT_ENTRY_KEY_PREFIX",
    "OPEN_CLOUD_BASE_URL",
    "SIGNATURE_HEADER",
    "SIGNATURE_TOLERANCE_SECONDS",
    # Base
    "BaseSettings",
    "Environment",
    # Roblox
    "RobloxSettings",
    "get_base_settings",
    "get_roblox_settings",
]
