"""Connector Roblox: assinatura de webhook e Open Cloud DataStore API."""

from .datastore_client import OpenCloudDataStoreClient, create_datastore_client_factory
from .signature import compute_webhook_signature, verify_webhook_signature

__all__ = [
    "OpenCloudDataStoreClient",
    "compute_webhook_signature",
    "create_datastore_client_factory",
    "verify_webhook_signature",
]
