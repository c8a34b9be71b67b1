"""Connectors — adapters de borda para APIs externas.

Estrutura:
- roblox/: assinatura dos webhooks e Open Cloud DataStore API
"""
