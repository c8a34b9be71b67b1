"""API — camada de borda e adapters.

Responsabilidades:
- Receber webhooks da Roblox
- Validar assinaturas e payloads
- Chamar a Open Cloud DataStore API

Subpastas:
- connectors/: adapters HTTP por plataforma
- routes/: endpoints HTTP (webhook, health, status)

NÃO PODE conter: regras de agregação da erasure (ficam em app/use_cases).
"""
