"""Rotas da Roblox (webhook de privacidade)."""
