"""Rotas de health check."""
