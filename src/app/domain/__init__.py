"""Modelos de domínio do relay."""
