"""Conector TIAM: introspecção de credenciais de toolchain."""

from .client import TiamIntrospectionClient, create_tiam_client

__all__ = [
    "TiamIntrospectionClient",
    "create_tiam_client",
]
