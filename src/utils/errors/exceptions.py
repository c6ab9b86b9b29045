"""Exceções de infraestrutura e de colaboradores externos."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class ServiceInstanceStoreError(InfrastructureError):
    """Falha ao consultar o store de service instances (exceto not found)."""


class RedisConnectionError(ServiceInstanceStoreError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(ServiceInstanceStoreError):
    """Falha de indisponibilidade ao acessar Firestore."""


class InvalidServiceInstanceError(ServiceInstanceStoreError):
    """Documento de service instance com formato inválido."""
