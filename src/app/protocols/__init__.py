"""Protocolos e contratos do core da aplicação."""

from .credential_introspector import CredentialIntrospectorProtocol, IntrospectionError
from .event_translator import EventTranslatorProtocol, TranslationError
from .message_client import MessageClientProtocol, MessagePostResponse, MessageTransportError
from .service_instance_store import ServiceInstanceStoreProtocol

__all__ = [
    "CredentialIntrospectorProtocol",
    "EventTranslatorProtocol",
    "IntrospectionError",
    "MessageClientProtocol",
    "MessagePostResponse",
    "MessageTransportError",
    "ServiceInstanceStoreProtocol",
    "TranslationError",
]
