"""Tradutores de eventos por sistema de origem (source id)."""

from app.translators.fallback import StringifyEventTranslator
from app.translators.pipeline import PipelineEventTranslator
from app.translators.registry import TranslatorRegistry, build_translator_registry
from app.translators.toolchain import ToolchainEventTranslator

__all__ = [
    "PipelineEventTranslator",
    "StringifyEventTranslator",
    "ToolchainEventTranslator",
    "TranslatorRegistry",
    "build_translator_registry",
]
