"""Registro estático source → tradutor.

Montado uma vez no startup e exposto somente leitura; seguro para
acesso concorrente entre requisições.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.translators.fallback import StringifyEventTranslator
from app.translators.pipeline import PipelineEventTranslator
from app.translators.toolchain import ToolchainEventTranslator

if TYPE_CHECKING:
    from app.protocols.event_translator import EventTranslatorProtocol


class TranslatorRegistry:
    """Mapa imutável de source id para tradutor."""

    def __init__(self, translators: Mapping[str, EventTranslatorProtocol]) -> None:
        self._translators = MappingProxyType(dict(translators))

    def get(self, source: str) -> EventTranslatorProtocol | None:
        return self._translators.get(source)

    @property
    def sources(self) -> frozenset[str]:
        return frozenset(self._translators)

    def __contains__(self, source: object) -> bool:
        return source in self._translators


def build_translator_registry(generic_sources: Iterable[str] = ()) -> TranslatorRegistry:
    """Cria o registro padrão.

    Args:
        generic_sources: Sources sem tradutor dedicado que devem receber o
            tradutor genérico. Não sobrescrevem tradutores dedicados.
    """
    translators: dict[str, EventTranslatorProtocol] = {}
    fallback = StringifyEventTranslator()
    for source in generic_sources:
        translators[source] = fallback

    translators["pipeline"] = PipelineEventTranslator()
    translators["toolchain"] = ToolchainEventTranslator()
    return TranslatorRegistry(translators)
