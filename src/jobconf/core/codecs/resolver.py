# src/jobconf/core/codecs/resolver.py
"""
Resolução de identificadores de codec para nomes canônicos.

Este módulo define o contrato `NameResolver`, capacidade injetável que
converte um handle opaco (tipicamente uma classe) no nome canônico de um
serializer. O motor de merge apenas consome a string produzida.

Decisões arquiteturais:
    - A introspecção não é embutida no motor de merge
    - O resolver é injetado por `ConfMerger` e pelas funções de normalização
    - Falhas de resolução são levantadas, nunca convertidas em `None`

Limites explícitos:
    - Não verifica se o nome resolvido corresponde a uma implementação
      carregável
    - Strings nunca passam pelo resolver (já são nomes canônicos)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..config.errors import CodecResolutionError
from ..errors import codec_unresolvable


@runtime_checkable
class NameResolver(Protocol):
    """
    Contrato canônico de resolução de nome de codec.

    Qualquer objeto com um método `resolve(handle) -> str` satisfaz o
    protocolo (verificação estrutural em runtime).

    Invariantes:
        - O retorno é sempre uma string não vazia
        - Handles não resolvíveis levantam `CodecResolutionError`
    """

    def resolve(self, handle: Any) -> str:
        ...


@dataclass(frozen=True)
class ClassNameResolver:
    """
    Resolver padrão: converte uma classe em `"<module>.<qualname>"`.

    Qualquer handle que não seja uma classe é rejeitado com
    `CodecResolutionError`.
    """

    def resolve(self, handle: Any) -> str:
        if isinstance(handle, type):
            return f"{handle.__module__}.{handle.__qualname__}"
        raise CodecResolutionError(
            payload=codec_unresolvable(handle=handle, resolver=type(self).__name__)
        )


DEFAULT_RESOLVER: NameResolver = ClassNameResolver()
