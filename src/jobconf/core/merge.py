# src/jobconf/core/merge.py
"""
Merge canônico de mapas de configuração de job.

Este módulo implementa a política oficial de composição de mapas de
configuração do jobconf: override à direita para todas as chaves, exceto a
chave reservada de serializações, cujo valor é **unido** e nunca
sobrescrito silenciosamente.

Política de merge (v1), para cada mapa `incoming` aplicado sobre `acc`:
    1. união: se `incoming` contém a chave reservada, seu valor passa a ser
       `merge_codec_strings(incoming[key], acc[key])` (codecs do próprio
       `incoming` têm prioridade de primeira aparição)
    2. se `incoming` não contém a chave, o valor de `acc` fica intocado
    3. overlay: todas as chaves de `incoming` sobrescrevem `acc`

Decisões arquiteturais:
    - União e overlay são passos separados e testáveis isoladamente
    - Entradas `None` na sequência são tratadas como mapas vazios
    - Com 0 ou 1 mapas nenhum passo de fold ocorre; a injeção de defaults
      nesses casos é opt-in via `inject_defaults_always`

Invariantes:
    - Nenhum input é mutado; o resultado é sempre um novo dict
    - A mesma sequência de entrada sempre produz a mesma saída

Limites explícitos:
    - Não faz deep-merge de mapas aninhados (valor aninhado é opaco)
    - Não valida semântica dos codecs
    - Não realiza I/O
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .codecs.normalize import DEFAULT_SERIALIZATIONS, merge_codec_strings
from .codecs.resolver import ClassNameResolver, NameResolver
from .config.errors import InvalidConfigMapError, InvalidMergePolicyError
from .config.hashing import compute_config_hash
from .errors import config_invalid_map
from .trace import MergeTrace


SERIALIZATIONS_KEY = "io.serializations"


def _as_map(position: int, value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidConfigMapError(payload=config_invalid_map(position=position, value=value))
    return value


def overlay(acc: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Overlay à direita: chaves de `incoming` vencem, as demais vêm de `acc`.

    Retorna um novo dicionário; nenhum dos inputs é mutado. Apenas os
    valores de `incoming` são copiados em profundidade; valores vindos de
    `acc` são compartilhados (o fold já opera sobre cópias próprias).
    """
    result: Dict[str, Any] = dict(acc)
    for key, value in incoming.items():
        result[key] = deepcopy(value)
    return result


@dataclass(frozen=True)
class ConfMerger:
    """
    Motor de composição de mapas de configuração de job.

    Campos:
    - defaults: conjunto ordenado de codecs sempre presentes (não vazio)
    - resolver: NameResolver para handles de codec não-string
    - key: chave reservada cujo valor é unido
    - inject_defaults_always: normaliza o valor final da chave mesmo quando
      nenhum passo de união o tocou (ex.: merge de um único mapa)

    Invariantes:
        - Um valor produzido pelo passo de união sempre contém os defaults,
          antes de qualquer codec extra
        - `merge` nunca muta seus argumentos
    """

    defaults: Tuple[Any, ...] = DEFAULT_SERIALIZATIONS
    resolver: NameResolver = field(default_factory=ClassNameResolver)
    key: str = SERIALIZATIONS_KEY
    inject_defaults_always: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", tuple(self.defaults))
        if not self.defaults:
            raise InvalidMergePolicyError("defaults de serialização não podem ser vazios")
        if not isinstance(self.key, str) or not self.key:
            raise InvalidMergePolicyError("key deve ser uma string não vazia")

    def merge_codecs(self, *codec_strings: Optional[str]) -> str:
        return merge_codec_strings(
            *codec_strings, defaults=self.defaults, resolver=self.resolver
        )

    def union_serializations(
        self, acc: Mapping[str, Any], incoming: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        Passo de união: retorna uma cópia de `incoming` com o valor da chave
        reservada recalculado contra o histórico de `acc`.

        Se `incoming` não contém a chave, a cópia é devolvida sem alteração.
        """
        result = dict(incoming)
        if self.key in incoming:
            result[self.key] = self.merge_codecs(incoming[self.key], acc.get(self.key))
        return result

    def merge_pair(
        self,
        acc: Mapping[str, Any],
        incoming: Mapping[str, Any],
        *,
        trace: Optional[MergeTrace] = None,
    ) -> Dict[str, Any]:
        unioned = self.union_serializations(acc, incoming)
        if trace is not None and self.key in incoming:
            trace.log(
                step="merge.union",
                level="INFO",
                message="serializations unioned",
                key=self.key,
                previous=acc.get(self.key),
                incoming=incoming[self.key],
                result=unioned[self.key],
            )
        result = overlay(acc, unioned)
        if trace is not None:
            trace.log(
                step="merge.overlay",
                level="DEBUG",
                message="map overlaid",
                keys=sorted(str(k) for k in incoming),
            )
        return result

    def merge(
        self, *maps: Optional[Mapping[str, Any]], trace: Optional[MergeTrace] = None
    ) -> Dict[str, Any]:
        """
        Compõe uma sequência ordenada de mapas em uma configuração efetiva.

        O acumulador começa como cópia do primeiro mapa (ou `{}` se a
        sequência for vazia) e cada mapa seguinte é aplicado com
        `merge_pair`.

        Args:
            *maps: mapas de configuração (ou None, tratado como vazio).
            trace: coletor opcional de eventos estruturados.

        Returns:
            Dict[str, Any]: novo dicionário com a configuração composta.

        Raises:
            InvalidConfigMapError: se algum elemento não for mapa nem None.
            InvalidCodecStringError: se o valor da chave reservada não for str.
            CodecResolutionError: propagado do NameResolver.
        """
        checked = [_as_map(i, m) for i, m in enumerate(maps)]

        if not checked:
            result: Dict[str, Any] = {}
        else:
            result = overlay({}, checked[0])
            for incoming in checked[1:]:
                result = self.merge_pair(result, incoming, trace=trace)

        if self.inject_defaults_always and self.key in result:
            result[self.key] = self.merge_codecs(result[self.key])
            if trace is not None:
                trace.log(
                    step="merge.normalize",
                    level="INFO",
                    message="serializations normalized",
                    key=self.key,
                    result=result[self.key],
                )

        if trace is not None:
            trace.log(
                step="merge.done",
                level="INFO",
                message="merge completed",
                maps=len(checked),
                config_hash=compute_config_hash(result),
            )
        return result


DEFAULT_MERGER = ConfMerger()


def conf_merge(
    *maps: Optional[Mapping[str, Any]],
    merger: Optional[ConfMerger] = None,
    trace: Optional[MergeTrace] = None,
) -> Dict[str, Any]:
    """
    Compõe mapas de configuração com a política default (ou `merger`).

    Exemplo:
        >>> conf_merge({"a": 1, "b": 2}, {"a": 99})
        {'a': 99, 'b': 2}
    """
    return (merger or DEFAULT_MERGER).merge(*maps, trace=trace)


def merge_all(
    maps: Sequence[Optional[Mapping[str, Any]]],
    *,
    merger: Optional[ConfMerger] = None,
    trace: Optional[MergeTrace] = None,
) -> Dict[str, Any]:
    """Variante de `conf_merge` que recebe a sequência de mapas já montada."""
    return conf_merge(*maps, merger=merger, trace=trace)
