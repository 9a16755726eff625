# src/jobconf/core/config/policy.py
"""
Política declarativa de merge de serializações.

Este módulo constrói um `ConfMerger` a partir de uma política declarada em
dicionário ou arquivo (YAML/JSON), permitindo que o conjunto default de
codecs e a chave reservada sejam configuração do chamador, e não dados
embutidos no motor de merge.

Formato (v1):

    serializations:
      key: io.serializations
      defaults:
        - WritableSerialization
        - BytesSerialization
        - TupleSerialization
      inject_defaults_always: false

Todos os campos são opcionais; campos ausentes usam os defaults do
`ConfMerger`. Campos desconhecidos são rejeitados.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..codecs.resolver import NameResolver
from ..merge import ConfMerger
from .errors import InvalidMergePolicyError
from .loader import load_config_map


POLICY_SECTION = "serializations"
_ALLOWED_FIELDS = {"key", "defaults", "inject_defaults_always"}


def merger_from_dict(
    data: Mapping[str, Any], *, resolver: Optional[NameResolver] = None
) -> ConfMerger:
    """
    Constrói um `ConfMerger` a partir de uma política em dicionário.

    Raises:
        InvalidMergePolicyError: se a seção for inválida.
    """
    section = data.get(POLICY_SECTION) or {}
    if not isinstance(section, Mapping):
        raise InvalidMergePolicyError(
            f"Seção '{POLICY_SECTION}' deve ser mapa, recebido: {type(section).__name__}"
        )

    unknown = sorted(set(section) - _ALLOWED_FIELDS)
    if unknown:
        raise InvalidMergePolicyError(f"Campos desconhecidos em '{POLICY_SECTION}': {unknown}")

    kwargs: Dict[str, Any] = {}

    if "key" in section:
        kwargs["key"] = section["key"]

    if "defaults" in section:
        defaults = section["defaults"]
        if not isinstance(defaults, list) or not all(isinstance(d, str) for d in defaults):
            raise InvalidMergePolicyError("defaults deve ser uma lista de strings")
        kwargs["defaults"] = tuple(defaults)

    if "inject_defaults_always" in section:
        flag = section["inject_defaults_always"]
        if not isinstance(flag, bool):
            raise InvalidMergePolicyError("inject_defaults_always deve ser booleano")
        kwargs["inject_defaults_always"] = flag

    if resolver is not None:
        kwargs["resolver"] = resolver

    return ConfMerger(**kwargs)


def load_merge_policy(path: str, *, resolver: Optional[NameResolver] = None) -> ConfMerger:
    """Carrega uma política de merge de arquivo YAML/JSON."""
    return merger_from_dict(load_config_map(path), resolver=resolver)
