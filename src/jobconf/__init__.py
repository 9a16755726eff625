# src/jobconf/__init__.py
"""
jobconf: composição de configuração de jobs com união de codecs.

Este pacote raiz expõe a API pública do jobconf: um motor puro que compõe
vários mapas parciais de configuração em uma configuração efetiva, com
override à direita para todas as chaves exceto `io.serializations`, cujo
valor é unido e sempre contém o conjunto default de codecs.

Arquitetura em alto nível:
    - core.union   → ordered_union
    - core.codecs  → normalize_codec_list, merge_codec_strings, NameResolver
    - core.merge   → ConfMerger, conf_merge
    - core.trace   → MergeTrace
    - core.config  → loader, política de merge, hashing, exceções
"""

from .core.codecs import (
    ClassNameResolver,
    DEFAULT_SERIALIZATIONS,
    NameResolver,
    merge_codec_strings,
    normalize_codec_list,
)
from .core.config.errors import (
    CodecResolutionError,
    ConfigError,
    InvalidCodecStringError,
    InvalidConfigMapError,
    InvalidMergePolicyError,
)
from .core.merge import SERIALIZATIONS_KEY, ConfMerger, conf_merge
from .core.trace import MergeTrace
from .core.union import ordered_union

__all__ = [
    "ClassNameResolver",
    "CodecResolutionError",
    "ConfMerger",
    "ConfigError",
    "DEFAULT_SERIALIZATIONS",
    "InvalidCodecStringError",
    "InvalidConfigMapError",
    "InvalidMergePolicyError",
    "MergeTrace",
    "NameResolver",
    "SERIALIZATIONS_KEY",
    "conf_merge",
    "merge_codec_strings",
    "normalize_codec_list",
    "ordered_union",
]
