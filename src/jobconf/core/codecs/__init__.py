# src/jobconf/core/codecs/__init__.py
"""
Codecs de serialização do jobconf.

Este pacote reúne a resolução de identificadores de codec (NameResolver)
e a normalização/merge de listas delimitadas de codecs.
"""

from .normalize import (  # noqa: F401
    CODEC_DELIMITER,
    DEFAULT_SERIALIZATIONS,
    merge_codec_strings,
    normalize_codec_list,
    split_codec_string,
)
from .resolver import ClassNameResolver, DEFAULT_RESOLVER, NameResolver  # noqa: F401
