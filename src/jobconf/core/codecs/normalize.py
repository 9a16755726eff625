# src/jobconf/core/codecs/normalize.py
"""
Normalização e merge de listas de codecs de serialização.

Este módulo implementa as duas operações que garantem o piso de codecs
default em qualquer valor de serializações produzido pelo jobconf:

    - `normalize_codec_list`: resolve identificadores e une com os defaults
    - `merge_codec_strings`: achata várias strings delimitadas e normaliza

Política de normalização (v1):
    - defaults sempre contribuem primeiro, na ordem declarada
    - codecs extras aparecem na ordem de primeira aparição
    - strings passam direto; demais itens passam pelo NameResolver
    - tokens vazios (ex.: "a,,b") são descartados
    - espaços ao redor de tokens são removidos

Invariantes:
    - A saída contém todos os defaults, antes de qualquer codec extra
    - A saída não contém duplicatas
    - Com defaults não vazios, a saída nunca é vazia

Limites explícitos:
    - Não valida se os codecs existem ou são carregáveis
    - Não realiza I/O
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from ..config.errors import InvalidCodecStringError
from ..errors import codec_invalid_string
from ..union import ordered_union
from .resolver import DEFAULT_RESOLVER, NameResolver


DEFAULT_SERIALIZATIONS = (
    "WritableSerialization",
    "BytesSerialization",
    "TupleSerialization",
)

CODEC_DELIMITER = ","


def _resolve(item: Any, resolver: NameResolver) -> str:
    if isinstance(item, str):
        return item
    return resolver.resolve(item)


def normalize_codec_list(
    codecs: Iterable[Any],
    *,
    defaults: Sequence[Any] = DEFAULT_SERIALIZATIONS,
    resolver: Optional[NameResolver] = None,
) -> str:
    """
    Resolve uma coleção de codecs e a une com o conjunto default.

    Decisões arquiteturais:
        - Defaults são injetados primeiro, sempre
        - Falhas do resolver propagam sem mascaramento

    Args:
        codecs: nomes de codec (str) ou handles resolvíveis.
        defaults: conjunto default ordenado.
        resolver: NameResolver para itens não-string.

    Returns:
        str: lista delimitada por vírgulas.

    Raises:
        CodecResolutionError: se algum item não puder ser resolvido.
    """
    resolver = resolver or DEFAULT_RESOLVER
    resolved_defaults = [_resolve(d, resolver) for d in defaults]
    resolved = [_resolve(c, resolver) for c in codecs]
    return CODEC_DELIMITER.join(ordered_union(resolved_defaults, resolved))


def split_codec_string(value: str) -> List[str]:
    """Divide uma string delimitada em tokens, descartando tokens vazios."""
    tokens = (token.strip() for token in value.split(CODEC_DELIMITER))
    return [token for token in tokens if token]


def merge_codec_strings(
    *codec_strings: Optional[str],
    defaults: Sequence[Any] = DEFAULT_SERIALIZATIONS,
    resolver: Optional[NameResolver] = None,
) -> str:
    """
    Achata várias strings de codecs e normaliza o resultado.

    Entradas `None` representam "chave não definida" e são ignoradas.
    A ordem relativa é preservada: strings na ordem dos argumentos,
    tokens na ordem dentro de cada string.

    Exemplo:
        >>> merge_codec_strings("X,WritableSerialization", "Y,BytesSerialization")
        'WritableSerialization,BytesSerialization,TupleSerialization,X,Y'

    Raises:
        InvalidCodecStringError: se uma entrada não-None não for str.
    """
    tokens: List[str] = []
    for value in codec_strings:
        if value is None:
            continue
        if not isinstance(value, str):
            raise InvalidCodecStringError(payload=codec_invalid_string(value=value))
        tokens.extend(split_codec_string(value))
    return normalize_codec_list(tokens, defaults=defaults, resolver=resolver)
