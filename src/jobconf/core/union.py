# src/jobconf/core/union.py
"""
União ordenada e determinística de valores.

Este módulo implementa `ordered_union`, a primitiva de conjunto usada pela
normalização de codecs de serialização. Cada argumento pode ser um valor
isolado ou uma coleção; valores isolados são tratados como conjuntos
unitários.

Política de união (v1):
    - str e bytes são escalares (não são iterados caractere a caractere)
    - qualquer outro iterável é uma coleção
    - a ordem de saída é a ordem de primeira aparição, varrendo argumentos
      da esquerda para a direita e, dentro de cada argumento, na ordem de
      iteração da coleção

Invariantes:
    - A saída nunca contém duplicatas
    - O conjunto de saída é exatamente a união matemática dos argumentos
    - Nenhum input é mutado

Limites explícitos:
    - Elementos precisam ser hashable (TypeError não é mascarado)
    - Não ordena valores; apenas preserva a primeira aparição
    - Igualdade considera o tipo: 1 e True (ou 0 e False) são valores
      distintos
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, List


def _collectify(item: Any) -> Iterable[Any]:
    if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
        return (item,)
    return item


def ordered_union(*items: Any) -> List[Any]:
    """
    Retorna a união ordenada de todos os argumentos.

    Exemplo:
        >>> ordered_union([1, 2], "help", 2, 1)
        [1, 2, 'help']

    Args:
        *items: valores isolados ou coleções de valores.

    Returns:
        List[Any]: valores distintos na ordem de primeira aparição.
    """
    # chave (tipo, valor): 1 e True, 0 e False são distintos
    seen: dict = {}
    for item in items:
        for value in _collectify(item):
            marker = (type(value), value)
            if marker not in seen:
                seen[marker] = value
    return list(seen.values())
