# src/jobconf/core/config/hashing.py
"""
Hashing canônico de configuração de job.

Este módulo implementa a geração de hash determinístico da configuração
efetiva produzida pelo merge. O hash representa a **identidade estrutural**
da configuração e é registrado no evento final do `MergeTrace`.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não persiste o hash
    - Valores opacos não serializáveis em JSON são representados via `str`
    - Chaves não-string são convertidas via `str` antes da ordenação
"""

import json
import hashlib
from typing import Any, Mapping


def _canonical_keys(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return {str(k): _canonical_keys(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_canonical_keys(v) for v in obj]
    return obj


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Política de hashing (v1):
        - Serialização JSON canônica
        - Ordenação estável de chaves (chaves convertidas para str)
        - Separadores compactos (sem espaços supérfluos)
        - Codificação UTF-8
        - Algoritmo SHA-256

    Args:
        config (Mapping[str, Any]): Configuração efetiva do job.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um mapa.
    """

    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser mapa, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _canonical_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
