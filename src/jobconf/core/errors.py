"""
jobconf: Canonical Error Structures (v1)

Este módulo define o payload canônico de erros do jobconf.
Erros são considerados parte do contrato operacional da composição de
configuração, devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JobConfErrorPayload:
    """
    Payload canônico de erro do jobconf.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Codecs de serialização
CODEC_UNRESOLVABLE = "CODEC_UNRESOLVABLE"
CODEC_INVALID_STRING = "CODEC_INVALID_STRING"

# Composição de mapas
CONFIG_INVALID_MAP = "CONFIG_INVALID_MAP"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def codec_unresolvable(
    *,
    handle: Any,
    resolver: Optional[str] = None,
    hint: str = "Informe o codec pelo nome canônico (str) ou por uma classe resolvível.",
) -> JobConfErrorPayload:
    return JobConfErrorPayload(
        type=CODEC_UNRESOLVABLE,
        message="Identificador de codec não pôde ser resolvido",
        details={
            "handle": repr(handle),
            "handle_type": type(handle).__name__,
            "resolver": resolver,
        },
        hint=hint,
    )


def codec_invalid_string(
    *,
    value: Any,
    key: Optional[str] = None,
    hint: str = "Declare a lista de codecs como string separada por vírgulas.",
) -> JobConfErrorPayload:
    return JobConfErrorPayload(
        type=CODEC_INVALID_STRING,
        message="Valor de serializações não é uma string delimitada",
        details={
            "value": repr(value),
            "value_type": type(value).__name__,
            "key": key,
        },
        hint=hint,
    )


def config_invalid_map(
    *,
    position: int,
    value: Any,
    hint: str = "Passe apenas mapas de configuração (ou None) para o merge.",
) -> JobConfErrorPayload:
    return JobConfErrorPayload(
        type=CONFIG_INVALID_MAP,
        message="Elemento da sequência de merge não é um mapa de configuração",
        details={
            "position": position,
            "value_type": type(value).__name__,
        },
        hint=hint,
    )
