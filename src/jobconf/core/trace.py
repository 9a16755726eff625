# src/jobconf/core/trace.py
"""
MergeTrace: log estruturado de uma composição de configuração.

Este módulo define o **MergeTrace**, coletor opcional de eventos passado
pelo chamador ao `ConfMerger`. Cada passo do fold registra um evento
estruturado, permitindo auditar por que um valor final de serializações
tem a forma que tem.

Princípios fundamentais:
- Logs são eventos estruturados (dict), não strings livres
- O trace é o único objeto mutável tocado pelo motor de merge
- A ausência de trace não altera o resultado do merge
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


@dataclass
class MergeTrace:
    """
    Coletor de eventos de uma chamada de merge.

    Campos canônicos:
    - trace_id: identificador único da composição
    - created_at: timestamp UTC de criação
    - events: log estruturado de eventos, em ordem de emissão
    """

    trace_id: str
    created_at: str
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def new(cls) -> "MergeTrace":
        return cls(
            trace_id=uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    def log(self, *, step: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "trace_id": self.trace_id,
            "step": step,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def by_step(self, step: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["step"] == step]
