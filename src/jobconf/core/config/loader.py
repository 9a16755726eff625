# src/jobconf/core/config/loader.py
"""
Loader canônico de camadas de configuração de job.

Este módulo é responsável por carregar camadas de configuração a partir de
arquivos e compô-las com o `ConfMerger`, produzindo a configuração efetiva
entregue ao código de submissão de jobs.

A configuração é resolvida a partir de:
    - uma camada base (obrigatória)
    - camadas de overlay (opcionais), aplicadas na ordem informada

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Compor as camadas com a política de merge de serializações

Invariantes:
    - A camada base é obrigatória
    - O resultado é sempre um dicionário puro (`dict`)
    - Overlays ausentes no disco são ignorados

Limites explícitos:
    - Não valida semântica dos codecs
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence
import json

import yaml  # PyYAML

from ..merge import ConfMerger, merge_all
from ..trace import MergeTrace
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def load_config_map(path: str) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios

    Args:
        path (str): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    file = Path(path)
    if not file.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {file}")

    suffix = file.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with file.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {file.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_job_conf(
    *,
    base_path: str,
    overlay_paths: Sequence[str] = (),
    merger: Optional[ConfMerger] = None,
    trace: Optional[MergeTrace] = None,
) -> Dict[str, Any]:
    """
    Carrega e compõe a configuração efetiva de um job.

    Política de resolução:
        - A camada base é obrigatória
        - Overlays são opcionais; caminhos inexistentes são ignorados
        - Overlays posteriores vencem os anteriores (exceto serializações,
          que são unidas)

    Args:
        base_path (str): Caminho da camada base.
        overlay_paths (Sequence[str]): Caminhos de overlays, em ordem.
        merger (Optional[ConfMerger]): Política de merge; default se None.
        trace (Optional[MergeTrace]): Coletor opcional de eventos.

    Returns:
        Dict[str, Any]: Configuração composta.

    Raises:
        ConfigFileNotFoundError: Se a camada base não existir.
        UnsupportedConfigFormatError: Se algum formato não for suportado.
        InvalidConfigRootTypeError: Se algum conteúdo não for dicionário.
    """
    layers = [load_config_map(base_path)]
    for overlay_path in overlay_paths:
        if Path(overlay_path).exists():
            layers.append(load_config_map(overlay_path))
        elif trace is not None:
            trace.log(
                step="load.overlay",
                level="WARNING",
                message="overlay not found, skipped",
                path=str(overlay_path),
            )

    return merge_all(layers, merger=merger, trace=trace)
