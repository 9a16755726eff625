# src/jobconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do jobconf.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de camadas, a resolução de codecs de serialização e a
composição de mapas de configuração de jobs.

As exceções aqui definidas representam **violações explícitas de
contrato** cometidas pelo chamador, e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Nenhuma falha é mascarada ou convertida em valor default
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Exceções que carregam payload expõem `payload` serializável

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não faz retry de nenhuma operação

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de configuração.
"""

from __future__ import annotations

from typing import Optional

from ..errors import JobConfErrorPayload


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do jobconf.

    Todas as exceções levantadas durante carregamento, merge e
    normalização de codecs devem herdar desta classe.

    Quando construída com um `JobConfErrorPayload`, a mensagem da exceção
    é a mensagem do payload e o payload fica disponível em `payload`.
    """

    def __init__(self, message: str = "", *, payload: Optional[JobConfErrorPayload] = None) -> None:
        if payload is not None and not message:
            message = payload.message
        super().__init__(message)
        self.payload = payload


class CodecResolutionError(ConfigError):
    """
    Exceção levantada quando um identificador de codec não pode ser
    convertido em nome canônico pelo NameResolver.

    Decisões arquiteturais:
        - Indica bug do chamador (referência de codec desconhecida)
        - Propaga imediatamente, sem retry e sem descartar o item

    Limites explícitos:
        - Não verifica se o codec resolvido é carregável
    """


class InvalidCodecStringError(ConfigError):
    """
    Exceção levantada quando o valor da chave de serializações não é uma
    string delimitada por vírgulas.
    """


class InvalidConfigMapError(ConfigError):
    """
    Exceção levantada quando um elemento da sequência de merge não é um
    mapa de configuração (nem `None`).

    Invariantes:
        - Nenhum merge parcial é produzido em caso de erro
    """


class InvalidMergePolicyError(ConfigError):
    """
    Exceção levantada quando a política de merge é estruturalmente inválida.

    Exemplos:
        - lista de codecs default vazia
        - campo desconhecido na seção `serializations`
        - tipo incorreto para `key` ou `inject_defaults_always`
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando uma camada obrigatória de configuração
    não é encontrada no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar a camada automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de configuração
    não é um dicionário (`dict`).

    Decisões arquiteturais:
        - Cada camada deve ser sempre um mapa chave-valor
        - Listas ou valores escalares no root são inválidos
    """
