# src/jobconf/core/config/__init__.py

"""
Camada de configuração do jobconf.

Este pacote contém as estruturas e utilitários responsáveis por carregar
camadas de configuração de job, declarar a política de merge de
serializações, identificar a configuração efetiva via hash canônico e
expressar falhas por meio de exceções tipadas.

Responsabilidades do pacote:
    - Carregamento de camadas (base + overlays) em YAML ou JSON
    - Construção de `ConfMerger` a partir de política declarativa
    - Geração de hash canônico para rastreabilidade
    - Hierarquia de exceções de configuração

Invariantes:
    - Toda camada carregada é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não valida semântica de codecs
    - Não submete jobs
"""
