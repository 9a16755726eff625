# src/jobconf/core/__init__.py
"""
Core do jobconf.

Este pacote contém a implementação canônica do motor de composição de
configuração de jobs, organizada das folhas para a raiz:

    - union        → união ordenada e determinística de valores
    - codecs       → resolução de nomes e normalização de listas de codecs
    - merge        → fold de mapas com união da chave de serializações
    - trace        → log estruturado de eventos de merge
    - config       → loader de camadas, política declarativa, hashing, erros

O core é projetado para ser:
    - determinístico
    - puramente funcional (nenhum input é mutado)
    - independente de I/O no motor de merge
"""
