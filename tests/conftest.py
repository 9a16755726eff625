# tests/conftest.py
"""
Fixtures compartilhados para testes do jobconf.

Este módulo define fixtures reutilizáveis que fornecem:
- um NameResolver stub e determinístico
- camadas de configuração em YAML (base e overlay)
- uma política de merge declarativa
- um MergeTrace vazio

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Conteúdos de arquivo são fornecidos como string; testes que precisam
      de filesystem usam `tmp_path`
    - O resolver stub não depende de introspecção de classes

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


class _StubCodec:
    pass


class StubResolver:
    """Resolver que só conhece handles registrados explicitamente."""

    def __init__(self, names):
        self._names = dict(names)

    def resolve(self, handle):
        from jobconf.core.config.errors import CodecResolutionError

        if handle in self._names:
            return self._names[handle]
        raise CodecResolutionError(f"handle desconhecido: {handle!r}")


@pytest.fixture
def stub_codec_class():
    """Classe usada como handle opaco de codec."""
    return _StubCodec


@pytest.fixture
def stub_resolver():
    """
    Fixture que fornece um NameResolver stub.

    Resolve `_StubCodec` para `"StubSerialization"` e qualquer outro
    handle levanta `CodecResolutionError`.
    """
    return StubResolver({_StubCodec: "StubSerialization"})


@pytest.fixture
def job_conf_base_yaml() -> str:
    """
    Fixture que fornece uma camada base de configuração de job em YAML.

    Representa o conteúdo típico de um `job.defaults.yaml`, com uma lista
    de serializações parcial e chaves ordinárias.
    """
    return """\
io.serializations: "com.example.AvroSerialization"
mapred.reduce.tasks: 4
job.name: base
"""


@pytest.fixture
def job_conf_overlay_yaml() -> str:
    """
    Fixture que fornece uma camada de overlay em YAML.

    Sobrescreve o número de reducers e contribui com um codec extra.
    """
    return """\
io.serializations: "com.example.ThriftSerialization,WritableSerialization"
mapred.reduce.tasks: 16
"""


@pytest.fixture
def merge_policy_yaml() -> str:
    """Fixture que fornece uma política de merge com defaults customizados."""
    return """\
serializations:
  key: io.serializations
  defaults:
    - org.apache.hadoop.io.serializer.WritableSerialization
    - cascading.tuple.hadoop.TupleSerialization
  inject_defaults_always: true
"""


@pytest.fixture
def empty_trace():
    from jobconf.core.trace import MergeTrace

    return MergeTrace(trace_id="trace-test", created_at="2024-01-01T00:00:00+00:00")
