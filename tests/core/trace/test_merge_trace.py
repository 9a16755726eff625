# tests/core/trace/test_merge_trace.py
"""
Testes de logging estruturado do MergeTrace durante o merge.

Os testes asseguram que:
- cada evento contém metadados mínimos de rastreabilidade
- o merge registra união, overlay e conclusão como eventos distintos
- o evento final carrega o hash canônico do resultado
- a presença do trace não altera o resultado do merge
"""

from jobconf.core.config.hashing import compute_config_hash
from jobconf.core.merge import ConfMerger, conf_merge
from jobconf.core.trace import MergeTrace


def test_structured_log_event(empty_trace):
    empty_trace.log(step="merge.union", level="INFO", message="hello", foo=1)
    ev = empty_trace.events[-1]
    assert ev["trace_id"] == "trace-test"
    assert ev["step"] == "merge.union"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_new_trace_has_id_and_timestamp():
    t1 = MergeTrace.new()
    t2 = MergeTrace.new()
    assert t1.trace_id != t2.trace_id
    assert t1.created_at.endswith("+00:00")
    assert t1.events == []


def test_merge_records_fold_events(empty_trace):
    maps = ({"io.serializations": "X"}, {"io.serializations": "Y", "a": 1}, {"b": 2})
    out = conf_merge(*maps, trace=empty_trace)

    assert out == conf_merge(*maps)
    steps = [e["step"] for e in empty_trace.events]
    assert steps == ["merge.union", "merge.overlay", "merge.overlay", "merge.done"]

    union = empty_trace.by_step("merge.union")[0]
    assert union["previous"] == "X"
    assert union["incoming"] == "Y"
    assert union["result"] == out["io.serializations"]

    assert empty_trace.by_step("merge.overlay")[1]["keys"] == ["b"]

    done = empty_trace.by_step("merge.done")[0]
    assert done["maps"] == 3
    assert done["config_hash"] == compute_config_hash(out)


def test_normalize_event_when_injection_forced(empty_trace):
    ConfMerger(inject_defaults_always=True).merge({"io.serializations": "X"}, trace=empty_trace)
    steps = [e["step"] for e in empty_trace.events]
    assert steps == ["merge.normalize", "merge.done"]


def test_trace_does_not_break_merge_with_mixed_key_types(empty_trace):
    """
    Verifica que mapas com chaves int e str (comuns em camadas YAML) são
    compostos igualmente com e sem trace, e que o hash final é registrado.
    """
    maps = ({8080: "x", "io.serializations": "A"}, {"job.name": "y"})
    out = conf_merge(*maps, trace=empty_trace)

    assert out == conf_merge(*maps)
    assert out == {8080: "x", "io.serializations": "A", "job.name": "y"}
    done = empty_trace.by_step("merge.done")[0]
    assert done["config_hash"] == compute_config_hash(out)
