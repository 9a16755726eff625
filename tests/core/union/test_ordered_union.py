# tests/core/union/test_ordered_union.py
"""
Testes da união ordenada (`ordered_union`).

Os testes asseguram que:
- valores isolados e coleções podem ser misturados
- a saída nunca contém duplicatas
- a ordem de primeira aparição é preservada entre e dentro de argumentos
- strings são tratadas como escalares

Invariantes:
    - O conjunto de saída é a união matemática dos argumentos
    - Nenhum input é mutado
"""

import pytest

from jobconf.core.union import ordered_union


def test_mixed_scalars_and_collections():
    assert ordered_union([1, 2], "help", 2, 1) == [1, 2, "help"]


def test_empty_input_yields_empty_list():
    assert ordered_union() == []
    assert ordered_union([], ()) == []


def test_order_across_arguments_is_first_appearance():
    """
    Verifica que um valor visto primeiro no argumento i precede qualquer
    valor visto primeiro no argumento i+1.
    """
    out = ordered_union(["c", "a"], ["b", "a", "d"], "e")
    assert out == ["c", "a", "b", "d", "e"]


def test_order_within_argument_is_preserved():
    assert ordered_union(["z", "y", "x", "y"]) == ["z", "y", "x"]


def test_strings_are_scalars():
    assert ordered_union("abc", ["abc"]) == ["abc"]


def test_idempotence():
    x = ["b", "a", "c"]
    assert ordered_union(x) == ordered_union(x, x)


@pytest.mark.parametrize(
    "args",
    [
        ([1, 2, 3], [3, 4], 5),
        ((1, 1, 1),),
        ({"a", "b"}, ["b", "c"], "a"),
        ([None, 0], 0, [None]),
    ],
)
def test_no_duplicates_and_union_of_sets(args):
    out = ordered_union(*args)
    assert len(out) == len(set(out))

    expected = set()
    for a in args:
        if isinstance(a, (list, tuple, set)):
            expected |= set(a)
        else:
            expected.add(a)
    assert set(out) == expected


def test_inputs_not_mutated():
    a = [3, 1]
    b = [1, 2]
    ordered_union(a, b)
    assert a == [3, 1]
    assert b == [1, 2]


def test_unhashable_element_raises_type_error():
    with pytest.raises(TypeError):
        ordered_union([["nested"]])


def test_bool_and_int_are_distinct_values():
    assert ordered_union([1, True, 0, False]) == [1, True, 0, False]
    assert ordered_union(True, [1, True]) == [True, 1]
