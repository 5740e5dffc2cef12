import random

import pytest

from dagette import DAG, CycleInvariantViolated


def _assert_valid(g: DAG, order):
    names = [n.name for n in order]
    assert sorted(names) == sorted(n.name for n in g)
    assert len(names) == len(set(names))
    pos = {name: i for i, name in enumerate(names)}
    for src, dst in g.edges():
        assert pos[src] < pos[dst], f"{src} -> {dst} out of order"


def test_diamond_order_is_deterministic():
    g = DAG()
    for src, dst in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(src, dst)
    order = g.topological_order()
    _assert_valid(g, order)
    assert [n.name for n in order] == ["A", "C", "B", "D"]


def test_sample_task_graph():
    g = DAG()
    for i in range(1, 6):
        g.add_node(f"T{i}", f"Task {i}")
    for src, dst in [("T1", "T2"), ("T1", "T3"), ("T2", "T4"), ("T3", "T4"), ("T4", "T5")]:
        g.add_edge(src, dst)
    assert [n.name for n in g.topological_order()] == ["T1", "T3", "T2", "T4", "T5"]


def test_registration_order_picks_roots():
    g = DAG()
    g.add_node("z")
    g.add_node("y")
    g.add_edge("y", "x")
    assert [n.name for n in g.topological_order()] == ["y", "x", "z"]


def test_empty_and_isolated():
    assert DAG().topological_order() == []
    g = DAG()
    g.add_node("solo")
    assert [n.name for n in g.topological_order()] == ["solo"]


def test_random_insertions_stay_acyclic():
    rng = random.Random(1234)
    g = DAG()
    names = [f"n{i}" for i in range(30)]
    for name in names:
        g.add_node(name)
    for _ in range(300):
        g.add_edge(rng.choice(names), rng.choice(names))
    _assert_valid(g, g.topological_order())


def test_long_chain_does_not_hit_recursion_limit():
    g = DAG()
    n = 5000
    for i in range(n - 1):
        g.add_edge(str(i), str(i + 1))
    order = g.topological_order()
    assert [x.name for x in order] == [str(i) for i in range(n)]


def test_tampered_graph_raises_invariant_violation():
    g = DAG()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    # bypass the cycle guard on purpose
    c, a = g.get_node("C"), g.get_node("A")
    c._children.append(a)
    a._parents.append(c)
    with pytest.raises(CycleInvariantViolated) as exc:
        g.topological_order()
    assert exc.value.node == "A"
