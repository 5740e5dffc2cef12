import pytest

from dagette import DAG, NodeNotFound


def _diamond() -> DAG:
    g = DAG()
    for src, dst in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


def _named(paths):
    return [[n.name for n in p] for p in paths]


def test_diamond_paths_complete():
    paths = _named(_diamond().all_paths("A", "D"))
    assert sorted(paths) == [["A", "B", "D"], ["A", "C", "D"]]
    # DFS completion order follows child insertion order
    assert paths == [["A", "B", "D"], ["A", "C", "D"]]


def test_sample_task_graph_paths():
    g = DAG()
    for src, dst in [("T1", "T2"), ("T1", "T3"), ("T2", "T4"), ("T3", "T4"), ("T4", "T5")]:
        g.add_edge(src, dst)
    assert _named(g.all_paths("T1", "T5")) == [
        ["T1", "T2", "T4", "T5"],
        ["T1", "T3", "T4", "T5"],
    ]


def test_shared_node_reused_across_sibling_branches():
    # both branches pass through "m"; backtracking must release it
    g = DAG()
    for src, dst in [("s", "a"), ("s", "b"), ("a", "m"), ("b", "m"), ("m", "x"), ("m", "y"), ("x", "t"), ("y", "t")]:
        g.add_edge(src, dst)
    assert len(g.all_paths("s", "t")) == 4


def test_no_path_and_trivial_path():
    g = _diamond()
    assert g.all_paths("D", "A") == []
    assert g.all_paths("B", "C") == []
    assert _named(g.all_paths("B", "B")) == [["B"]]


def test_limit_caps_output():
    g = _diamond()
    assert _named(g.all_paths("A", "D", limit=1)) == [["A", "B", "D"]]
    assert g.all_paths("A", "D", limit=0) == []
    assert len(g.all_paths("A", "D", limit=10)) == 2
    with pytest.raises(ValueError):
        g.all_paths("A", "D", limit=-1)


def test_iter_paths_is_lazy():
    g = _diamond()
    it = g.iter_paths("A", "D")
    first = next(it)
    assert [n.name for n in first] == ["A", "B", "D"]
    # yielded lists are copies, not the live search path
    first.clear()
    assert [n.name for n in next(it)] == ["A", "C", "D"]


def test_paths_unknown_endpoint():
    g = _diamond()
    with pytest.raises(NodeNotFound):
        g.all_paths("A", "nowhere")


def test_dense_graph_path_count():
    # complete DAG on n nodes has 2**(n-2) paths from first to last
    g = DAG()
    n = 8
    for i in range(n):
        for j in range(i + 1, n):
            g.add_edge(f"v{i}", f"v{j}")
    assert len(g.all_paths("v0", f"v{n - 1}")) == 2 ** (n - 2)


def test_long_chain_paths_do_not_hit_recursion_limit():
    g = DAG()
    n = 5000
    for i in range(n - 1):
        g.add_edge(str(i), str(i + 1))
    found = g.all_paths("0", str(n - 1))
    assert len(found) == 1
    assert [x.name for x in found[0]] == [str(i) for i in range(n)]
