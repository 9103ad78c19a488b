import pytest

from synonym_rules.builder import SynonymGraphBuilder
from synonym_rules.models import Edge


def test_dedup_drops_identical_edges():
    builder = SynonymGraphBuilder(dedup=True)
    builder.add_edge(("a",), ("b",), True)
    builder.add_edge(("a",), ("b",), True)
    graph = builder.finalize_build()
    assert graph.outputs_for(("a",)) == (("b",),)
    assert builder.edge_count == 1


def test_without_dedup_every_edge_is_kept():
    builder = SynonymGraphBuilder(dedup=False)
    builder.add_edge(("a",), ("b",), True)
    builder.add_edge(("a",), ("b",), True)
    graph = builder.finalize_build()
    assert graph.outputs_for(("a",)) == (("b",), ("b",))
    assert graph.edge_count == 2


def test_include_original_is_sticky_per_input():
    builder = SynonymGraphBuilder()
    builder.add_edge(("a",), ("b",), False)
    builder.add_edge(("a",), ("c",), True)
    builder.add_edge(("d",), ("a",), False)
    graph = builder.finalize_build()
    assert graph.rules[("a",)].include_original is True
    assert graph.rules[("d",)].include_original is False


def test_self_edge_is_recorded():
    builder = SynonymGraphBuilder()
    builder.add_edge(("a",), ("a",), False)
    assert builder.finalize_build().outputs_for(("a",)) == (("a",),)


@pytest.mark.parametrize("source,target", [((), ("a",)), (("a",), ())])
def test_empty_terms_are_rejected(source, target):
    builder = SynonymGraphBuilder()
    with pytest.raises(ValueError):
        builder.add_edge(source, target, False)


def test_max_horizontal_context_tracks_longest_term():
    builder = SynonymGraphBuilder()
    builder.add_edge(("ny",), ("new", "york"), True)
    builder.add_edge(("nyc",), ("new", "york", "city"), True)
    assert builder.finalize_build().max_horizontal_context == 3


def test_graph_is_read_only_and_ordered():
    builder = SynonymGraphBuilder()
    builder.add_edge(("b",), ("a",), False)
    builder.add_edge(("a",), ("a",), False)
    graph = builder.finalize_build()
    with pytest.raises(TypeError):
        graph.rules[("c",)] = None  # type: ignore[index]
    assert list(graph.edges()) == [
        Edge(("b",), ("a",), False),
        Edge(("a",), ("a",), False),
    ]


def test_finalize_snapshots_current_state():
    builder = SynonymGraphBuilder()
    builder.add_edge(("a",), ("b",), True)
    first = builder.finalize_build()
    builder.add_edge(("a",), ("c",), True)
    second = builder.finalize_build()
    assert first.outputs_for(("a",)) == (("b",),)
    assert second.outputs_for(("a",)) == (("b",), ("c",))
