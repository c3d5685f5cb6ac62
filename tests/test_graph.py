import pytest
from pydantic import ValidationError

from archgraph import graph as graph_module
from archgraph.fs_scan import load_units
from archgraph.graph import build_graph
from archgraph.model import DependencyGraph, GraphEdge, NodeStyle, RelationshipKind, SourceUnit

GEN = RelationshipKind.GENERALIZATION
IMPL = RelationshipKind.IMPLEMENTATION
COMP = RelationshipKind.COMPOSITION
AGG = RelationshipKind.AGGREGATION
DEP = RelationshipKind.DEPENDENCY


def edge(source, target, kind):
	return GraphEdge(source=source, target=target, kind=kind)


def test_empty_corpus_gives_empty_graph():
	assert build_graph([]) == DependencyGraph()


def test_scenario_corpus(foo_corpus):
	graph = build_graph(foo_corpus)
	assert [(n.name, n.alias, n.style) for n in graph.nodes] == [
		("Foo", "N1", NodeStyle.CLASS),
		("Bar", "N2", NodeStyle.CLASS),
		("Baz", "N3", NodeStyle.INTERFACE),
		("Qux", "N4", NodeStyle.CLASS),
		("Zap", "N5", NodeStyle.CLASS),
		("List", "X1", NodeStyle.EXTERNAL),
	]
	assert list(graph.edges) == [
		edge("N1", "N2", GEN),
		edge("N1", "N3", IMPL),
		edge("N1", "N4", COMP),
		edge("N1", "X1", AGG),
		edge("N1", "N5", DEP),
	]


def test_single_unit_corpus_turns_every_target_external(foo_unit):
	graph = build_graph([foo_unit])
	assert [(n.name, n.alias) for n in graph.nodes] == [
		("Foo", "N1"),
		("Bar", "X1"),
		("Baz", "X2"),
		("Qux", "X3"),
		("List", "X4"),
		("Zap", "X5"),
	]
	assert graph.nodes[0].style is NodeStyle.CLASS
	assert all(n.style is NodeStyle.EXTERNAL for n in graph.nodes[1:])
	assert len(graph.edges) == 5


def test_graph_is_deterministic(foo_corpus):
	assert build_graph(foo_corpus) == build_graph(list(foo_corpus))


def test_shared_external_target_gets_one_node():
	units = [
		SourceUnit(path="A.java", name="A", text="class A { private Logger log; }"),
		SourceUnit(path="B.java", name="B", text="class B { private final Logger log; }"),
	]
	graph = build_graph(units)
	assert [n.alias for n in graph.nodes] == ["N1", "N2", "X1"]
	assert graph.edges == (edge("N1", "X1", AGG), edge("N2", "X1", COMP))


def test_shop_fixture_graph(shop_root):
	graph = build_graph(load_units(str(shop_root)))
	styles = {n.name: n.style for n in graph.nodes}
	assert styles == {
		"BaseService": NodeStyle.ABSTRACT_CLASS,
		"Order": NodeStyle.CLASS,
		"OrderService": NodeStyle.CLASS,
		"Repository": NodeStyle.INTERFACE,
		"Logger": NodeStyle.EXTERNAL,
		"String": NodeStyle.EXTERNAL,
		"Clock": NodeStyle.EXTERNAL,
	}
	aliases = {n.name: n.alias for n in graph.nodes}
	assert aliases["BaseService"] == "N1"
	assert aliases["Logger"] == "X1"
	assert edge(aliases["OrderService"], aliases["Repository"], COMP) in graph.edges
	assert edge(aliases["OrderService"], aliases["Repository"], DEP) in graph.edges
	assert edge(aliases["OrderService"], aliases["BaseService"], GEN) in graph.edges
	assert len(graph.edges) == 7
	assert all(e.source != e.target for e in graph.edges)


def test_graph_is_immutable(foo_corpus):
	graph = build_graph(foo_corpus)
	assert isinstance(graph.nodes, tuple)
	assert isinstance(graph.edges, tuple)
	with pytest.raises(ValidationError):
		graph.edges = ()


def test_each_unit_is_normalized_once(foo_corpus, monkeypatch):
	calls = []
	real = graph_module.strip_comments_and_strings

	def counting(text):
		calls.append(text)
		return real(text)

	monkeypatch.setattr(graph_module, "strip_comments_and_strings", counting)
	build_graph(foo_corpus)
	assert len(calls) == len(foo_corpus)
