"""Diagram graph assembly: corpus nodes, external nodes, aliased edges."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple, Union

from .corpus import DuplicatePolicy, index_units
from .model import (
	DependencyGraph,
	GraphEdge,
	GraphNode,
	NodeStyle,
	RelationshipKind,
	SourceUnit,
)
from .normalize import declares_abstract_class, declares_interface, strip_comments_and_strings
from .relationships import classify_all

logger = logging.getLogger(__name__)

UNIT_ALIAS_PREFIX = "N"
EXTERNAL_ALIAS_PREFIX = "X"


def node_style(name: str, code: str) -> NodeStyle:
	"""Diagram style of a unit from its normalized text."""
	if declares_interface(name, code):
		return NodeStyle.INTERFACE
	if declares_abstract_class(name, code):
		return NodeStyle.ABSTRACT_CLASS
	return NodeStyle.CLASS


def build_graph(
	units: Iterable[SourceUnit],
	policy: Union[DuplicatePolicy, str, None] = None,
) -> DependencyGraph:
	"""Nodes and edges for a class diagram of the snapshot.

	Corpus units get aliases ``N1, N2, ...`` in corpus order. Relationship
	targets outside the corpus become external nodes ``X1, X2, ...`` in the
	order they are first referenced.
	"""
	by_name = index_units(units, policy)
	if not by_name:
		return DependencyGraph()

	alias_by_name: Dict[str, str] = {}
	nodes: List[GraphNode] = []
	code_by_name = {name: strip_comments_and_strings(u.text) for name, u in by_name.items()}
	for index, (name, code) in enumerate(code_by_name.items(), start=1):
		alias = f"{UNIT_ALIAS_PREFIX}{index}"
		alias_by_name[name] = alias
		nodes.append(GraphNode(name=name, alias=alias, style=node_style(name, code)))

	relationships = classify_all(code_by_name)
	external_index = 1
	for rel in relationships:
		if rel.target not in alias_by_name:
			alias = f"{EXTERNAL_ALIAS_PREFIX}{external_index}"
			external_index += 1
			alias_by_name[rel.target] = alias
			nodes.append(GraphNode(name=rel.target, alias=alias, style=NodeStyle.EXTERNAL))

	edges: Dict[Tuple[str, str, RelationshipKind], GraphEdge] = {}
	for rel in relationships:
		source = alias_by_name.get(rel.source)
		target = alias_by_name.get(rel.target)
		if source is None or target is None:
			logger.debug("Dropping edge with unresolved endpoint: %s -> %s", rel.source, rel.target)
			continue
		edges.setdefault((source, target, rel.kind), GraphEdge(source=source, target=target, kind=rel.kind))

	logger.info("Built graph with %d nodes and %d edges", len(nodes), len(edges))
	return DependencyGraph(nodes=tuple(nodes), edges=tuple(edges.values()))
