"""PlantUML text for a :class:`~archgraph.model.DependencyGraph`.

Only the diagram source is produced here; turning it into an image is left
to a PlantUML installation.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .model import DependencyGraph, NodeStyle, RelationshipKind

HEADER = (
	"@startuml",
	"!pragma layout smetana",
	"skinparam backgroundColor #f6f4f0",
	"skinparam ArrowColor #444444",
	"skinparam ArrowThickness 1.2",
	"skinparam defaultFontName Arial",
	"skinparam Shadowing false",
	"skinparam linetype ortho",
)

# symbol, fill colour
NODE_STYLES: Dict[NodeStyle, Tuple[str, str]] = {
	NodeStyle.CLASS: ("C", "#dcead3"),
	NodeStyle.ABSTRACT_CLASS: ("A", "#cfe7f7"),
	NodeStyle.INTERFACE: ("I", "#dcd0f7"),
	NodeStyle.EXTERNAL: ("ext", "#e6e6e6"),
}

ARROWS: Dict[RelationshipKind, str] = {
	RelationshipKind.GENERALIZATION: "--|>",
	RelationshipKind.IMPLEMENTATION: "..|>",
	RelationshipKind.COMPOSITION: "*--",
	RelationshipKind.AGGREGATION: "o--",
	RelationshipKind.DEPENDENCY: "..>",
}


def _escape(text: str) -> str:
	return text.replace('"', '\\"')


def render_plantuml(graph: DependencyGraph) -> str:
	lines: List[str] = list(HEADER)
	for node in graph.nodes:
		symbol, color = NODE_STYLES[node.style]
		label = f"{symbol} {node.name}" if symbol else node.name
		lines.append(f'rectangle "{_escape(label)}" as {node.alias} {color}')
	for edge in graph.edges:
		lines.append(f"{edge.source} {ARROWS[edge.kind]} {edge.target}")
	lines.append("@enduml")
	return "\n".join(lines) + "\n"
