from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from .normalize import simple_name


class FileInfo(BaseModel):
	path: str
	rel_path: str
	extension: str


class SourceUnit(BaseModel):
	"""One source file of a snapshot. ``path`` is its identity, ``name`` its simple type name."""

	model_config = ConfigDict(frozen=True)

	path: str
	name: str
	text: str = ""

	@field_validator("text", mode="before")
	@classmethod
	def _none_is_empty(cls, value: Optional[str]) -> str:
		return "" if value is None else value

	@classmethod
	def from_path(cls, path: str, text: Optional[str]) -> "SourceUnit":
		return cls(path=path, name=simple_name(path), text=text)


class RelationshipKind(str, Enum):
	GENERALIZATION = "generalization"
	IMPLEMENTATION = "implementation"
	COMPOSITION = "composition"
	AGGREGATION = "aggregation"
	DEPENDENCY = "dependency"


class Relationship(BaseModel):
	model_config = ConfigDict(frozen=True)

	source: str
	target: str
	kind: RelationshipKind


class UnitMetrics(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	efferent_count: int = 0
	afferent_count: int = 0
	instability: float = 0.0
	abstractness: float = 0.0
	efferent_peers: Tuple[str, ...] = ()
	afferent_peers: Tuple[str, ...] = ()
	lines_of_code: int = 0


class NodeStyle(str, Enum):
	CLASS = "class"
	ABSTRACT_CLASS = "abstract_class"
	INTERFACE = "interface"
	EXTERNAL = "external"


class GraphNode(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	alias: str
	style: NodeStyle


class GraphEdge(BaseModel):
	model_config = ConfigDict(frozen=True)

	source: str
	target: str
	kind: RelationshipKind


class DependencyGraph(BaseModel):
	model_config = ConfigDict(frozen=True)

	nodes: Tuple[GraphNode, ...] = ()
	edges: Tuple[GraphEdge, ...] = ()


class Summaries(BaseModel):
	global_overview: str
	per_unit: Dict[str, str]


class AnalyzeResult(BaseModel):
	root: Optional[str] = None
	prefix: str = ""
	metrics: Dict[str, UnitMetrics]
	graph: DependencyGraph
	summaries: Summaries
