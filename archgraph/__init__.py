"""Heuristic dependency and coupling analysis over a snapshot of source files.

Modules:
- normalize.py: Comment/literal stripping and type-name normalization.
- peers.py: Corpus-restricted efferent dependency scanning.
- relationships.py: Typed UML relationship classification.
- metrics.py: Ce, Ca, instability and abstractness per unit.
- graph.py: Diagram node/edge assembly with external nodes and aliases.
- corpus.py: Name indexing, duplicate-name policy and prefix focus.
- fs_scan.py: Local directory scanning into source units.
- diagram.py: PlantUML text rendering of a graph.
- summarize.py: Deterministic textual summary of metrics.
- analyze.py: One-call pipeline used by the CLI and the HTTP API.
"""

__all__ = [
	"analyze",
	"config",
	"corpus",
	"diagram",
	"fs_scan",
	"graph",
	"metrics",
	"model",
	"normalize",
	"peers",
	"relationships",
	"summarize",
]
