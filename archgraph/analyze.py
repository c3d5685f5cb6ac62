from __future__ import annotations

from typing import Optional, Sequence, Union

from .corpus import DuplicatePolicy, filter_by_prefix, resolve_policy
from .graph import build_graph
from .metrics import compute_metrics
from .model import AnalyzeResult, SourceUnit
from .summarize import summarize_repo


def analyze_units(
	units: Sequence[SourceUnit],
	root: Optional[str] = None,
	prefix: str = "",
	policy: Union[DuplicatePolicy, str, None] = None,
) -> AnalyzeResult:
	"""Metrics over the whole snapshot, diagram graph over the ``prefix`` focus."""
	policy = resolve_policy(policy)
	metrics = compute_metrics(units, policy)
	graph = build_graph(filter_by_prefix(units, prefix), policy)
	summaries = summarize_repo(units, metrics, root=root, prefix=prefix)
	return AnalyzeResult(root=root, prefix=prefix, metrics=metrics, graph=graph, summaries=summaries)
