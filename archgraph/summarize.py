from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from . import config
from .corpus import filter_by_prefix
from .model import SourceUnit, Summaries, UnitMetrics

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
	return f"{value:.2f}"


def _average(items: Sequence[UnitMetrics], key: Callable[[UnitMetrics], float]) -> float:
	if not items:
		return 0.0
	return sum(key(m) for m in items) / len(items)


def format_top_files(focused: Sequence[UnitMetrics]) -> str:
	ranked = sorted(focused, key=lambda m: m.lines_of_code, reverse=True)[: config.TOP_FILES]
	return ", ".join(f"{m.name}({m.lines_of_code})" for m in ranked) or "n/a"


def format_top_instability(focused: Sequence[UnitMetrics]) -> str:
	ranked = sorted(focused, key=lambda m: m.instability, reverse=True)[: config.TOP_INSTABILITY]
	return ", ".join(f"{m.name}={_fmt(m.instability)}" for m in ranked) or "n/a"


def format_top_dependencies(focused: Sequence[UnitMetrics]) -> str:
	hubs = [m for m in focused if m.efferent_count > 0]
	ranked = sorted(hubs, key=lambda m: m.efferent_count, reverse=True)[: config.TOP_HUBS]
	return ", ".join(f"{m.name}({m.efferent_count})" for m in ranked) or "no dependency data"


def format_sample_edges(focused: Sequence[UnitMetrics]) -> str:
	edges: List[str] = []
	for m in focused:
		for dep in m.efferent_peers:
			if len(edges) >= config.SAMPLE_EDGES:
				break
			edges.append(f"{m.name}->{dep}")
	return ", ".join(edges) or "no dependency edges captured"


def summarize_unit(m: UnitMetrics) -> str:
	parts: List[str] = [
		f"{m.name}: {m.lines_of_code} LOC, Ce={m.efferent_count}, Ca={m.afferent_count}, "
		f"I={_fmt(m.instability)}, A={_fmt(m.abstractness)}"
	]
	if m.efferent_peers:
		parts.append(f"  Uses: {', '.join(m.efferent_peers[:10])}")
	if m.afferent_peers:
		parts.append(f"  Used by: {', '.join(m.afferent_peers[:10])}")
	return "\n".join(parts)


def summarize_repo(
	units: Sequence[SourceUnit],
	metrics: Dict[str, UnitMetrics],
	root: Optional[str] = None,
	prefix: str = "",
) -> Summaries:
	"""Plain-text overview of a snapshot for a chat model's context.

	``prefix`` narrows the focus set to one directory; an empty match falls
	back to the whole snapshot.
	"""
	names_in_focus = {u.name for u in filter_by_prefix(units, prefix)}
	everything = list(metrics.values())
	focused = [m for m in everything if m.name in names_in_focus] or everything

	total_loc = sum(m.lines_of_code for m in everything)
	focus_loc = sum(m.lines_of_code for m in focused)
	where = prefix if prefix and prefix.strip() else "entire tree"

	lines: List[str] = []
	if root:
		lines.append(f"Repository: {root}")
	lines.append(
		f"Loaded {len(everything)} source files ({total_loc} LOC). Focus set: "
		f"{len(focused)} files ({focus_loc} LOC) in {where}."
	)
	lines.append(f"Largest files: {format_top_files(focused)}")
	lines.append(
		f"Instability avg={_fmt(_average(focused, lambda m: m.instability))}, "
		f"abstractness avg={_fmt(_average(focused, lambda m: m.abstractness))}; "
		f"extremes: {format_top_instability(focused)}"
	)
	lines.append(f"Dependency hubs: {format_top_dependencies(focused)}")
	lines.append(f"Sample edges: {format_sample_edges(focused)}")

	overview = "\n".join(lines)
	logger.info(overview)
	return Summaries(
		global_overview=overview,
		per_unit={name: summarize_unit(m) for name, m in metrics.items()},
	)
