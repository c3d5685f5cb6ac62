"""Afferent/efferent coupling, instability and abstractness per unit."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Set, Union

from .corpus import DuplicatePolicy, index_units
from .fs_scan import count_lines
from .model import SourceUnit, UnitMetrics
from .normalize import is_abstract, strip_comments_and_strings
from .peers import compile_peer_patterns, efferent_peers

logger = logging.getLogger(__name__)


def instability(ce: int, ca: int) -> float:
	total = ce + ca
	return 0.0 if total == 0 else ce / total


def compute_metrics(
	units: Iterable[SourceUnit],
	policy: Union[DuplicatePolicy, str, None] = None,
) -> Dict[str, UnitMetrics]:
	"""Fresh metrics for every unit of the snapshot, keyed by name in corpus order.

	Coupling only counts references between units of the snapshot itself.
	"""
	by_name = index_units(units, policy)
	code_by_name = {name: strip_comments_and_strings(u.text) for name, u in by_name.items()}
	peer_names = set(by_name)
	patterns = compile_peer_patterns(peer_names)

	efferent: Dict[str, Set[str]] = {
		name: efferent_peers(name, code, peer_names, patterns) for name, code in code_by_name.items()
	}
	afferent: Dict[str, Set[str]] = {name: set() for name in peer_names}
	for name, deps in efferent.items():
		for dep in deps:
			afferent[dep].add(name)

	result: Dict[str, UnitMetrics] = {}
	for name, unit in by_name.items():
		code = code_by_name[name]
		eff = efferent[name]
		aff = afferent[name]
		result[name] = UnitMetrics(
			name=name,
			efferent_count=len(eff),
			afferent_count=len(aff),
			instability=instability(len(eff), len(aff)),
			abstractness=1.0 if is_abstract(name, code) else 0.0,
			efferent_peers=sorted(eff),
			afferent_peers=sorted(aff),
			lines_of_code=count_lines(unit.text),
		)
	logger.info(
		"Computed metrics for %d units, %d peer dependencies",
		len(result), sum(len(d) for d in efferent.values()),
	)
	return result
