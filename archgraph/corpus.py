"""Name indexing of a snapshot of source units.

Analysis passes match by simple name, but two files in different directories
can share one. ``index_units`` decides which file owns a name through an
explicit :class:`DuplicatePolicy` instead of leaving it to dict insertion.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from . import config
from .model import SourceUnit

logger = logging.getLogger(__name__)


class CorpusError(ValueError):
	"""The caller handed over a snapshot that breaks the unit contract."""


class DuplicatePolicy(str, Enum):
	LAST = "last"
	FIRST = "first"
	REJECT = "reject"


def resolve_policy(policy: Union[DuplicatePolicy, str, None]) -> DuplicatePolicy:
	if policy is None:
		policy = config.DUPLICATE_POLICY
	try:
		return DuplicatePolicy(policy)
	except ValueError:
		raise CorpusError(f"Unknown duplicate policy: {policy!r}") from None


def index_units(
	units: Iterable[SourceUnit],
	policy: Union[DuplicatePolicy, str, None] = None,
) -> Dict[str, SourceUnit]:
	"""Map simple name -> unit, keeping first-seen name order.

	With ``LAST`` a later unit replaces the text of an earlier one but the
	name keeps its original position.
	"""
	policy = resolve_policy(policy)
	by_name: Dict[str, SourceUnit] = {}
	for unit in units:
		if unit is None:
			continue
		if not unit.name or not unit.name.strip():
			raise CorpusError(f"Source unit has a blank name: {unit.path!r}")
		existing = by_name.get(unit.name)
		if existing is not None and existing.path != unit.path:
			if policy is DuplicatePolicy.REJECT:
				raise CorpusError(
					f"Duplicate unit name {unit.name!r}: {existing.path!r} and {unit.path!r}"
				)
			if policy is DuplicatePolicy.FIRST:
				logger.warning("Ignoring %s, name %s already taken by %s", unit.path, unit.name, existing.path)
				continue
			logger.warning("%s shadows %s for name %s", unit.path, existing.path, unit.name)
		by_name[unit.name] = unit
	return by_name


def matches_prefix(path: str, prefix: Optional[str]) -> bool:
	if prefix is None or not prefix.strip():
		return True
	path = path.replace("\\", "/")
	normalized = prefix.replace("\\", "/")
	return normalized + "/" in path or path.endswith("/" + normalized) or path == normalized


def filter_by_prefix(units: Iterable[SourceUnit], prefix: Optional[str]) -> List[SourceUnit]:
	return [u for u in units if matches_prefix(u.path, prefix)]
