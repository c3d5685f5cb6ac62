from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Set

_WORD = re.compile(r"\w+")


def _peer_pattern(peer: str) -> "re.Pattern[str]":
	p = re.escape(peer)
	return re.compile(
		r"\b(?:extends\s+" + p + r"\b"
		r"|implements\s+[^;{]*\b" + p + r"\b"
		r"|new\s+" + p + r"\s*\("
		r"|" + p + r"\s+[A-Za-z_][A-Za-z0-9_]*\b"
		r"|" + p + r"\s*\.)"
	)


def compile_peer_patterns(peer_names: Iterable[str]) -> Dict[str, "re.Pattern[str]"]:
	"""One compiled usage pattern per peer, built once and shared by every unit of a pass."""
	return {peer: _peer_pattern(peer) for peer in peer_names if peer}


def efferent_peers(
	unit_name: str,
	normalized_text: str,
	peer_names: Iterable[str],
	patterns: Optional[Dict[str, "re.Pattern[str]"]] = None,
) -> Set[str]:
	"""Corpus peers that ``unit_name`` uses, judged from its normalized text.

	A peer counts when it is extended, implemented, constructed with ``new``,
	used as the type of a declaration, or accessed as ``Peer.``. Names outside
	``peer_names`` are never reported, so library types stay out of coupling.
	"""
	deps: Set[str] = set()
	code = normalized_text or ""
	if not code:
		return deps
	peers = set(peer_names)
	peers.discard(unit_name)
	peers.discard("")
	# every usage shape needs the peer as a whole word of the text
	candidates = (set(_WORD.findall(code)) & peers) | {p for p in peers if not p.isidentifier()}
	for peer in candidates:
		pattern = patterns.get(peer) if patterns is not None else None
		if pattern is None:
			pattern = _peer_pattern(peer)
		if pattern.search(code):
			deps.add(peer)
	return deps
