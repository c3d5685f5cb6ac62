"""Typed UML relationships inferred from normalized source text.

Unlike :mod:`archgraph.peers` this pass is not restricted to the corpus: any
capitalized type token becomes a candidate target, so library types show up
later as external diagram nodes.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Union

from .corpus import DuplicatePolicy, index_units
from .model import Relationship, RelationshipKind, SourceUnit
from .normalize import normalize_type, strip_comments_and_strings

logger = logging.getLogger(__name__)

# <visibility> [static] [final] Type name, at the start of a line or statement
_FIELD = re.compile(
	r"(?:^|(?<=[;{}]))\s*(public|protected|private)\s+(static\s+)?(final\s+)?"
	r"([A-Z][A-Za-z0-9_$.<>]*)\s+[A-Za-z_][A-Za-z0-9_]*(\s*[=;,)])?",
	re.MULTILINE,
)
_ANNOTATION = re.compile(r"@[A-Za-z0-9_$.]+")
_FINAL = re.compile(r"\bfinal\b")


def _ordered(rels: Iterable[Relationship]) -> Dict[Relationship, None]:
	return dict.fromkeys(rels)


def find_inheritance(name: str, code: str) -> List[Relationship]:
	rels: List[Relationship] = []
	n = re.escape(name)

	m = re.search(r"\bclass\s+" + n + r"\s+extends\s+([A-Za-z0-9_$.<>]+)", code)
	if m:
		parent = normalize_type(m.group(1))
		if parent is not None:
			rels.append(Relationship(source=name, target=parent, kind=RelationshipKind.GENERALIZATION))

	m = re.search(r"\bclass\s+" + n + r"[^{]*implements\s+([^{]+)", code)
	if m:
		for raw in m.group(1).split(","):
			iface = normalize_type(raw)
			if iface is not None:
				rels.append(Relationship(source=name, target=iface, kind=RelationshipKind.IMPLEMENTATION))

	m = re.search(r"\binterface\s+" + n + r"\s+extends\s+([^{]+)", code)
	if m:
		for raw in m.group(1).split(","):
			parent = normalize_type(raw)
			if parent is not None:
				rels.append(Relationship(source=name, target=parent, kind=RelationshipKind.GENERALIZATION))
	return rels


def find_field_associations(name: str, code: str) -> List[Relationship]:
	rels: List[Relationship] = []
	for m in _FIELD.finditer(code):
		is_static = m.group(2) is not None
		is_final = m.group(3) is not None
		type_name = normalize_type(m.group(4))
		if type_name is None or type_name == name:
			continue
		# static references carry no ownership
		if is_static:
			continue
		kind = RelationshipKind.COMPOSITION if is_final else RelationshipKind.AGGREGATION
		rels.append(Relationship(source=name, target=type_name, kind=kind))
	return rels


def find_constructor_dependencies(name: str, code: str) -> List[Relationship]:
	rels: List[Relationship] = []
	ctor = re.compile(
		r"(?:(?:public|protected|private)\s+|(?:^|(?<=[;{}]))\s*)" + re.escape(name) + r"\s*\(([^)]*)\)",
		re.MULTILINE,
	)
	for m in ctor.finditer(code):
		for raw_param in m.group(1).split(","):
			cleaned = raw_param.strip()
			if not cleaned:
				continue
			cleaned = _ANNOTATION.sub("", cleaned).strip()
			cleaned = _FINAL.sub("", cleaned).strip()
			tokens = cleaned.split()
			if len(tokens) < 2:
				continue
			type_name = normalize_type(tokens[-2])
			if type_name is not None and type_name != name:
				rels.append(Relationship(source=name, target=type_name, kind=RelationshipKind.DEPENDENCY))
	return rels


def classify(unit_name: str, normalized_text: str) -> List[Relationship]:
	"""All relationships of one unit, deduplicated on (source, target, kind) in discovery order."""
	if not unit_name or not normalized_text:
		return []
	found = _ordered(
		find_inheritance(unit_name, normalized_text)
		+ find_field_associations(unit_name, normalized_text)
		+ find_constructor_dependencies(unit_name, normalized_text)
	)
	return [rel for rel in found if rel.target != unit_name]


def extract_relationships(
	units: Iterable[SourceUnit],
	policy: Union[DuplicatePolicy, str, None] = None,
) -> List[Relationship]:
	by_name = index_units(units, policy)
	return classify_all({name: strip_comments_and_strings(u.text) for name, u in by_name.items()})


def classify_all(code_by_name: Dict[str, str]) -> List[Relationship]:
	"""Run :func:`classify` over already-normalized texts, keeping first-seen order."""
	found: Dict[Relationship, None] = {}
	for name, code in code_by_name.items():
		found.update(_ordered(classify(name, code)))
	logger.debug("Extracted %d relationships from %d units", len(found), len(code_by_name))
	return list(found)
