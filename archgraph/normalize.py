"""Lexical clean-up of source text and type tokens.

Everything here is plain text processing over Java-like source. Nothing is
parsed: comments and literal bodies are blanked out so that later pattern
scans only see structural tokens, and raw type tokens are reduced to a bare
capitalized identifier or rejected.
"""

from __future__ import annotations

import os
import re
from typing import Optional

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"//[^\r\n\u0085\u2028\u2029]*")
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')
_CHAR_LITERAL = re.compile(r"'(?:[^'\\]|\\.)*'")

_GENERIC_ARGS = re.compile(r"<.*?>")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def simple_name(path: Optional[str]) -> str:
	"""Base file name without directory or extension, e.g. ``src/a/Foo.java`` -> ``Foo``."""
	if not path:
		return ""
	base = path.replace("\\", "/").rsplit("/", 1)[-1]
	return os.path.splitext(base)[0]


def strip_comments_and_strings(text: Optional[str]) -> str:
	if text is None:
		return ""
	result = _BLOCK_COMMENT.sub(" ", text)
	result = _LINE_COMMENT.sub(" ", result)
	result = _STRING_LITERAL.sub('""', result)
	result = _CHAR_LITERAL.sub("''", result)
	return result


def normalize_type(raw: Optional[str]) -> Optional[str]:
	"""Reduce a raw type token to a capitalized simple name, or ``None``.

	``java.util.List<String>[]`` becomes ``List``; ``int`` and ``value`` are
	rejected because they do not start with an uppercase letter.
	"""
	if raw is None:
		return None
	cleaned = _GENERIC_ARGS.sub("", raw)
	cleaned = cleaned.replace("[]", "")
	cleaned = cleaned.rsplit(".", 1)[-1]
	cleaned = _NON_IDENTIFIER.sub("", cleaned)
	if not cleaned or not cleaned[0].isupper():
		return None
	return cleaned


def declares_interface(name: str, code: str) -> bool:
	"""Whether already-normalized ``code`` declares ``interface <name>``."""
	if not name or not name.strip() or not code:
		return False
	return re.search(r"\binterface\s+" + re.escape(name) + r"\b", code) is not None


def declares_abstract_class(name: str, code: str) -> bool:
	if not name or not name.strip() or not code:
		return False
	return re.search(r"\babstract\s+class\s+" + re.escape(name) + r"\b", code) is not None


def is_abstract(name: str, code: str) -> bool:
	return declares_interface(name, code) or declares_abstract_class(name, code)
