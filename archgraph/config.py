"""Runtime settings, read from the environment once at import time."""

from __future__ import annotations

import os
from typing import FrozenSet


def _extensions(raw: str) -> FrozenSet[str]:
	exts = set()
	for part in raw.split(","):
		part = part.strip().lower()
		if not part:
			continue
		exts.add(part if part.startswith(".") else "." + part)
	return frozenset(exts)


SOURCE_EXTENSIONS = _extensions(os.environ.get("ARCHGRAPH_EXTENSIONS", ".java"))
DUPLICATE_POLICY = os.environ.get("ARCHGRAPH_DUPLICATES", "last").strip().lower()

SKIP_DIRS = frozenset({
	".git", "node_modules", "dist", "build", "target", "out", "__pycache__", ".idea", ".gradle",
})

# Summary limits
TOP_FILES = 5
TOP_INSTABILITY = 3
TOP_HUBS = 4
SAMPLE_EDGES = 8
