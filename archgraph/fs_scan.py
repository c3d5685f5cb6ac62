from __future__ import annotations

import logging
import os
from typing import FrozenSet, List, Optional

from . import config
from .model import FileInfo, SourceUnit

logger = logging.getLogger(__name__)


def count_lines(text: Optional[str]) -> int:
	"""Non-blank lines of ``text``."""
	if not text:
		return 0
	return sum(1 for line in text.splitlines() if line.strip())


def scan_repository(root: str) -> List[FileInfo]:
	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in config.SKIP_DIRS)
		for filename in sorted(filenames):
			path = os.path.join(dirpath, filename)
			files.append(
				FileInfo(
					path=path,
					rel_path=os.path.relpath(path, root).replace(os.sep, "/"),
					extension=os.path.splitext(filename)[1].lower(),
				)
			)
	return files


def load_units(root: str, extensions: Optional[FrozenSet[str]] = None) -> List[SourceUnit]:
	"""Read every source file under ``root`` into a unit keyed by its relative path."""
	extensions = extensions or config.SOURCE_EXTENSIONS
	units: List[SourceUnit] = []
	for f in scan_repository(root):
		if f.extension not in extensions:
			continue
		try:
			with open(f.path, "r", encoding="utf-8", errors="replace") as fh:
				text = fh.read()
		except OSError as e:
			logger.warning("Skipping unreadable file %s: %s", f.path, e)
			continue
		units.append(SourceUnit.from_path(f.rel_path, text))
	logger.info("Loaded %d source files from %s", len(units), root)
	return units
