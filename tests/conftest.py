"""Shared fixtures for archgraph tests."""

from pathlib import Path
from typing import List

import pytest

from archgraph.model import SourceUnit

FIXTURES = Path(__file__).parent / "fixtures"

FOO_BODY = (
	"class Foo extends Bar implements Baz { private final Qux q; private List items; Foo(Zap z){} }"
)


@pytest.fixture
def shop_root() -> Path:
	return FIXTURES / "shop"


@pytest.fixture
def foo_unit() -> SourceUnit:
	return SourceUnit(path="src/Foo.java", name="Foo", text=FOO_BODY)


@pytest.fixture
def foo_corpus(foo_unit) -> List[SourceUnit]:
	"""``Foo`` plus trivial declarations of every type it references except ``List``."""
	return [
		foo_unit,
		SourceUnit(path="src/Bar.java", name="Bar", text="class Bar {}"),
		SourceUnit(path="src/Baz.java", name="Baz", text="interface Baz {}"),
		SourceUnit(path="src/Qux.java", name="Qux", text="class Qux {}"),
		SourceUnit(path="src/Zap.java", name="Zap", text="class Zap {}"),
	]
