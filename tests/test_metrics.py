import time

import pytest
from pydantic import ValidationError

from archgraph.corpus import CorpusError
from archgraph.fs_scan import load_units
from archgraph.metrics import compute_metrics, instability
from archgraph.model import SourceUnit


def unit(name, text, folder="src"):
	return SourceUnit(path=f"{folder}/{name}.java", name=name, text=text)


def test_empty_corpus_has_no_metrics():
	assert compute_metrics([]) == {}


def test_scenario_metrics(foo_corpus):
	metrics = compute_metrics(foo_corpus)
	assert list(metrics) == ["Foo", "Bar", "Baz", "Qux", "Zap"]

	foo = metrics["Foo"]
	assert foo.efferent_count == 4
	assert foo.afferent_count == 0
	assert foo.instability == 1.0
	assert foo.abstractness == 0.0
	assert foo.efferent_peers == ("Bar", "Baz", "Qux", "Zap")

	bar = metrics["Bar"]
	assert (bar.efferent_count, bar.afferent_count, bar.instability) == (0, 1, 0.0)
	assert bar.afferent_peers == ("Foo",)
	assert metrics["Baz"].abstractness == 1.0


def test_external_types_do_not_count():
	metrics = compute_metrics([unit("A", "class A { private List items; private String s; }")])
	assert metrics["A"].efferent_count == 0
	assert metrics["A"].instability == 0.0


def test_shop_fixture_metrics(shop_root):
	metrics = compute_metrics(load_units(str(shop_root)))
	assert metrics["OrderService"].efferent_peers == ("BaseService", "Order", "Repository")
	assert metrics["Order"].afferent_peers == ("OrderService", "Repository")
	assert metrics["Repository"].instability == 0.5
	assert metrics["BaseService"].instability == 0.0
	assert metrics["Repository"].abstractness == 1.0
	assert metrics["BaseService"].abstractness == 1.0
	assert metrics["Order"].abstractness == 0.0
	for m in metrics.values():
		assert 0.0 <= m.instability <= 1.0
		assert m.abstractness in (0.0, 1.0)
		assert (m.instability == 0.0) == (m.efferent_count == 0)


def test_instability_helper():
	assert instability(0, 0) == 0.0
	assert instability(1, 3) == 0.25
	assert instability(2, 0) == 1.0


def test_none_text_counts_as_empty():
	metrics = compute_metrics([SourceUnit(path="A.java", name="A", text=None), unit("B", "class B {}")])
	assert metrics["A"].efferent_count == 0
	assert metrics["A"].lines_of_code == 0


def test_duplicate_names_follow_policy():
	units = [unit("Foo", "class Foo { Bar b; }", "a"), unit("Foo", "class Foo {}", "b"), unit("Bar", "class Bar {}")]
	assert compute_metrics(units)["Foo"].efferent_count == 0
	assert compute_metrics(units, "first")["Foo"].efferent_count == 1
	with pytest.raises(CorpusError):
		compute_metrics(units, "reject")


def test_blank_name_is_rejected():
	with pytest.raises(CorpusError):
		compute_metrics([SourceUnit(path="x/", name=" ", text="class X {}")])


def test_passes_do_not_share_state(foo_corpus):
	first = compute_metrics(foo_corpus)
	compute_metrics([unit("Other", "class Other { Foo f; }")])
	assert compute_metrics(foo_corpus) == first


def test_results_are_immutable(foo_corpus):
	foo = compute_metrics(foo_corpus)["Foo"]
	assert isinstance(foo.efferent_peers, tuple)
	with pytest.raises(ValidationError):
		foo.efferent_count = 0


def test_large_corpus_stays_fast():
	size = 3000
	units = [unit(f"U{i}", f"class U{i} {{ private U{i + 1} next; }}") for i in range(size)]
	started = time.perf_counter()
	metrics = compute_metrics(units)
	elapsed = time.perf_counter() - started

	assert len(metrics) == size
	assert (metrics["U0"].efferent_count, metrics["U0"].afferent_count) == (1, 0)
	assert metrics["U1500"].efferent_peers == ("U1501",)
	assert metrics["U1500"].afferent_peers == ("U1499",)
	assert metrics["U1500"].instability == 0.5
	assert metrics[f"U{size - 1}"].efferent_count == 0
	assert elapsed < 30
