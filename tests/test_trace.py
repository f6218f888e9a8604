from __future__ import annotations
from pathlib import Path

import pytest

from minspan import MatchTrace, span


HISTORY = "acccccurlycurrelly"


def test_trace_does_not_change_result():
    trace = MatchTrace()
    assert span("curl", HISTORY, trace=trace) == span("curl", HISTORY)
    assert trace.best == (5, 8)


def test_candidates_in_discovery_order():
    trace = MatchTrace()
    span("curl", HISTORY, trace=trace)
    assert trace.candidates == [(5, 8), (10, 15), (10, 16)]


def test_matched_indices():
    trace = MatchTrace()
    span("curl", HISTORY, trace=trace)
    assert trace.matched_indices() == [5, 6, 7, 8]
    assert trace.matched_indices((10, 15)) == [10, 11, 13, 15]


def test_matched_indices_repeated_elements():
    trace = MatchTrace()
    assert span("aba", "abababa", trace=trace) == (0, 2)
    assert trace.matched_indices() == [0, 1, 2]


def test_matched_indices_rejects_unknown_span():
    trace = MatchTrace()
    span("curl", HISTORY, trace=trace)
    with pytest.raises(ValueError):
        trace.matched_indices((0, 8))


def test_no_match():
    trace = MatchTrace()
    assert span("z", HISTORY, trace=trace) is None
    assert trace.best is None
    assert trace.candidates == []
    assert trace.matched_indices() is None
    assert len(trace.graph) == 0


def test_empty_query():
    trace = MatchTrace()
    assert span("", "abc", trace=trace) == (0, 0)
    assert trace.best == (0, 0)
    assert trace.matched_indices() == []


def test_edges_follow_scan_order():
    trace = MatchTrace()
    span("aba", "abababa", trace=trace)
    for (j, k0), (i, k1) in trace.graph.edges:
        assert j < i
        assert k1 == k0 + 1
    for (i, k), data in trace.graph.nodes(data=True):
        assert data["element"] == "abababa"[i] == "aba"[k]
        assert data["start"] <= i


def test_trace_belongs_to_one_call():
    trace = MatchTrace()
    span("ab", "ab", trace=trace)
    with pytest.raises(ValueError):
        span("ab", "ab", trace=trace)


def test_fresh_trace_has_no_scan():
    with pytest.raises(ValueError):
        MatchTrace().history


def test_draw(tmp_path: Path):
    trace = MatchTrace()
    span("curl", HISTORY, trace=trace)
    path = trace.draw(tmp_path / "out")
    assert path.exists()
    assert path.suffix == ".png"
    assert trace.draw(tmp_path / "out") != path
