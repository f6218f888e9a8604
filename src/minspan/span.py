from __future__ import annotations
from collections.abc import Sequence
from typing import TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .trace import MatchTrace

log = logging.getLogger(__name__)


type Span = tuple[int, int]
"""Inclusive `(from, to)` window into the history."""


def span[A](query: Sequence[A], history: Sequence[A], *, trace: MatchTrace | None = None) -> Span | None:
    """Shortest window of `history` that contains `query` as a subsequence.

    Returns the inclusive `(from, to)` indices, or `None` if `query` does not
    occur in `history` in order. An empty query always yields `(0, 0)`, even for
    an empty history.

    Ties between equally short windows go to the one found first while scanning
    `history` left to right. Elements are only compared with `==`.

    If `trace` is given, every frontier update is recorded into it.
    """
    m = len(query)
    if trace is not None:
        trace.begin(query, history)

    if m == 0:
        log.debug(f"span: query=0 history={len(history)} -> (0, 0)")
        if trace is not None:
            trace.finish((0, 0))
        return (0, 0)

    # starting_at[k]: best (start, end) matching query[:k + 1] seen so far
    starting_at: list[Span | None] = [None] * m
    best: Span | None = None

    for i, h in enumerate(history):
        # Walk the query backwards, so starting_at[k - 1] still holds the
        # previous round's value when query[k] is extended from it.
        for k in range(m - 1, -1, -1):
            if query[k] != h:
                continue

            if k == 0:
                starting_at[0] = (i, i)
                if trace is not None:
                    trace.record(i, 0, start=i, prev=None)
            else:
                prev = starting_at[k - 1]
                if prev is None:
                    continue  # no chain to extend yet
                starting_at[k] = (prev[0], i)
                if trace is not None:
                    trace.record(i, k, start=prev[0], prev=prev[1])

            if k == m - 1:
                cand = starting_at[k]
                assert cand is not None
                if trace is not None:
                    trace.complete(cand)
                if best is None or (cand[1] - cand[0]) < (best[1] - best[0]):
                    best = cand

    log.debug(f"span: query={m} history={len(history)} -> {best}")
    if trace is not None:
        trace.finish(best)
    return best
