from __future__ import annotations
from collections.abc import Sequence

from .span import Span, span


def is_subsequence[A](query: Sequence[A], history: Sequence[A]) -> bool:
    """Whether `query` occurs in `history` in order, not necessarily adjacent."""
    k = 0
    for h in history:
        if k == len(query):
            break
        if query[k] == h:
            k += 1
    return k == len(query)


def span_length(s: Span | None) -> int | None:
    """Number of elements in an inclusive span."""
    if s is None:
        return None
    return s[1] - s[0] + 1


def window_length[A](query: Sequence[A], history: Sequence[A]) -> int:
    """
    Length of the shortest window of `history` containing `query`.

    If there is no such window, returns `len(history) + 1`, one larger than the
    longest possible legitimate match. That keeps the result directly comparable
    with `<` across histories:
    ```
    best = min(histories, key=lambda h: window_length(query, h))
    ```
    """
    n = span_length(span(query, history))
    return len(history) + 1 if n is None else n


def window[A, S: Sequence](query: Sequence[A], history: S) -> S | None:
    """The slice of `history` covered by the shortest window, if any."""
    s = span(query, history)
    if s is None:
        return None
    return history[s[0]:s[1] + 1]  # type: ignore[return-value]
