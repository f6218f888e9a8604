from __future__ import annotations
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any, ClassVar
import itertools as it
import logging
import networkx as nx
from matplotlib import pyplot as plt

from .span import Span

log = logging.getLogger(__name__)


type MatchNode = tuple[int, int]
"""(history index, query position)"""


class MatchTrace:
    """Records how `span()` advanced its frontier during a single scan.

    Every time history index `i` matches query position `k`, node `(i, k)` is
    added to `graph`, carrying the window `start` it belongs to and the matched
    `element`. An edge `(j, k - 1) -> (i, k)` means that match extended the
    chain last advanced at history index `j`. Complete candidates are collected
    in discovery order in `candidates`; `best` is what `span()` returned.

    A trace belongs to exactly one call:
    ```
    trace = MatchTrace()
    s = span("aba", "abababa", trace=trace)
    trace.matched_indices()     # [0, 1, 2]
    trace.draw("debug")
    ```
    """
    graph: nx.DiGraph[MatchNode]
    candidates: list[Span]
    best: Span | None

    _draws: ClassVar[Iterator[int]] = it.count()
    """Numbers the PNGs written by `draw()`, across all traces."""

    def __init__(self) -> None:
        self.graph = nx.DiGraph()
        self.candidates = []
        self.best = None
        self._query: Sequence[Any] | None = None
        self._history: Sequence[Any] | None = None

    @property
    def query(self) -> Sequence[Any]:
        if self._query is None:
            raise ValueError("Trace holds no scan yet")
        return self._query

    @property
    def history(self) -> Sequence[Any]:
        if self._history is None:
            raise ValueError("Trace holds no scan yet")
        return self._history

    def begin(self, query: Sequence[Any], history: Sequence[Any]):
        if self._query is not None:
            raise ValueError("Trace already holds a scan; use a fresh MatchTrace per call")
        self._query = query
        self._history = history

    def record(self, i: int, k: int, start: int, prev: int | None):
        self.graph.add_node((i, k), start=start, element=self.history[i])
        if prev is not None:
            self.graph.add_edge((prev, k - 1), (i, k))

    def complete(self, candidate: Span):
        self.candidates.append(candidate)

    def finish(self, best: Span | None):
        self.best = best

    def matched_indices(self, s: Span | None = None) -> list[int] | None:
        """History indices of the query elements inside window `s` (default: `best`).

        Follows the recorded chain back from `(to, len(query) - 1)`, so the
        result is one concrete embedding of the query in the window.
        """
        if s is None:
            s = self.best
        if s is None:
            return None

        m = len(self.query)
        if m == 0:
            return []

        node = (s[1], m - 1)
        if node not in self.graph or self.graph.nodes[node]["start"] != s[0]:
            raise ValueError(f"Span {s} is not a candidate of this trace")

        indices = [node[0]]
        while node[1] > 0:
            node = next(iter(self.graph.predecessors(node)))
            indices.append(node[0])
        indices.reverse()
        return indices

    def draw(self, folder: Path | str = ".") -> Path:
        """Save a PNG of the trace, laid out on the (history index, query position) grid."""
        folder = Path(folder)

        log.info("Drawing trace")
        G = self.graph
        nodes = list(G)
        pos = {node: (node[0], -node[1]) for node in nodes}

        chain = set()
        if (indices := self.matched_indices()) is not None:
            chain = set(zip(indices, range(len(indices))))
        colors = ["tab:orange" if node in chain else "tab:blue" for node in nodes]

        fig, ax = plt.subplots()
        fig.set_size_inches(max(6.4, 0.4 * len(self.history)), max(2.4, 0.6 * len(self.query)))
        nx.draw_networkx(G, pos=pos, ax=ax, nodelist=nodes, node_color=colors, with_labels=False, arrowsize=5, width=0.5, node_size=200)
        nx.draw_networkx_labels(G, pos=pos, ax=ax, labels={node: str(G.nodes[node]["element"]) for node in nodes}, font_size=8)
        ax.set_title(f"Frontier updates, best window {self.best}")
        fig.tight_layout()

        folder.mkdir(exist_ok=True, parents=True)
        path = folder / f"trace-{next(MatchTrace._draws)}.png"
        plt.savefig(path, bbox_inches="tight", dpi=150)
        plt.close(fig)
        return path
