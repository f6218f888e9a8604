from .span import Span, span
from .utils import is_subsequence, span_length, window_length, window
from .trace import MatchTrace


__all__ = [
    "Span",
    "span",

    "is_subsequence",
    "span_length",
    "window_length",
    "window",

    "MatchTrace",
]
