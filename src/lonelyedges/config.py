from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Optional


# Upper bound on both vertex and edge indices (one 64-bit word by default).
MAX_SET_SIZE = int(os.environ.get("LONELYEDGES_MAX_SET_SIZE", "64"))


class Mode(enum.Enum):
    """Operating mode of a run; exactly one is active."""

    FILTER = "filter"
    ALL_CHILDREN = "all"
    SAME_LONELY = "descendants"


@dataclass(frozen=True)
class Options:
    """
    Resolved command-line options.

    output_count: with Mode.FILTER, only emit graphs with exactly this many
                  lonely edges (None = any positive number).
    verbose:      dump labelings, lonely edges and blow-ups to stderr.
    print_matchings: dump every perfect matching found (requires verbose).
    """

    mode: Mode = Mode.FILTER
    output_count: Optional[int] = None
    verbose: bool = False
    print_matchings: bool = False
    capacity: int = MAX_SET_SIZE
