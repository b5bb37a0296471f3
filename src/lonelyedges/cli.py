"""
lonely-edges: find the lonely edges of graphs read as graph6 from stdin.

Without options, graphs with at least one lonely edge are echoed to stdout.
"""
from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from lonelyedges.children.blowup import Child, all_children, children_preserving_lonely_count
from lonelyedges.config import MAX_SET_SIZE, Mode, Options
from lonelyedges.errors import ConfigurationConflict, InvalidGraphInput, UnrecognizedOption
from lonelyedges.graph.model import Graph, graph_from_g6
from lonelyedges.matching.search import OnComplete
from lonelyedges.matching.lonely import classify
from lonelyedges.utils.bitset import BitSet


USAGE = "Usage: lonely-edges [-o#|-d|-a] [-vmh]"

HELPTEXT = """\
Input graphs should be in graph6 format. Without any parameters, the program
outputs those graphs which contain at least one lonely edge.

  -o# : only output those graphs with exactly # lonely edges; not compatible
        with -a or -d
  -d  : for every input graph, output all of its children which have the same
        number of lonely edges; children might be isomorphic; not compatible
        with -a or -o#
  -a  : output all children of every input graph; children might be
        isomorphic; not compatible with -d or -o#
  -v  : output extra information, such as the labeling of each graph and
        which lonely edges it has
  -m  : output all perfect matchings of each graph; requires -v
"""


@dataclass
class RunStats:
    """
    Counters for one line or a whole run; per-line stats are merged into the
    run total by the input loop.

    frequencies[k] = number of input graphs with exactly k lonely edges
    """

    checked: int = 0
    skipped: int = 0
    passed: int = 0
    frequencies: Counter = field(default_factory=Counter)

    def merge(self, other: RunStats) -> RunStats:
        self.checked += other.checked
        self.skipped += other.skipped
        self.passed += other.passed
        self.frequencies.update(other.frequencies)
        return self


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lonely-edges",
        description="Program for finding the lonely edges of a graph.",
        epilog=HELPTEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-o", "--output", type=int, default=None, metavar="#")
    p.add_argument("-d", "--descendants", action="store_true")
    p.add_argument("-a", "--all", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("-m", "--matchings", action="store_true")
    return p


def resolve_options(ns: argparse.Namespace, *, capacity: int = MAX_SET_SIZE) -> Options:
    """
    Turn parsed flags into Options, rejecting conflicting combinations.
    """
    if ns.output is not None and ns.output < 0:
        raise ConfigurationConflict("number of lonely edges should be at least 0.")
    if ns.matchings and not ns.verbose:
        raise ConfigurationConflict("use -m only with -v.")
    if ns.output is not None and ns.descendants:
        raise ConfigurationConflict("cannot use -o and -d simultaneously.")
    if ns.output is not None and ns.all:
        raise ConfigurationConflict("cannot use -o and -a simultaneously.")
    if ns.descendants and ns.all:
        raise ConfigurationConflict("cannot use -a and -d simultaneously.")

    if ns.all:
        mode = Mode.ALL_CHILDREN
    elif ns.descendants:
        mode = Mode.SAME_LONELY
    else:
        mode = Mode.FILTER

    return Options(
        mode=mode,
        output_count=ns.output,
        verbose=ns.verbose,
        print_matchings=ns.matchings,
        capacity=capacity,
    )


def parse_options(argv: Optional[List[str]] = None) -> Options:
    ns, extra = build_parser().parse_known_args(argv)
    if extra:
        raise UnrecognizedOption(f"Unknown option: {' '.join(extra)}")
    return resolve_options(ns)


# ---------------------------------------------------------------------------
# Per-line processing
# ---------------------------------------------------------------------------

def print_graph(graph: Graph, err: TextIO) -> None:
    for v in range(graph.n):
        nbrs = "".join(f"{w} " for w in graph.neighbors(v))
        print(f"{v}: {nbrs}", file=err)
    print(file=err)


def matching_printer(graph: Graph, err: TextIO) -> OnComplete:
    def _print(matching: BitSet) -> None:
        print("".join(f"{u}-{v} " for u, v in graph.edge_pairs(matching)), file=err)

    return _print


def _emit_children(children: Iterable[Child], options: Options, out: TextIO, err: TextIO) -> int:
    emitted = 0
    for child in children:
        if options.verbose:
            print(f"Blowing up {child.vertex}", file=err)
        out.write(child.to_g6() + "\n")
        emitted += 1
    return emitted


def process_line(line: str, options: Options, out: TextIO, err: TextIO) -> RunStats:
    """
    Handle one graph6 input line and return its contribution to the run stats.

    Undecodable or oversized graphs, and non-cubic graphs in the children
    modes, are counted as skipped.
    """
    stats = RunStats()
    try:
        graph = graph_from_g6(line, capacity=options.capacity)
        if options.mode is not Mode.FILTER and not graph.is_cubic():
            raise InvalidGraphInput("children are only defined for cubic graphs")
    except InvalidGraphInput as exc:
        if options.verbose:
            print(f"Skipping invalid graph! ({exc})", file=err)
        stats.skipped += 1
        return stats

    g6 = line.strip()
    if options.verbose:
        print(f"\nLooking at: {g6}", file=err)
        print_graph(graph, err)

    stats.checked += 1

    if options.mode is Mode.ALL_CHILDREN:
        stats.passed += _emit_children(all_children(graph), options, out, err)
        return stats

    on_matching = matching_printer(graph, err) if options.print_matchings else None
    lonely = classify(graph, on_matching)
    stats.frequencies[lonely.count] += 1

    if options.mode is Mode.SAME_LONELY:
        children = children_preserving_lonely_count(graph, lonely.edges, on_matching)
        stats.passed += _emit_children(children, options, out, err)
        return stats

    if lonely.count:
        if options.output_count is None or options.output_count == lonely.count:
            stats.passed += 1
            out.write(g6 + "\n")
        if options.verbose:
            pairs = "".join(f"({u},{v}) " for u, v in graph.edge_pairs(lonely.edges))
            print(f"{lonely.count} lonely edges: {pairs}", file=err)

    return stats


def run(lines: Iterable[str], options: Options, out: TextIO, err: TextIO) -> RunStats:
    total = RunStats()
    for line in lines:
        total.merge(process_line(line, options, out, err))
    return total


def report(stats: RunStats, options: Options, elapsed: float, err: TextIO) -> None:
    if options.mode is not Mode.ALL_CHILDREN:
        print(file=err)
        for k in sorted(stats.frequencies):
            print(f"\tInput graphs with {k} lonely edges: {stats.frequencies[k]}", file=err)
        print(file=err)

    print(
        f"\rChecked {stats.checked} graphs in {elapsed:f} seconds: {stats.passed} passed.",
        file=err,
    )
    if stats.skipped > 0:
        print(f"Warning: {stats.skipped} graphs were skipped.", file=err)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        options = parse_options(argv)
    except UnrecognizedOption as exc:
        print(f"Error: {exc}", file=stderr)
        print(USAGE, file=stderr)
        print("Use lonely-edges --help for more detailed instructions.", file=stderr)
        return 1
    except ConfigurationConflict as exc:
        print(f"Error: {exc}", file=stderr)
        return 1

    if options.mode is Mode.ALL_CHILDREN:
        print("Warning: Children might be isomorphic.", file=stderr)
        print("\tAlso generating children without lonely edges.", file=stderr)
    elif options.mode is Mode.SAME_LONELY:
        print("Warning: -d is only intended for 3-connected cubic graphs.", file=stderr)
        print("\tChildren may be isomorphic to each other.", file=stderr)

    start = time.perf_counter()
    stats = run(stdin, options, stdout, stderr)
    report(stats, options, time.perf_counter() - start, stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
