#!/usr/bin/env python3
"""
Grow cubic graphs with a fixed number of lonely edges by repeated triangle
blow-ups, keeping only children whose lonely-edge count equals the parent's.

Starts from K4 (6 lonely edges) unless a graph6 string is given.
Children are not reduced up to isomorphism, so generations grow quickly.

Usage: python3 descendant_generations.py [--g6 C~] [--generations 3]
"""

import argparse
import sys
import time

from lonelyedges.children.blowup import children_preserving_lonely_count
from lonelyedges.graph.model import build_graph, graph_from_g6
from lonelyedges.matching.lonely import classify


def main():
    ap = argparse.ArgumentParser(description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--g6", default="C~", help="starting cubic graph (graph6)")
    ap.add_argument("--generations", type=int, default=3)
    ap.add_argument("--max-width", type=int, default=500,
                    help="stop once a generation has more graphs than this")
    args = ap.parse_args()

    current = [graph_from_g6(args.g6)]
    target = classify(current[0]).count
    print(f"start: {args.g6}  n={current[0].n}  lonely={target}")

    for gen in range(1, args.generations + 1):
        t0 = time.time()
        nxt = []
        for g in current:
            lonely = classify(g)
            for child in children_preserving_lonely_count(g, lonely.edges):
                nxt.append(build_graph(child.adj))
        dt = time.time() - t0
        n = nxt[0].n if nxt else current[0].n + 2
        print(f"generation {gen}: {len(nxt)} graphs on {n} vertices ({dt:.2f}s)")
        if not nxt:
            break
        bad = [h for h in nxt if classify(h).count != target]
        if bad:
            print(f"  {len(bad)} children changed their lonely-edge count!", file=sys.stderr)
        if len(nxt) > args.max_width:
            print(f"  more than {args.max_width} graphs, stopping")
            break
        current = nxt


if __name__ == "__main__":
    main()
