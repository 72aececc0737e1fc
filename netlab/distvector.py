"""Distance-vector routing tables computed from a link cost matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

UNREACHABLE = 9999
NO_LINK = -1
MAX_NODES = 20


@dataclass(frozen=True)
class Route:
    """One router's entry for a destination (nodes are numbered from 0)."""

    destination: int
    distance: int
    via: int | None


def parse_cost_matrix(n: int, values: Iterable[int]) -> list[list[int]]:
    """Build an n-by-n matrix from the off-diagonal costs in row order; -1 means no link."""
    if not 0 <= n <= MAX_NODES:
        raise ValueError(f"number of nodes must be between 0 and {MAX_NODES}, got {n}")
    costs = [int(v) for v in values]
    if len(costs) != n * (n - 1):
        raise ValueError(f"expected {n * (n - 1)} costs, got {len(costs)}")
    it = iter(costs)
    return [
        [0 if i == j else (UNREACHABLE if (c := next(it)) == NO_LINK else c) for j in range(n)]
        for i in range(n)
    ]


def compute_routes(costs: Sequence[Sequence[int]]) -> list[list[Route]]:
    """Relax every router's distances through each intermediate node."""
    n = len(costs)
    if any(len(row) != n for row in costs):
        raise ValueError("cost matrix must be square")
    distance = [list(row) for row in costs]
    via = [[None if c == UNREACHABLE else j for j, c in enumerate(row)] for row in costs]
    for i in range(n):
        for j in range(n):
            for k in range(n):
                if distance[i][j] > distance[i][k] + distance[k][j]:
                    distance[i][j] = distance[i][k] + distance[k][j]
                    via[i][j] = k
    return [
        [Route(j, d, hop) for j, (d, hop) in enumerate(zip(drow, vrow))]
        for drow, vrow in zip(distance, via)
    ]


def format_routes(routes: Sequence[Sequence[Route]]) -> str:
    """Render the final routing table of every router."""
    lines = ["", "Final Routing Table:", "From Node -> To Node : Minimum Distance and Route"]
    for number, table in enumerate(routes, start=1):
        lines += ["", f"Router {number}:"]
        for r in table:
            if r.distance == UNREACHABLE:
                lines.append(f"Node {r.destination + 1} is unreachable")
            else:
                hop = -1 if r.via is None else r.via
                lines.append(f"Node {r.destination + 1}: Distance {r.distance}, Route via Node {hop + 1}")
        lines.append("")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read the node count and costs from standard input and print the routing tables."""
    argparse.ArgumentParser(prog="distvector", description="Distance-vector routing.").parse_args(argv)
    print("Enter the number of nodes: ", end="")
    print("Enter cost matrix (enter -1 for unreachable nodes):")
    try:
        numbers = [int(t) for t in sys.stdin.read().split()]
        if not numbers:
            raise ValueError("missing number of nodes")
        costs = parse_cost_matrix(numbers[0], numbers[1:])
    except ValueError as exc:
        print(f"distvector: {exc}", file=sys.stderr)
        return 1
    print(format_routes(compute_routes(costs)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())