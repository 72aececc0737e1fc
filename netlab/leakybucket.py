"""Leaky bucket traffic-shaping simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class BucketStep:
    """What happened to the bucket when one packet arrived."""

    incoming: int
    dropped: int
    stored: int
    remaining: int


def average_rate(packets: Sequence[int]) -> int:
    """Mean packet size, truncated toward zero; used as the outgoing rate."""
    if not packets:
        raise ValueError("at least one packet is required")
    total = sum(packets)
    quotient = abs(total) // len(packets)
    return quotient if total >= 0 else -quotient


def simulate(bucket_size: int, packets: Sequence[int]) -> list[BucketStep]:
    """Feed packets into a bucket that leaks at the average packet rate."""
    outgoing = average_rate(packets)
    store = 0
    steps = []
    for packet in packets:
        space = bucket_size - store
        dropped = max(packet - space, 0)
        store = store + packet if not dropped else bucket_size
        stored, store = store, max(store - outgoing, 0)
        steps.append(BucketStep(packet, dropped, stored, store))
    return steps


def format_report(bucket_size: int, packets: Sequence[int]) -> str:
    """Describe the simulation step by step."""
    lines = [f"The average outgoing rate of packets: {average_rate(packets)}"]
    for step in simulate(bucket_size, packets):
        lines.append(f"Incoming packet size: {step.incoming}")
        if step.dropped:
            lines.append(f"Dropped number of packets: {step.dropped}")
        lines.append(f"Bucket status: {step.stored} out of {bucket_size}")
        lines.append(f"After outgoing: Bucket status: {step.remaining} out of {bucket_size}")
        lines.append("")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read bucket size, packet count and packets from standard input and print the report."""
    argparse.ArgumentParser(prog="leakybucket", description="Leaky bucket simulation.").parse_args(argv)
    print("Enter the bucket size: ", end="")
    print("Enter the number of inputs: ", end="")
    print("Enter the incoming packet size:")
    try:
        numbers = [int(t) for t in sys.stdin.read().split()]
        if len(numbers) < 2:
            raise ValueError("missing bucket size or number of inputs")
        bucket_size, count, packets = numbers[0], numbers[1], numbers[2:]
        if count <= 0:
            raise ValueError("number of inputs must be positive")
        if len(packets) < count:
            raise ValueError("missing packet size")
    except ValueError as exc:
        print(f"leakybucket: {exc}", file=sys.stderr)
        return 1
    print(format_report(bucket_size, packets[:count]), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())