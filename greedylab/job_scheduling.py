"""Greedy job sequencing with deadlines for maximum profit."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_profit(jobs: Iterable[tuple[int, int]]) -> tuple[int, list[tuple[int, int]]]:
    """Schedule (deadline, profit) jobs one per day; return the profit and the chosen jobs.

    Jobs are taken by descending profit, each on the latest free day not after its deadline.
    """
    ordered = sorted(jobs, key=lambda job: job[1], reverse=True)
    last_day = max([0, *(deadline for deadline, _ in ordered)])
    occupied = [False] * (last_day + 1)
    selected: list[tuple[int, int]] = []

    for deadline, profit in ordered:
        for day in range(deadline, 0, -1):
            if not occupied[day]:
                occupied[day] = True
                selected.append((deadline, profit))
                break

    return sum(profit for _, profit in selected), selected


def main(argv: Sequence[str] | None = None) -> int:
    """Print the best schedule for the sample jobs."""
    jobs = [(4, 20), (1, 10), (1, 40), (1, 30)]
    profit, selected = max_profit(jobs)
    chosen = "".join(f"({deadline},{value}) " for deadline, value in selected)
    print(f"Selected Jobs (deadline, profit): {chosen}")
    print(f"Max Profit = {profit}")
    return 0