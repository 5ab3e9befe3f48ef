"""A small rule-based evaluator of employee performance scores."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Employee:
    """An employee's scores, each on a 0-10 scale."""

    name: str
    attendance: float
    punctuality: float
    task_completion: float
    teamwork: float
    initiative: float

    def average(self) -> float:
        scores = (self.attendance, self.punctuality, self.task_completion, self.teamwork, self.initiative)
        return sum(scores) / len(scores)


def evaluate_performance(score: float) -> str:
    """Map an average score to an overall rating."""
    if score >= 8.5:
        return "Excellent"
    if score >= 7.0:
        return "Good"
    if score >= 5.0:
        return "Average"
    return "Needs Improvement"


class _Reader:
    """Reads whole lines or single whitespace-separated tokens from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("unexpected end of input")
        return line

    def line(self, prompt: str) -> str:
        print(prompt, end="", flush=True)
        self._pending.clear()
        return self._next_line().rstrip("\r\n")

    def token(self, prompt: str) -> str:
        print(prompt, end="", flush=True)
        while not self._pending:
            self._pending = self._next_line().split()
        return self._pending.pop(0)


def _read_employee(reader: _Reader) -> Employee:
    name = reader.line("Enter employee name: ")
    scores = [
        float(reader.token(f"Enter score (0-10) for {label}: "))
        for label in ("Attendance", "Punctuality", "Task Completion", "Teamwork", "Initiative")
    ]
    return Employee(name, *scores)


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate employees read from standard input until the user declines."""
    reader = _Reader(sys.stdin)
    try:
        while True:
            employee = _read_employee(reader)
            average = employee.average()
            print("\n--- Performance Summary ---")
            print(f"Employee: {employee.name}")
            print(f"Average Score: {average:g}/10")
            print(f"Overall Evaluation: {evaluate_performance(average)}")
            print("---------------------------")
            answer = reader.token("\nEvaluate another employee? (y/n): ")
            if answer[0] not in "yY":
                return 0
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1