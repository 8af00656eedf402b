"""
Leitner box scheduling.

A card starts in box 1 and is due immediately. A correct answer moves it up
one box, a wrong answer sends it back to box 1, and a card in box N comes
back for review N days after the answer. There is no top box.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


def utcnow() -> datetime:
    # naive UTC, matching what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Outcome(Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'

    @classmethod
    def from_flag(cls, correct) -> 'Outcome':
        return cls.CORRECT if correct else cls.INCORRECT


@dataclass(frozen=True)
class Schedule:
    box: int
    next_review_date: datetime


def initialize_schedule(now: datetime | None = None) -> Schedule:
    return Schedule(box=1, next_review_date=now or utcnow())


def advance_schedule(current_box: int, outcome: Outcome, now: datetime) -> Schedule:
    """Return the schedule that follows ``outcome`` on a card in ``current_box``.

    ``current_box`` is always >= 1 for stored cards.
    """
    if outcome is Outcome.CORRECT:
        box = current_box + 1
    else:
        box = 1
    return Schedule(box=box, next_review_date=now + timedelta(days=box))


def is_due(next_review_date: datetime, now: datetime) -> bool:
    return next_review_date <= now
