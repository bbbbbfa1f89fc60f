"""Ordered rule tables shared by the insight and recommendation generators.

Updates:
    v0.1.0 - 2026-10-12 - Added first-match rule groups evaluated in sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

ContextT = TypeVar("ContextT")
EntryT = TypeVar("EntryT")


@dataclass(slots=True, frozen=True)
class Rule(Generic[ContextT, EntryT]):
    """Predicate paired with the entries it contributes when it matches."""

    predicate: Callable[[ContextT], bool]
    entries: tuple[EntryT, ...]


@dataclass(slots=True, frozen=True)
class RuleGroup(Generic[ContextT, EntryT]):
    """Mutually exclusive rules; only the first matching rule contributes."""

    name: str
    rules: tuple[Rule[ContextT, EntryT], ...]

    def evaluate(self, context: ContextT) -> tuple[EntryT, ...]:
        for rule in self.rules:
            if rule.predicate(context):
                return rule.entries
        return ()


def evaluate_groups(
    groups: Sequence[RuleGroup[ContextT, EntryT]], context: ContextT
) -> list[EntryT]:
    """Evaluate every group in order and concatenate their contributions.

    Args:
        groups (Sequence[RuleGroup]): Rule groups in output order.
        context: Value passed to every predicate.

    Returns:
        list: Entries in group order. Nothing is de-duplicated.
    """

    entries: list[EntryT] = []
    for group in groups:
        entries.extend(group.evaluate(context))
    return entries


__all__ = ["Rule", "RuleGroup", "evaluate_groups"]
