from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .owner import Owner
from .patterns import Pattern


@dataclass(frozen=True)
class Rule:
    pattern: Pattern
    owners: tuple[Owner, ...]
    line: int = 0
    source: str = "CODEOWNERS"

    @property
    def pattern_text(self) -> str:
        return self.pattern.raw


@dataclass(frozen=True)
class Match:
    path: str
    chosen: Rule | None
    matches: list[Rule]

    @property
    def owners(self) -> list[Owner] | None:
        return list(self.chosen.owners) if self.chosen else None


class Owners:
    """Ordered CODEOWNERS rules; the last matching rule wins.

    Built once, never mutated afterwards, so one instance can be shared
    read-only between threads.
    """

    def __init__(self, rules: Iterable[Rule]):
        self._rules = tuple(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Owners):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def of(self, path: str) -> list[Owner] | None:
        """Owners of ``path``.

        ``None`` means no rule matched; an empty list means the winning rule
        lists no owners (explicitly unowned).
        """
        chosen: Rule | None = None
        for r in self._rules:
            if r.pattern.matches(path):
                chosen = r
        return list(chosen.owners) if chosen else None

    def match(self, path: str) -> Match:
        matches: list[Rule] = []
        for r in self._rules:
            if r.pattern.matches(path):
                matches.append(r)
        chosen = matches[-1] if matches else None
        return Match(path=path, chosen=chosen, matches=matches)
