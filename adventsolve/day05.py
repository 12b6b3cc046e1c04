"""Check and repair page orderings against precedence rules."""

import re
from dataclasses import dataclass

_NUMBER = r"[+-]?[0-9]+"
_FIRST_RULE = re.compile(rf"({_NUMBER})\|({_NUMBER})")
_NEXT_RULE = re.compile(rf"\n({_NUMBER})\|({_NUMBER})")
_FIRST_UPDATE = re.compile(rf"{_NUMBER}(?:,{_NUMBER})*")
_NEXT_UPDATE = re.compile(rf"\n({_NUMBER}(?:,{_NUMBER})*)")

# Repair runs a fixed number of passes over the rules rather than looping to a fixpoint.
_REPAIR_PASSES = 4


@dataclass(frozen=True)
class _Rule:
    first: int
    second: int

    def holds_for(self, update: list[int]) -> bool:
        if self.first not in update or self.second not in update:
            return True
        return update.index(self.second) > update.index(self.first)

    def apply_to(self, update: list[int]) -> None:
        a, b = update.index(self.first), update.index(self.second)
        update[a], update[b] = update[b], update[a]


def _parse(text: str) -> tuple[list[_Rule], list[list[int]]]:
    match = _FIRST_RULE.match(text)
    if match is None:
        raise ValueError("expected at least one rule of the form 'a|b'")
    rules = [_Rule(int(match[1]), int(match[2]))]
    pos = match.end()
    while (match := _NEXT_RULE.match(text, pos)) is not None:
        rules.append(_Rule(int(match[1]), int(match[2])))
        pos = match.end()

    if not text.startswith("\n\n", pos):
        raise ValueError("expected a blank line between rules and updates")
    pos += 2

    match = _FIRST_UPDATE.match(text, pos)
    if match is None:
        raise ValueError("expected at least one comma-separated update")
    updates = [[int(page) for page in match[0].split(",")]]
    pos = match.end()
    while (match := _NEXT_UPDATE.match(text, pos)) is not None:
        updates.append([int(page) for page in match[1].split(",")])
        pos = match.end()
    return rules, updates


def _is_ordered(update: list[int], rules: list[_Rule]) -> bool:
    return all(rule.holds_for(update) for rule in rules)


def _middle(update: list[int]) -> int:
    return update[len(update) // 2]


def _repaired(update: list[int], rules: list[_Rule]) -> list[int]:
    fixed = list(update)
    for _ in range(_REPAIR_PASSES):
        for rule in rules:
            if not rule.holds_for(fixed):
                rule.apply_to(fixed)
    return fixed


def process_part1(text: str) -> str:
    """Sum the middle pages of updates that satisfy every rule."""
    rules, updates = _parse(text)
    return str(sum(_middle(update) for update in updates if _is_ordered(update, rules)))


def process_part2(text: str) -> str:
    """Sum the middle pages of misordered updates after repairing them."""
    rules, updates = _parse(text)
    return str(
        sum(
            _middle(_repaired(update, rules))
            for update in updates
            if not _is_ordered(update, rules)
        )
    )