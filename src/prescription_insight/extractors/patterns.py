# ============================================================================
# src/prescription_insight/extractors/patterns.py
# ============================================================================
"""
Ordered Pattern Rules

A small evaluator for "first match wins" regex lists. Each rule names what
it recognizes and how to render the match, so every rule can be tested on
its own and the priority order lives in one tuple.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Pattern, Tuple

Renderer = Callable[["re.Match[str]"], str]


def _whole_match(match: "re.Match[str]") -> str:
    return match.group(0).strip()


@dataclass(frozen=True)
class PatternRule:
    name: str
    pattern: Pattern[str]
    render: Renderer = _whole_match

    @classmethod
    def compile(cls, name: str, regex: str, render: Renderer = _whole_match) -> "PatternRule":
        return cls(name=name, pattern=re.compile(regex, re.IGNORECASE), render=render)

    def apply(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if match is None:
            return None
        rendered = self.render(match)
        return rendered or None


def first_match(rules: Iterable[PatternRule], text: str) -> Optional[Tuple[str, str]]:
    """
    Evaluate rules in order.

    Returns:
        (rule name, rendered value) of the first rule that matches, or None
    """
    if not text:
        return None
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            return rule.name, value
    return None
