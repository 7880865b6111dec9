"""
Pattern catalogs
================
Every field extractor is an ordered list of PatternMatcher entries.
The first matcher (in list order) that yields a value wins; matchers
further down the list are only consulted when everything above missed.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from loguru import logger


def first_group(m: re.Match) -> Optional[str]:
    value = m.group(1).strip()
    return value or None


@dataclass(frozen=True)
class PatternMatcher:
    """A named regex plus the function that turns a match into a value."""
    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], Any] = first_group

    def search(self, text: str) -> Any:
        """Leftmost match in text whose build() yields a value."""
        for m in self.pattern.finditer(text):
            value = self.build(m)
            if value is not None:
                return value
        return None

    def match_line(self, line: str) -> Any:
        """Value for a line the pattern covers completely, else None."""
        m = self.pattern.fullmatch(line)
        if not m:
            return None
        return self.build(m)


def compile_pattern(regex: str, flags: int = re.IGNORECASE) -> re.Pattern:
    return re.compile(regex, flags)


def first_match(catalog: List[PatternMatcher], text: str, owner: str = "catalog") -> Any:
    """Run catalog against text in priority order; None when nothing matched."""
    for matcher in catalog:
        value = matcher.search(text)
        if value is not None:
            logger.debug(f"[{owner}] {matcher.name} -> {value!r}")
            return value
    return None
