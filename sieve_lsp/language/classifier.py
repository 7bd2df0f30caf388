"""Line oriented statement classification.

There is no grammar here.  A line "looks like" a Sieve statement when it
mentions a known test or action anywhere in its text, or when it opens
with a control keyword.  Comments that mention an action and statements
split over several lines are misclassified; callers rely on exactly this
boundary, so keep it.
"""

from __future__ import annotations

from typing import Tuple

from .catalog import DEFAULT_CATALOG, SymbolCatalog, SymbolClass

CONTROL_KEYWORDS: Tuple[str, ...] = ("require", "if", "elsif", "else")


class LineClassifier:
    """Keyword based predicates over a single line of script text."""

    def __init__(self, catalog: SymbolCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog
        self._tests = catalog.names(SymbolClass.TEST)
        self._actions = catalog.names(SymbolClass.ACTION)

    def is_blank_or_comment(self, line: str) -> bool:
        trimmed = line.strip()
        return trimmed == "" or trimmed.startswith("#")

    def is_plausible_statement(self, line: str) -> bool:
        if self.is_blank_or_comment(line):
            return True
        trimmed = line.strip()
        if any(name in trimmed for name in self._tests):
            return True
        if any(name in trimmed for name in self._actions):
            return True
        return trimmed.startswith(CONTROL_KEYWORDS)

    def is_action_line(self, line: str) -> bool:
        return line.strip().startswith(self._actions)


_DEFAULT_CLASSIFIER = LineClassifier()


def is_plausible_statement(line: str) -> bool:
    return _DEFAULT_CLASSIFIER.is_plausible_statement(line)


def is_action_line(line: str) -> bool:
    return _DEFAULT_CLASSIFIER.is_action_line(line)


__all__ = ["CONTROL_KEYWORDS", "LineClassifier", "is_action_line", "is_plausible_statement"]
