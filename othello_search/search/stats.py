"""
Node-count instrumentation shared by all search engines.

Every engine increments `expanded` once per call (pass-case calls included)
and `generated` once per legal move examined (the synthetic pass move
included). The counters are purely observational.
"""

from dataclasses import dataclass


@dataclass
class SearchStats:
    """Mutable node counters, owned by the caller of a top-level search."""

    expanded: int = 0
    generated: int = 0

    def reset(self):
        """Zero both counters before a new top-level search."""
        self.expanded = 0
        self.generated = 0

    def total(self) -> int:
        return self.expanded + self.generated
