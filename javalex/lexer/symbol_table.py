"""
Identifier occurrence table.

Keeps every identifier the scanner sees together with how many times it
appeared, in order of first appearance. Keywords never reach this table.
"""

from typing import Dict, Iterator, List, Tuple


class SymbolTable:
    """Mapping from identifier text to occurrence count, first-seen order."""

    def __init__(self):
        # dicts preserve insertion order; updating a count never reorders
        self._counts: Dict[str, int] = {}

    def record(self, identifier: str) -> int:
        """Count one occurrence of identifier and return its new count."""
        count = self._counts.get(identifier, 0) + 1
        self._counts[identifier] = count
        return count

    def entries(self) -> List[Tuple[str, int]]:
        """(identifier, count) pairs in first-seen order."""
        return list(self._counts.items())

    def count(self, identifier: str) -> int:
        return self._counts.get(identifier, 0)

    def to_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._counts))

    def __repr__(self) -> str:
        return f"SymbolTable({self._counts!r})"
