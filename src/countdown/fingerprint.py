"""
Canonical keys for solver states.

Two candidate lists holding the same multiset of totals describe the same
search state, no matter which operations produced them, so they share a key.
"""

from typing import Iterable, Sequence, Tuple

from .expression import Expr

Fingerprint = Tuple[int, ...]


def fingerprint(candidates: Sequence[Expr]) -> Fingerprint:
    """Key for a candidate list that is already sorted by total."""
    return tuple(c.total for c in candidates)


def fingerprint_of_totals(totals: Iterable[int]) -> Fingerprint:
    """Key for totals given in any order."""
    return tuple(sorted(totals))
