"""
utils/validators.py — Checks run when a horizon sheet is finished.

validate_horizons() looks at the whole horizon list once:
1. Completeness — every horizon has a label, depth_from >= 0 and
   depth_to > depth_from. The first failing horizon is reported.
2. Overlap — on a copy sorted by depth_from (stable), a horizon starting
   above the previous one's lower boundary overlaps it. Only the first
   overlap is reported.

The result is a value; nothing here mutates the horizons or blocks the user.
What to do with each kind is decided by the caller (see routes/sheets.py).
"""

from dataclasses import dataclass, field
from typing import Tuple

OK = 'ok'
INCOMPLETE = 'incomplete'
OVERLAP = 'overlap'


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a horizon check. positions are 0-based row positions."""
    kind: str = OK
    positions: Tuple[int, ...] = field(default_factory=tuple)
    message: str = ''

    @property
    def ok(self) -> bool:
        return self.kind == OK


def is_complete(horizon) -> bool:
    return (
        bool((horizon.label or '').strip())
        and horizon.depth_from >= 0
        and horizon.depth_to > horizon.depth_from
    )


def find_overlap(horizons):
    """Return the (earlier, later) positions of the first overlap, or None."""
    ordered = sorted(enumerate(horizons), key=lambda item: item[1].depth_from)
    for (prev_pos, prev), (pos, cur) in zip(ordered, ordered[1:]):
        if cur.depth_from < prev.depth_to:
            return prev_pos, pos
    return None


def validate_horizons(horizons) -> ValidationResult:
    """Completeness first, then overlaps. Empty lists are valid."""
    for position, horizon in enumerate(horizons):
        if not is_complete(horizon):
            return ValidationResult(
                kind=INCOMPLETE,
                positions=(position,),
                message=(
                    f"Horizon {position + 1} needs a label and a depth range "
                    f"with Depth To greater than Depth From."
                ),
            )

    overlap = find_overlap(horizons)
    if overlap:
        first, second = (horizons[p] for p in overlap)
        return ValidationResult(
            kind=OVERLAP,
            positions=overlap,
            message=(
                f"Depth ranges overlap: {first.label} ({first.depth_from}-{first.depth_to}cm) "
                f"and {second.label} ({second.depth_from}-{second.depth_to}cm)."
            ),
        )

    return ValidationResult()
