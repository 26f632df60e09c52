"""Lateral offsets that keep parallel edges apart."""

from __future__ import annotations

from flowlayout.layout.constants import (
    PARALLEL_SPACING_MAX,
    PARALLEL_SPACING_MIN,
    PARALLEL_SPREAD,
)


def spacing_unit(group_size: int) -> float:
    """Lateral step between neighbours in a group of ``group_size`` edges.

    Shrinks as the group grows so large fan-outs stay within a bounded
    band, but never below the minimum readable step.
    """
    n = max(1, group_size)
    return min(PARALLEL_SPACING_MAX, max(PARALLEL_SPACING_MIN, PARALLEL_SPREAD / n))


def lateral_offset(group_index: int, group_size: int) -> float:
    """Signed offset of a group member from the group's centre line.

    Members are spaced one unit apart and centred on zero, so a lone
    edge gets no offset.
    """
    if group_size <= 1:
        return 0.0
    return (group_index - (group_size - 1) / 2) * spacing_unit(group_size)
