"""Labeling strategies."""

from __future__ import annotations

from typing import Any

from relab.labelers.base import Labeler
from relab.labelers.path import DynamicPathLabeler, encode_segment
from relab.labelers.region import StaticRegionLabeler

LABELERS: dict[str, type[Labeler]] = {
    StaticRegionLabeler.name: StaticRegionLabeler,
    DynamicPathLabeler.name: DynamicPathLabeler,
}


def get_labeler(name: str, **options: Any) -> Labeler:
    """Create a labeler by strategy name ("static" or "dynamic")."""
    try:
        labeler_cls = LABELERS[name.lower()]
    except KeyError:
        choices = ", ".join(sorted(LABELERS))
        raise ValueError(f"Unknown labeling strategy {name!r} (choose from {choices})") from None
    return labeler_cls(**options)


__all__ = [
    "DynamicPathLabeler",
    "LABELERS",
    "Labeler",
    "StaticRegionLabeler",
    "encode_segment",
    "get_labeler",
]
