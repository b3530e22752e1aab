"""Shared schemas for relab."""

from relab.schemas.labels import PathLabel, RegionLabel
from relab.schemas.report import LabelingReport
from relab.schemas.tree import Label, Node, as_roots, iter_forest

__all__ = [
    "Label",
    "LabelingReport",
    "Node",
    "PathLabel",
    "RegionLabel",
    "as_roots",
    "iter_forest",
]
