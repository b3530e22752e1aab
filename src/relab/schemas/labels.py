"""Label models produced by the labelers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegionLabel(BaseModel):
    """Region (containment) label of the static strategy.

    Attributes:
        level: Depth from the root, root at level 0.
        ordinal: Preorder position, 1-based and unique within one labeling.
        right_bound: Ordinal of the last node of this node's subtree in
            preorder. Equal to ``ordinal`` for a leaf.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=0)
    ordinal: int = Field(..., ge=1)
    right_bound: int = Field(..., ge=1)

    def contains(self, other: RegionLabel) -> bool:
        """True if ``other`` labels a proper descendant of this node."""
        return self.ordinal < other.ordinal <= self.right_bound

    def precedes(self, other: RegionLabel) -> bool:
        """True if this node comes before ``other`` in document order."""
        return self.ordinal < other.ordinal

    def to_text(self) -> str:
        return f"{self.level},{self.ordinal},{self.right_bound}"

    def __str__(self) -> str:
        return self.to_text()


class PathLabel(BaseModel):
    """Dewey-style path label of the dynamic strategy.

    Attributes:
        level: Breadth-first depth, top-level roots at level 1.
        path: Concatenated fixed-width binary sibling positions from the
            top-level root down to this node.
        region_id: Coarse grouping counter. Not a containment bound.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    path: str = Field(..., min_length=1, pattern=r"^[01]+$")
    region_id: int = Field(..., ge=0)

    def is_ancestor_of(self, other: PathLabel) -> bool:
        """True if ``other`` labels a proper descendant of this node."""
        return len(other.path) > len(self.path) and other.path.startswith(self.path)

    def precedes(self, other: PathLabel) -> bool:
        """True if this node comes before ``other`` in document order."""
        return self.path < other.path

    def to_text(self) -> str:
        return f"{self.level},{self.path},{self.region_id}"

    def __str__(self) -> str:
        return self.to_text()
