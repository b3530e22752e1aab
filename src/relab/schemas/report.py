"""Measurement report model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LabelingReport(BaseModel):
    """Timing and memory figures for one labeling step.

    Attributes:
        operation: What was measured (e.g. "initial labeling").
        strategy: Labeler name, if the step ran a labeler.
        nodes_labeled: Number of labels written, if known.
        elapsed_ms: Wall-clock duration in milliseconds.
        peak_memory_kb: Peak traced allocation during the step, in KB.
    """

    operation: str
    strategy: str | None = None
    nodes_labeled: int | None = Field(default=None, ge=0)
    elapsed_ms: float = Field(..., ge=0)
    peak_memory_kb: float = Field(..., ge=0)

    def summary_line(self) -> str:
        parts = [f"{self.operation}:"]
        if self.strategy:
            parts.append(f"[{self.strategy}]")
        if self.nodes_labeled is not None:
            parts.append(f"{self.nodes_labeled} nodes,")
        parts.append(f"{self.elapsed_ms:.3f} ms,")
        parts.append(f"{self.peak_memory_kb:.1f} KB")
        return " ".join(parts)
