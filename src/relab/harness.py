"""Time and memory measurement around labeling steps."""

from __future__ import annotations

import time
import tracemalloc
from typing import Any, Callable, TypeVar

from relab.schemas import LabelingReport

T = TypeVar("T")


def measure(
    operation: str,
    func: Callable[..., T],
    *args: Any,
    strategy: str | None = None,
    **kwargs: Any,
) -> tuple[T, LabelingReport]:
    """Run ``func(*args, **kwargs)`` and report its duration and peak memory.

    If ``func`` returns an int it is taken as the number of nodes labeled.
    Memory is the peak of Python allocations traced during the call; an
    already running ``tracemalloc`` session is left running.

    Returns:
        Tuple of (func's result, report).
    """
    was_tracing = tracemalloc.is_tracing()
    if not was_tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    started = time.perf_counter()
    try:
        result = func(*args, **kwargs)
    finally:
        elapsed_s = time.perf_counter() - started
        _, peak_bytes = tracemalloc.get_traced_memory()
        if not was_tracing:
            tracemalloc.stop()

    nodes = result if isinstance(result, int) and not isinstance(result, bool) else None
    report = LabelingReport(
        operation=operation,
        strategy=strategy,
        nodes_labeled=nodes,
        elapsed_ms=elapsed_s * 1000.0,
        peak_memory_kb=peak_bytes / 1024.0,
    )
    return result, report
