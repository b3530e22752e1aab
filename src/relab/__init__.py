"""relab: structural labels for XML-derived trees."""

from relab.exceptions import (
    EncodingOverflowError,
    ExportError,
    InvalidOperationError,
    LabelingError,
    ParseError,
    RelabError,
)
from relab.insertion import attach_root, insert, insert_and_relabel
from relab.labelers import (
    DynamicPathLabeler,
    Labeler,
    StaticRegionLabeler,
    encode_segment,
    get_labeler,
)
from relab.query import query_nodes
from relab.schemas import LabelingReport, Node, PathLabel, RegionLabel

__all__ = [
    "DynamicPathLabeler",
    "EncodingOverflowError",
    "ExportError",
    "InvalidOperationError",
    "Labeler",
    "LabelingError",
    "LabelingReport",
    "Node",
    "ParseError",
    "PathLabel",
    "RegionLabel",
    "RelabError",
    "StaticRegionLabeler",
    "attach_root",
    "encode_segment",
    "get_labeler",
    "insert",
    "insert_and_relabel",
    "query_nodes",
]
