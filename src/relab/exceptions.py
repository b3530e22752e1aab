"""Custom exceptions for relab."""


class RelabError(Exception):
    """Base exception for relab operations."""


class InvalidOperationError(RelabError):
    """Tree mutation that would break the strict hierarchy."""


class EncodingOverflowError(RelabError):
    """Sibling index does not fit the fixed-width path segment."""


class LabelingError(RelabError):
    """Tree is missing labels or carries labels of the wrong kind."""


class ParseError(RelabError):
    """Error while building a tree from markup."""


class ExportError(RelabError):
    """Error while writing a labeled tree back to markup."""
