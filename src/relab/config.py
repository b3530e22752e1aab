"""Local configuration for relab."""

from __future__ import annotations

import os


DEFAULT_SEGMENT_WIDTH = 3
DEFAULT_INITIAL_REGION_ID = 1
DEFAULT_LABEL_ATTRIBUTE = "label"
DEFAULT_XML_FEATURES = "xml"
DEFAULT_LOG_LEVEL = "INFO"

# Bits per sibling position in a dynamic path label.
RELAB_SEGMENT_WIDTH = int(os.getenv("RELAB_SEGMENT_WIDTH", str(DEFAULT_SEGMENT_WIDTH)))
RELAB_INITIAL_REGION_ID = int(os.getenv("RELAB_INITIAL_REGION_ID", str(DEFAULT_INITIAL_REGION_ID)))
RELAB_LABEL_ATTRIBUTE = os.getenv("RELAB_LABEL_ATTRIBUTE", DEFAULT_LABEL_ATTRIBUTE)
# BeautifulSoup feature string; "xml" selects the lxml XML parser.
RELAB_XML_FEATURES = os.getenv("RELAB_XML_FEATURES", DEFAULT_XML_FEATURES)
RELAB_LOG_LEVEL = os.getenv("RELAB_LOG_LEVEL", DEFAULT_LOG_LEVEL)
