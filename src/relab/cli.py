"""Command line entry point: label an XML document and write it back."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from relab.config import RELAB_LABEL_ATTRIBUTE, RELAB_LOG_LEVEL
from relab.exceptions import RelabError
from relab.harness import measure
from relab.insertion import insert_and_relabel
from relab.labelers import LABELERS, get_labeler
from relab.logging_config import configure_logging
from relab.tree_source import load_xml
from relab.writer import write_labeled_xml

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relab",
        description="Assign structural labels to every element of an XML document.",
    )
    parser.add_argument("input", help="Local XML file path")
    parser.add_argument(
        "--strategy",
        choices=sorted(LABELERS),
        default="static",
        help="Labeling strategy (default: static)",
    )
    parser.add_argument(
        "--insert",
        metavar="FRAGMENT",
        help="XML file whose root element is appended under the document root after labeling",
    )
    parser.add_argument("-o", "--output", help="Output path (default: labeled_<input name>)")
    parser.add_argument(
        "--attribute",
        default=RELAB_LABEL_ATTRIBUTE,
        help=f"Name of the label attribute (default: {RELAB_LABEL_ATTRIBUTE})",
    )
    parser.add_argument("--log-level", default=RELAB_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        root = load_xml(args.input)
        labeler = get_labeler(args.strategy)

        _, report = measure("initial labeling", labeler.label_tree, root, strategy=labeler.name)
        print(report.summary_line())

        if args.insert:
            fragment = load_xml(args.insert)
            _, report = measure(
                "labeling after insertion",
                insert_and_relabel,
                labeler,
                [root],
                root,
                fragment,
                strategy=labeler.name,
            )
            print(report.summary_line())

        output_path = write_labeled_xml(
            root, args.output or default_output_path(args.input), attribute=args.attribute
        )
    except (RelabError, OSError) as exc:
        logger.error("Labeling failed: %s", exc)
        return 1

    print(f"Labeled XML has been saved to {output_path}")
    return 0


def default_output_path(input_path: str) -> Path:
    source = Path(input_path)
    return source.with_name(f"labeled_{source.name}")


if __name__ == "__main__":
    sys.exit(main())
