import argparse
import os
from dataclasses import dataclass

from line_builder import ANCHORS, Y_TOLERANCE

DEFAULT_INPUT_DIR = "/app/input"
DEFAULT_OUTPUT_DIR = "/app/output"


@dataclass(frozen=True)
class PipelineConfig:
    input_dir: str = DEFAULT_INPUT_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    y_tolerance: float = Y_TOLERANCE
    anchor: str = "previous"
    workers: int = 1
    log_level: str = "INFO"

    def __post_init__(self):
        if self.y_tolerance < 0:
            raise ValueError("y_tolerance must not be negative")
        if self.anchor not in ANCHORS:
            raise ValueError(f"anchor must be one of {ANCHORS}")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Extract a title and H1-H3 outline from every PDF in a directory.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--input-dir",
        default=os.environ.get("OUTLINE_INPUT_DIR", DEFAULT_INPUT_DIR),
        help="Directory containing the PDF files to process.",
    )
    parser.add_argument(
        "--output-dir",
        default=os.environ.get("OUTLINE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        help="Directory where the JSON outlines are written.",
    )
    parser.add_argument(
        "--y-tolerance",
        type=float,
        default=Y_TOLERANCE,
        help="Vertical distance under which two fragments share a line.",
    )
    parser.add_argument(
        "--anchor",
        choices=ANCHORS,
        default="previous",
        help="Fragment a new one is measured against when grouping lines.",
    )
    parser.add_argument("--workers", type=int, default=1, help="Documents processed in parallel.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return PipelineConfig(
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            y_tolerance=args.y_tolerance,
            anchor=args.anchor,
            workers=args.workers,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))
