"""Command-line interface for the run segmentation pipeline."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .classifier import classify
from .config import Config
from .pipeline import SegmentationPipeline
from .segmenters import RunSegmenter

COMMANDS = ("segment", "inspect")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="runsegmenter",
        description="Split Unicode text into script and presentation style runs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  runsegmenter --config config.yaml

  # Direct arguments
  runsegmenter --input data/input.jsonl --output data/runs

  # Plain text input, one record per line, 4 worker processes
  runsegmenter segment --input notes.txt --format text --workers 4

  # Show the runs of a string
  runsegmenter inspect "abc 百家姓 🌱🌲" --code-points
        """,
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Segment command (default)
    segment_parser = subparsers.add_parser("segment", help="Segment text files")
    setup_segment_parser(segment_parser)

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the runs of a string"
    )
    setup_inspect_parser(inspect_parser)

    # If no command specified, treat as segment command
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or argv[0] not in COMMANDS + ("-h", "--help"):
        argv = ["segment"] + argv

    return parser.parse_args(argv)


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input file",
    )
    parser.add_argument(
        "--format",
        choices=["jsonl", "text"],
        help="Input format (default: jsonl)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for the runs table",
    )
    parser.add_argument(
        "--text-field",
        type=str,
        help="JSONL key holding the text (default: text)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--no-text",
        action="store_true",
        help="Do not write each run's text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_inspect_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for inspect command."""
    parser.add_argument("text", type=str, help="Text to segment")
    parser.add_argument(
        "--code-points",
        action="store_true",
        help="Also print the classification of every code point",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "format", None):
        config.input_format = args.format
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "text_field", None):
        config.segmentation.text_field = args.text_field
    if getattr(args, "workers", None) is not None:
        if args.workers < 1:
            raise ValueError("--workers must be at least 1")
        config.segmentation.workers = args.workers
    if getattr(args, "no_text", False):
        config.output.include_text = False

    return config


def handle_inspect(args: argparse.Namespace) -> int:
    """Handle inspect command."""
    text = args.text
    for segment in RunSegmenter(text):
        print(
            f"{segment.start:>5} {segment.end:>5}  {segment.script.value:<12} "
            f"{segment.presentation_style.value:<5}  {segment.slice(text)!r}"
        )
    if args.code_points:
        print()
        for index, char in enumerate(text):
            facts = classify(ord(char))
            print(
                f"{index:>5}  U+{facts.code_point:04X}  {facts.script.value:<12} "
                f"{facts.category}  {'neutral' if facts.neutral else '       '}  "
                f"{facts.emoji_kind.value}"
            )
    return 0


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    try:
        config = build_config(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    # Run the pipeline
    try:
        pipeline = SegmentationPipeline(config)
        record_count = pipeline.run()
        print(f"\nProcessed {record_count} records")
        print(f"Runs saved in: {config.output_path}")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "inspect":
        return handle_inspect(args)
    return handle_segment(args)


if __name__ == "__main__":
    sys.exit(main())
