"""Main CLI entry point for the xml-tree command-line tool.

Converts XML files into their generic tree form as JSON or an indented text
outline, and reports per-file size statistics.
"""

import argparse
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from xml_tree_converter import __version__
from xml_tree_converter.api import XMLTreeConverter
from xml_tree_converter.shared import (
    ConfigError,
    ConfigValidationError,
    ConverterConfig,
    XMLConversionError,
    get_logger,
)
from xml_tree_converter.tree import ConvertedDocument

XML_SUFFIXES = {".xml", ".xhtml", ".svg"}

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.converter_config = ConverterConfig()
        self.max_workers: Optional[int] = None
        self.output_format = "json"
        self.indent = 2

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load converter configuration from a JSON file.

        Raises:
            ConfigValidationError: If the file holds an invalid configuration
        """
        config = cls()
        config.converter_config = ConverterConfig.from_json(config_path.read_text())
        return config


class XMLConversionProcessor:
    """Core conversion logic for CLI operations."""

    def __init__(self, config: CLIConfig) -> None:
        self.config = config
        self.converter = XMLTreeConverter(config=config.converter_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def process_single_file(self, file_path: Path) -> Dict[str, Any]:
        """Convert a single XML file and return a result record."""
        self.logger.debug("Converting file", extra={"file": str(file_path)})
        try:
            document, statistics = self.converter.convert_with_statistics(
                file_path.read_bytes()
            )
        except (OSError, XMLConversionError) as e:
            self.logger.error(
                "File conversion failed",
                extra={"file": str(file_path), "error_type": type(e).__name__},
                exc_info=False,
            )
            return {
                "file": str(file_path),
                "success": False,
                "error": str(e),
            }

        return {
            "file": str(file_path),
            "success": True,
            "document": document,
            "statistics": statistics.to_dict(),
        }

    def find_xml_files(self, path: Path, recursive: bool = False) -> Iterator[Path]:
        """Find XML files in path.

        Explicitly named files are always yielded, whatever their suffix.
        """
        if path.is_dir():
            candidates = path.rglob("*") if recursive else path.glob("*")
            for candidate in sorted(candidates):
                if candidate.is_file() and candidate.suffix.lower() in XML_SUFFIXES:
                    yield candidate
        else:
            yield path

    def batch_process(self, paths: List[Path], recursive: bool = False) -> List[Dict[str, Any]]:
        """Convert multiple XML files, in parallel when workers are configured."""
        all_files: List[Path] = []
        for path in paths:
            all_files.extend(self.find_xml_files(path, recursive))

        if len(all_files) <= 1 or not self.config.max_workers or self.config.max_workers == 1:
            return [self.process_single_file(file_path) for file_path in all_files]

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            return list(executor.map(self.process_single_file, all_files))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-tree",
        description="Convert XML documents into generic value trees"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by all commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="XML files or directories"
    )
    common.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Recursively process directories"
    )
    common.add_argument(
        "--config", "-c",
        type=Path,
        help="Converter configuration file (JSON)"
    )
    common.add_argument(
        "--keep-namespaces",
        action="store_true",
        help="Keep {uri}name notation for namespaced tags and attributes"
    )
    common.add_argument(
        "--workers", "-w",
        type=int,
        help="Number of parallel workers"
    )
    common.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )

    convert_parser = subparsers.add_parser(
        "convert", parents=[common], help="Convert XML files to value trees"
    )
    convert_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )
    convert_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    stats_parser = subparsers.add_parser(
        "stats", parents=[common], help="Report element and attribute counts"
    )
    stats_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    return parser


def format_outline(document: ConvertedDocument) -> str:
    """Render a converted document as an indented text outline."""
    lines = []
    if document.root_tag:
        lines.append(f"<{document.root_tag}>")

    for depth, tag, node in document.iter_nodes():
        line = "  " * depth + tag
        if node.attributes:
            rendered = ", ".join(f'{name}="{value}"' for name, value in node.attributes.items())
            line += f" [{rendered}]"
        if node.value:
            line += f": {node.value}"
        lines.append(line)

    return "\n".join(lines)


def format_conversions(results: List[Dict[str, Any]], format_type: str, indent: int = 2) -> str:
    """Format successful conversion results for output."""
    converted = [result for result in results if result["success"]]

    if format_type == "text":
        blocks = []
        for result in converted:
            outline = format_outline(result["document"])
            blocks.append(outline if len(results) == 1 else f"== {result['file']}\n{outline}")
        return "\n\n".join(blocks)

    if len(results) == 1:
        payload: Any = converted[0]["document"].to_dict() if converted else {}
    else:
        payload = {result["file"]: result["document"].to_dict() for result in converted}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def format_statistics(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format per-file statistics for output."""
    if format_type == "json":
        records = []
        for result in results:
            record = {"file": result["file"], "success": result["success"]}
            if result["success"]:
                record.update(result["statistics"])
            else:
                record["error"] = result["error"]
            records.append(record)
        return json.dumps(records, indent=2)

    if not results:
        return "No results to display."

    successful = sum(1 for result in results if result["success"])
    lines = [f"Processed {len(results)} files, {successful} successful", "-" * 60]

    for result in results:
        if not result["success"]:
            lines.append(f"✗ {result['file']}")
            lines.append(f"   Error: {result['error']}")
            continue

        statistics = result["statistics"]
        lines.append(f"✓ {result['file']}")
        lines.append(
            f"   Elements: {statistics['element_count']}, "
            f"Attributes: {statistics['attribute_count']}, "
            f"Depth: {statistics['max_depth']}, "
            f"Time: {statistics['processing_time_ms']:.1f}ms"
        )

    return "\n".join(lines)


def _configure_logging(args: argparse.Namespace, default_level: str) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, default_level)
    logging.basicConfig(level=level)


def _build_config(args: argparse.Namespace) -> CLIConfig:
    config = CLIConfig.from_file(args.config) if args.config else CLIConfig()
    _configure_logging(args, config.converter_config.logging_level)

    if args.keep_namespaces:
        config.converter_config = config.converter_config.override(strip_namespaces=False)
    if args.workers is not None:
        if args.workers < 1:
            raise ConfigValidationError(
                f"--workers must be at least 1, got {args.workers}",
                field_name="workers",
            )
        config.max_workers = args.workers

    config.output_format = args.format
    return config


def _emit(output: str, destination: Optional[Path]) -> int:
    if destination is None:
        print(output)
        return EXIT_SUCCESS

    try:
        destination.write_text(output + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"Results written to {destination}", file=sys.stderr)
    return EXIT_SUCCESS


def _report_failures(results: List[Dict[str, Any]]) -> None:
    for result in results:
        if not result["success"]:
            print(f"Failed to convert {result['file']}: {result['error']}", file=sys.stderr)


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle convert command."""
    config = _build_config(args)
    config.indent = args.indent

    results = XMLConversionProcessor(config).batch_process(args.paths, args.recursive)
    if not results:
        print("No XML files found", file=sys.stderr)
        return EXIT_FAILURE

    _report_failures(results)
    if not any(result["success"] for result in results):
        return EXIT_FAILURE

    exit_code = _emit(format_conversions(results, config.output_format, config.indent), args.output)
    if exit_code != EXIT_SUCCESS:
        return exit_code
    return EXIT_SUCCESS if all(result["success"] for result in results) else EXIT_FAILURE


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle stats command."""
    config = _build_config(args)

    results = XMLConversionProcessor(config).batch_process(args.paths, args.recursive)
    if not results:
        print("No XML files found", file=sys.stderr)
        return EXIT_FAILURE

    exit_code = _emit(format_statistics(results, config.output_format), args.output)
    if exit_code != EXIT_SUCCESS:
        return exit_code
    return EXIT_SUCCESS if all(result["success"] for result in results) else EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    try:
        if args.command == "convert":
            return cmd_convert(args)
        if args.command == "stats":
            return cmd_stats(args)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_FAILURE

    except (ConfigError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
