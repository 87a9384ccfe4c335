"""CLI entrypoint for mddoc."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, load_config
from .generator import MarkdownGenerator
from .loader import ModelError, load_package_graph
from .logging import configure_logging, get_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mddoc",
        description="Generate Markdown API documentation from a resolved package model.",
    )
    parser.add_argument(
        "model",
        help="Path to the package model (JSON or YAML) produced by the analyzer.",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=".",
        help="Project root; source paths are shown relative to it (defaults to current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory (defaults to the configured value or doc/md).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file written and other progress details.",
    )
    parser.add_argument(
        "-s",
        "--simple",
        action="store_true",
        help="One document per source file with line numbers instead of linked pages.",
    )
    parser.add_argument(
        "--check-links",
        action="store_true",
        help="Report relative links in the generated pages that do not resolve.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mddoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    input_dir = Path(args.input).expanduser().resolve()
    try:
        config = load_config(input_dir)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    verbose = bool(args.verbose) or config.verbose
    configure_logging(verbose=verbose, log_file=args.log_file)
    output_dir = Path(args.output) if args.output else config.output_dir
    config = replace(
        config,
        output_dir=output_dir,
        verbose=verbose,
        simple=bool(args.simple) or config.simple,
        project_root=str(input_dir),
        check_links=bool(args.check_links) or config.check_links,
    )

    print("mddoc Markdown Generator")
    print(f"Input: {input_dir}")
    print(f"Output: {_relativize(output_dir)}")
    print("")

    try:
        graph = load_package_graph(Path(args.model))
        print(f"Found {graph.library_count} libraries")
        report = MarkdownGenerator(config).generate(graph)
    except (FileNotFoundError, ModelError) as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        get_logger("cli").debug("Generation failed", exc_info=True)
        parser.exit(1, f"mddoc failed: {exc}\nRun with --verbose for more details.\n")

    if report.link_issues:
        print(f"{len(report.link_issues)} broken links reported")
    print(f"Done! Documentation generated in: {_relativize(output_dir)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
