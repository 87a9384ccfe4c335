"""Walks the package graph and writes the documentation tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import GeneratorConfig
from .logging import PROGRESS, get_logger
from .models import Documentable, Library, PackageGraph
from .postproc.links import LinkValidator
from .postproc.lint import MarkdownLinter
from .rendering import Document, FullRenderer, SimpleRenderer
from .sink import FileSink
from .text import path_segments


@dataclass
class GenerationReport:
    """Summary of a generation run."""

    output_dir: Path
    files: List[str] = field(default_factory=list)
    link_issues: List[str] = field(default_factory=list)


class MarkdownGenerator:
    """Orchestrates a run: decides what is emitted where and flushes each document."""

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        sink: FileSink | None = None,
        linter: MarkdownLinter | None = None,
        link_validator: LinkValidator | None = None,
    ) -> None:
        self.config = config
        self.sink = sink or FileSink(config.output_dir)
        self.link_validator = link_validator or LinkValidator()
        self.logger = get_logger("generator")
        linter = linter or MarkdownLinter()
        self.full_renderer = FullRenderer(
            include=self.is_eligible,
            code_language=config.code_language,
            root_type=config.root_type,
            summary_width=config.summary_width,
            linter=linter,
        )
        self.simple_renderer = SimpleRenderer(
            include=self.is_eligible,
            project_root=config.project_root,
            root_type=config.root_type,
            source_extension=config.source_extension,
            doc_extension=config.doc_extension,
            linter=linter,
        )

    def is_excluded(self, source_path: str) -> bool:
        """True when the path runs through a dependency/vendor directory."""
        excluded = set(self.config.excluded_dirs)
        return any(segment in excluded for segment in path_segments(source_path))

    def is_eligible(self, entity: Documentable) -> bool:
        return entity.documented and not self.is_excluded(entity.source_path)

    def generate(self, graph: PackageGraph) -> GenerationReport:
        """Render the default package of ``graph`` into the output directory."""
        self.sink.prepare()
        package = graph.default_package
        libraries = [library for library in package.libraries if self.is_eligible(library)]
        self._log("Generating docs for package: %s", package.name)

        start = len(self.sink.written)
        if self.config.simple:
            self._generate_simple(libraries)
        else:
            self._flush(self.full_renderer.render_package_index(package, libraries))
            for library in libraries:
                self._generate_library(library)

        report = GenerationReport(
            output_dir=self.sink.root, files=list(self.sink.written[start:])
        )
        if self.config.check_links and not self.config.simple:
            report.link_issues = self._check_links(report.files)

        self._log("Markdown generation complete! %d files written", len(report.files))
        return report

    def _generate_library(self, library: Library) -> None:
        self._flush(self.full_renderer.render_library(library))
        for container in library.containers():
            if self.is_eligible(container):
                self._flush(self.full_renderer.render_container(library, container))

    def group_by_source(self, libraries: Iterable[Library]) -> Dict[str, List[Documentable]]:
        """Map each source file to its eligible top-level entities, in model order."""
        groups: Dict[str, List[Documentable]] = {}
        for library in libraries:
            entities: List[Documentable] = [
                *library.containers(),
                *library.functions,
                *library.variables,
            ]
            for entity in entities:
                if self.is_eligible(entity):
                    groups.setdefault(entity.source_path, []).append(entity)
        return groups

    def _generate_simple(self, libraries: List[Library]) -> None:
        for source_path, entities in self.group_by_source(libraries).items():
            self._flush(self.simple_renderer.render_file(source_path, entities))

    def _flush(self, document: Document) -> None:
        self.sink.write(document.path, document.content)

    def _check_links(self, files: List[str]) -> List[str]:
        issues: List[str] = []
        for relative in files:
            path = self.sink.root / relative
            for issue in self.link_validator.validate(
                path.read_text(encoding="utf-8"), root=path.parent
            ):
                message = f"{relative}: {issue}"
                self.logger.warning(message)
                issues.append(message)
        return issues

    def _log(self, message: str, *args: object) -> None:
        self.logger.log(PROGRESS, message, *args)


def generate(
    graph: PackageGraph, config: GeneratorConfig, *, sink: Optional[FileSink] = None
) -> GenerationReport:
    """Convenience wrapper around :class:`MarkdownGenerator`."""
    return MarkdownGenerator(config, sink=sink).generate(graph)


__all__ = ["GenerationReport", "MarkdownGenerator", "generate"]
