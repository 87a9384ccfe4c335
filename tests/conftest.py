from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from mddoc.config import GeneratorConfig
from tests._fixtures.graph_builder import PROJECT_ROOT, GraphBuilder


@pytest.fixture(autouse=True)
def isolated_mddoc_logger() -> Iterator[None]:
    """Undo handler, level and propagation changes made by ``configure_logging``."""
    logger = logging.getLogger("mddoc")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def graph_builder() -> GraphBuilder:
    """Provide an empty graph builder rooted at the fake project directory."""
    return GraphBuilder()


@pytest.fixture
def full_config(tmp_path: Path) -> GeneratorConfig:
    return GeneratorConfig(output_dir=tmp_path / "out", project_root=PROJECT_ROOT)


@pytest.fixture
def simple_config(tmp_path: Path) -> GeneratorConfig:
    return GeneratorConfig(output_dir=tmp_path / "out", project_root=PROJECT_ROOT, simple=True)
