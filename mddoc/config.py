"""Configuration loading for mddoc (.mddoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

CONFIG_FILE_NAME = ".mddoc.yml"
DEFAULT_OUTPUT_DIR = "doc/md"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Effective settings for a generation run."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    verbose: bool = False
    simple: bool = False
    project_root: str = ""
    excluded_dirs: Tuple[str, ...] = ("packages",)
    code_language: str = "dart"
    source_extension: str = ".dart"
    doc_extension: str = ".md"
    root_type: str = "Object"
    summary_width: int = 80
    check_links: bool = False


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return GeneratorConfig(project_root=str(root))

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    defaults = GeneratorConfig()
    output = _as_str(data.get("output"))
    output_dir = root / output if output else root / DEFAULT_OUTPUT_DIR

    excluded = _as_str_list(data.get("exclude_dirs")) if "exclude_dirs" in data else None
    summary_width = _as_int(data.get("summary_width"))
    if summary_width is not None and summary_width < 4:
        raise ConfigError("summary_width must be at least 4")

    return GeneratorConfig(
        output_dir=output_dir,
        verbose=_as_bool(data.get("verbose")) or False,
        simple=_as_bool(data.get("simple")) or False,
        project_root=str(root),
        excluded_dirs=tuple(excluded) if excluded is not None else defaults.excluded_dirs,
        code_language=_as_str(data.get("code_language")) or defaults.code_language,
        source_extension=_as_extension(data.get("source_extension"))
        or defaults.source_extension,
        doc_extension=_as_extension(data.get("doc_extension")) or defaults.doc_extension,
        root_type=_as_str(data.get("root_type")) or defaults.root_type,
        summary_width=summary_width or defaults.summary_width,
        check_links=_as_bool(data.get("check_links")) or False,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.name != CONFIG_FILE_NAME:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_extension(value: Any) -> Optional[str]:
    text = _as_str(value)
    if not text:
        return None
    return text if text.startswith(".") else f".{text}"


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "DEFAULT_OUTPUT_DIR",
    "GeneratorConfig",
    "load_config",
]
