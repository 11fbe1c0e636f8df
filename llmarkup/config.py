"""
Layered configuration for the llmarkup CLI.

Precedence, highest first: explicit CLI options, ``LLMARKUP_*`` environment
variables, the nearest ``.llmarkuprc`` (YAML) walking up from the working
directory, built-in defaults.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

RC_FILENAME = ".llmarkuprc"
ENV_PREFIX = "LLMARKUP_"


class Settings(BaseModel):
    output_dir: str = "output"
    manifest_section: str = "project_files"
    name_attribute: str = "name"
    ignore_patterns: List[str] = Field(default_factory=list)
    rc_path: Optional[str] = None


def find_rc_file(start: Optional[Path] = None) -> Optional[Path]:
    current = (start or Path.cwd()).resolve()
    for candidate_dir in (current, *current.parents):
        candidate = candidate_dir / RC_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _load_rc(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return data


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field_name in ("output_dir", "manifest_section", "name_attribute"):
        value = os.environ.get(ENV_PREFIX + field_name.upper())
        if value:
            overrides[field_name] = value
    patterns = os.environ.get(ENV_PREFIX + "IGNORE_PATTERNS")
    if patterns:
        overrides["ignore_patterns"] = [p.strip() for p in patterns.split(",") if p.strip()]
    return overrides


def load_settings(
    rc_path: Optional[str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """
    Resolve settings from every layer.

    Args:
        rc_path: Explicit config file; when omitted the nearest ``.llmarkuprc`` is used.
        cli_overrides: Values given on the command line. ``None`` values are ignored.

    Raises:
        FileNotFoundError: ``rc_path`` was given but does not exist.
        ValueError: The config file is not a valid YAML mapping or has bad values.
    """
    if rc_path is not None:
        path: Optional[Path] = Path(rc_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {rc_path}")
    else:
        path = find_rc_file()

    values: Dict[str, Any] = {}
    if path is not None:
        logger.debug("Loading config from %s", path)
        values.update(_load_rc(path))
        values["rc_path"] = str(path)
    values.update(_env_overrides())
    values.update({k: v for k, v in (cli_overrides or {}).items() if v is not None})

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
