"""
Serverless spec parser.

Load f.yml (YAML) into the plain dict consumed by the builders.
${VAR} references are substituted from the environment before parsing.
"""

import logging
import os
import string
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.exceptions import InvalidConfigError
from .models.spec import validate_spec

logger = logging.getLogger("spec_builder.parser")


def parse_spec(
    content: str, validate: bool = False, environ: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Parse a spec YAML string.

    Args:
        content: f.yml content
        validate: check the document against the spec models
        environ: substitution mapping (default: os.environ)

    Returns:
        Parsed spec dict
    """
    mapping = dict(os.environ if environ is None else environ)
    content = string.Template(content).safe_substitute(mapping)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"YAML parse error: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigError(f"spec must be a mapping, got {type(data).__name__}")

    if validate:
        validate_spec(data)

    return data


def load_spec(path: str | Path, validate: bool = False) -> Dict[str, Any]:
    """Load and parse a spec file."""
    spec_path = Path(path)
    if not spec_path.exists():
        raise FileNotFoundError(f"Spec file not found: {spec_path}")

    with open(spec_path, encoding="utf-8") as f:
        content = f.read()

    data = parse_spec(content, validate=validate)
    logger.info(f"Loaded {len(data.get('functions') or {})} function(s) from {spec_path}")
    return data
