"""Load a native apidoc document from a JSON or YAML file."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from apidoc_openapi.doc.base import Document
from apidoc_openapi.errors import DocLoadError

logger = logging.getLogger(__name__)


def _read(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocLoadError(f"{file_path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise DocLoadError(f"{file_path}: {e.strerror or e}") from e


def detect_format(file_path: Path) -> str:
    """Detect whether a document file is JSON or YAML.

    Returns: 'json' or 'yaml'.
    """
    text = _read(file_path)
    try:
        json.loads(text)
        return "json"
    except (json.JSONDecodeError, ValueError):
        return "yaml"


def load_doc(file_path: Path) -> Document:
    """Read and validate an apidoc document.

    JSON is a subset of YAML, so both formats go through ``yaml.safe_load``.
    """
    text = _read(file_path)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocLoadError(f"{file_path}: {e}") from e

    if not isinstance(data, dict):
        raise DocLoadError(f"{file_path}: top level must be a mapping")

    try:
        doc = Document.model_validate(data)
    except ValidationError as e:
        raise DocLoadError(f"{file_path}: {e}") from e

    logger.debug("loaded %s with %d apis", file_path, len(doc.apis))
    return doc
