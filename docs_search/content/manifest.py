"""Loading documentation entries from a JSON content manifest."""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import structlog
from pydantic import ValidationError

from ..models.entry import SearchEntry

logger = structlog.get_logger(__name__)

BUNDLED_MANIFEST_PATH = Path(__file__).resolve().parent.parent / "data" / "docs_manifest.json"


class ManifestError(ValueError):
    """Raised when a manifest cannot be turned into documentation entries."""


def resolve_manifest_path(configured: Optional[str]) -> Path:
    """
    Pick the manifest to load.

    Args:
        configured: Path from settings, if any

    Returns:
        The configured path, or the bundled manifest when unset
    """
    if configured:
        return Path(configured).expanduser()
    return BUNDLED_MANIFEST_PATH


def parse_manifest(data: Any, source: str = "<memory>") -> List[SearchEntry]:
    """
    Validate decoded manifest data into entries.

    Accepts either a list of entry objects or an object with an
    ``entries`` list.

    Args:
        data: Decoded JSON document
        source: Description of where the data came from, for error messages

    Returns:
        Validated entries in manifest order

    Raises:
        ManifestError: If the shape is wrong or an entry is invalid
    """
    if isinstance(data, dict):
        data = data.get("entries")

    if not isinstance(data, list):
        raise ManifestError(f"{source}: expected a list of entries")

    entries = []
    for position, item in enumerate(data):
        try:
            entries.append(SearchEntry.model_validate(item))
        except ValidationError as e:
            raise ManifestError(f"{source}: invalid entry at position {position}: {e}") from e

    return entries


def load_manifest(path: Union[str, Path]) -> List[SearchEntry]:
    """
    Read and validate a JSON manifest file.

    Args:
        path: Manifest file path

    Returns:
        Validated entries in manifest order

    Raises:
        FileNotFoundError: If the file does not exist
        ManifestError: If the file is not valid JSON or not a valid manifest
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ManifestError(f"{path}: invalid JSON: {e}") from e

    entries = parse_manifest(data, source=str(path))
    logger.info("Manifest loaded", path=str(path), total_entries=len(entries))
    return entries
