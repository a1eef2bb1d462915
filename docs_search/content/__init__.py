"""Documentation content source boundary."""

from .manifest import (
    BUNDLED_MANIFEST_PATH,
    ManifestError,
    load_manifest,
    parse_manifest,
    resolve_manifest_path,
)

__all__ = [
    "BUNDLED_MANIFEST_PATH",
    "ManifestError",
    "load_manifest",
    "parse_manifest",
    "resolve_manifest_path",
]
