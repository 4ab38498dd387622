"""Source-tree mirroring with JSON minification."""

from packager.transformer.json_minifier import MinifyResult, minify_json_file, minify_text
from packager.transformer.timestamps import FIXED_MTIME, normalize_mtimes, resolve_fixed_mtime
from packager.transformer.tree_walker import (
    SkippedFile,
    TransformReport,
    copy_verbatim,
    is_json_file,
    transform_tree,
)

__all__ = [
    "FIXED_MTIME",
    "MinifyResult",
    "SkippedFile",
    "TransformReport",
    "copy_verbatim",
    "is_json_file",
    "minify_json_file",
    "minify_text",
    "normalize_mtimes",
    "resolve_fixed_mtime",
    "transform_tree",
]
