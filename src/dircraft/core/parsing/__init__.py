from __future__ import annotations

from .line_decomposer import decompose_line, resolve_indentation
from .path_assembler import parse_tree
from .path_classifier import classify_paths

__all__ = [
    "decompose_line",
    "resolve_indentation",
    "parse_tree",
    "classify_paths",
]
