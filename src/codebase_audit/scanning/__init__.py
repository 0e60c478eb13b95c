"""File discovery and source classification."""

from .classifier import SourceClassifier, read_sources
from .discovery import ExclusionMatcher, FileDiscoverer, discover_files, glob_to_regex

__all__ = [
    "ExclusionMatcher",
    "FileDiscoverer",
    "SourceClassifier",
    "discover_files",
    "glob_to_regex",
    "read_sources",
]
