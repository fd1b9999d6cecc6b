"""Directory listing and file operations."""

from .listing import DirEntry, DirectoryListing, read_dir_sorted
from .operations import COPY_SUFFIX, FileOperationEngine, OperationReport, free_destination

__all__ = [
    "DirEntry",
    "DirectoryListing",
    "read_dir_sorted",
    "FileOperationEngine",
    "OperationReport",
    "free_destination",
    "COPY_SUFFIX",
]
