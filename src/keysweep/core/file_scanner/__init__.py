"""
File scanner module for keysweep.

Provides lazy recursive directory walking and the traversal engine that
feeds each discovered file through extraction and content scanning.
"""

from .interfaces import FileWalkerInterface
from .models import FileCandidate, ProcessedPathSet, ScanSummary
from .scanner import TraversalEngine
from .walker import FileWalker

__all__ = [
    # Main classes
    "TraversalEngine",
    "FileWalker",
    "FileWalkerInterface",
    # Models
    "FileCandidate",
    "ProcessedPathSet",
    "ScanSummary",
]
