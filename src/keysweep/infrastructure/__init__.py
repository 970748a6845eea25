"""
Infrastructure Layer - Finding sinks and test fakes.
"""

from keysweep.infrastructure.fakes import (
    FailingExtractor,
    InMemoryFindingSink,
    RecordingExtractor,
    StaticExtractor,
)
from keysweep.infrastructure.finding_sink import FileFindingSink

__all__ = [
    # Sinks
    "FileFindingSink",
    # Fakes
    "InMemoryFindingSink",
    "StaticExtractor",
    "FailingExtractor",
    "RecordingExtractor",
]
