"""
Finding sink interface.

Everything the detectors find is handed to a sink; what the sink does with
it (append to a report, keep in memory) is up to the implementation.
"""

from abc import ABC, abstractmethod

from keysweep.core.detectors import Finding


class FindingSinkInterface(ABC):
    """Abstract interface for append-only finding sinks."""

    @abstractmethod
    def report(self, finding: Finding) -> None:
        """
        Record a single finding.

        Implementations must not raise on write failure; the failure is
        logged and scanning continues.
        """
        pass
