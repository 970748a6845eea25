"""
Service Layer - ScanService, root providers and the ScanContext container.
"""

from keysweep.services.container import ScanContext, create_services
from keysweep.services.roots import RootProviderInterface, StaticRootProvider
from keysweep.services.scan_service import ScanService

__all__ = [
    "ScanContext",
    "create_services",
    "ScanService",
    "RootProviderInterface",
    "StaticRootProvider",
]
