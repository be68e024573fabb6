"""
File-backed Service Registry

This package provides:
1. ServiceRecord — one tracked service (binary path + pid)
2. RegistryStore — load/save of the full record list as YAML
3. find_service — lookup of a record by binary path
"""

from .service_registry import (
    RegistryStore,
    ServiceRecord,
    find_service,
)

__all__ = [
    'RegistryStore',
    'ServiceRecord',
    'find_service',
]
