"""Start/stop transactions over the service registry."""

import sys
from typing import Optional

from .errors import MissingPid, ServiceAlreadyExists, ServiceNotFound
from .launcher import force_kill, spawn_service
from .registry import RegistryStore, ServiceRecord, find_service


def start_service(binary_path: str, store: Optional[RegistryStore] = None) -> ServiceRecord:
    """Spawn *binary_path* and register it.

    Raises ServiceAlreadyExists, leaving the registry untouched, if the
    path is already registered. Nothing is written if the spawn fails.
    """
    store = store or RegistryStore()
    services = store.load()

    if find_service(services, binary_path) is not None:
        raise ServiceAlreadyExists(binary_path)

    pid = spawn_service(binary_path)
    print(f"Spawned {binary_path} (pid {pid})", file=sys.stderr)

    record = ServiceRecord(binary_path=binary_path, pid=pid)
    services.append(record)
    store.save(services)
    return record


def stop_service(binary_path: str, store: Optional[RegistryStore] = None) -> ServiceRecord:
    """Kill the process registered for *binary_path* and unregister it."""
    store = store or RegistryStore()
    services = store.load()

    idx = find_service(services, binary_path)
    if idx is None:
        raise ServiceNotFound(binary_path)

    record = services[idx]
    if record.pid is None:
        raise MissingPid(binary_path)

    force_kill(record.pid)
    print(f"Sent SIGKILL to {binary_path} (pid {record.pid})", file=sys.stderr)

    del services[idx]
    store.save(services)
    return record


def list_services(store: Optional[RegistryStore] = None) -> list[ServiceRecord]:
    return (store or RegistryStore()).load()
