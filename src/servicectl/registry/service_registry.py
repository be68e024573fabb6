"""
File-backed Service Registry

This module provides:
- ServiceRecord: one tracked service, keyed by the path of its binary
- RegistryStore: loads and saves the full list of records as YAML
- find_service: linear lookup of a record by binary path
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

import yaml

from ..config import ServiceCtlConfig, load_config
from ..errors import FormatError, StorageError


@dataclass
class ServiceRecord:
    """Service record dataclass"""
    binary_path: str
    pid: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a YAML/JSON-serialisable dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServiceRecord':
        """Create from dictionary, rejecting anything not shaped like a record."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        unknown = set(data) - {"binary_path", "pid"}
        if unknown:
            raise ValueError(f"unexpected fields: {', '.join(sorted(map(str, unknown)))}")
        if "binary_path" not in data:
            raise ValueError("missing field: binary_path")
        binary_path = data["binary_path"]
        if not isinstance(binary_path, str):
            raise ValueError("binary_path must be a string")
        pid = data.get("pid")
        # bool is an int subclass; a pid of `true` is not a pid
        if pid is not None and (isinstance(pid, bool) or not isinstance(pid, int)):
            raise ValueError("pid must be an integer or null")
        if pid is not None and pid <= 0:
            raise ValueError(f"pid must be positive, got {pid}")
        return cls(binary_path=binary_path, pid=pid)


def find_service(records: List[ServiceRecord], binary_path: str) -> Optional[int]:
    """Return the index of the record for *binary_path*, or None."""
    for idx, record in enumerate(records):
        if record.binary_path == binary_path:
            return idx
    return None


# ---------------------------------------------------------------------------
# On-disk store
# ---------------------------------------------------------------------------

class RegistryStore:
    """Reads and rewrites the registry file in full on every call."""

    def __init__(self, config: Optional[ServiceCtlConfig] = None):
        self._config = config

    @property
    def config(self) -> ServiceCtlConfig:
        # Re-derived per call unless a config was pinned at construction.
        return self._config if self._config is not None else load_config()

    @property
    def path(self):
        return self.config.registry_path

    def load(self) -> List[ServiceRecord]:
        config = self.config
        config.ensure_config_dir()
        path = config.registry_path
        if not path.exists():
            return []

        try:
            with open(path) as f:
                text = f.read()
        except OSError as exc:
            raise StorageError(f"Failed to read {path}: {exc}") from exc

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise FormatError(f"Failed to parse {path}: {exc}") from exc

        if data is None:
            # save() writes `[]` for an empty registry, so a blank file is corrupt
            raise FormatError(f"Failed to parse {path}: file is empty")
        if not isinstance(data, list):
            raise FormatError(f"Failed to parse {path}: expected a list of services")

        records = []
        for idx, entry in enumerate(data):
            try:
                records.append(ServiceRecord.from_dict(entry))
            except ValueError as exc:
                raise FormatError(f"Failed to parse {path}: entry {idx}: {exc}") from exc
            if find_service(records[:-1], records[-1].binary_path) is not None:
                raise FormatError(
                    f"Failed to parse {path}: entry {idx}: duplicate binary_path "
                    f"{records[-1].binary_path}"
                )
        return records

    def save(self, records: List[ServiceRecord]) -> None:
        config = self.config
        config.ensure_config_dir()
        path = config.registry_path
        data = yaml.safe_dump(
            [r.to_dict() for r in records],
            default_flow_style=False,
            sort_keys=False,
        )
        try:
            with open(path, "w") as f:
                f.write(data)
        except OSError as exc:
            raise StorageError(f"Failed to write {path}: {exc}") from exc
