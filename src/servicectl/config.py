"""Configuration for servicectl: where the service registry lives."""

from dataclasses import dataclass, field
from pathlib import Path

from .errors import StorageError


APP_DIR = "servicectl"
REGISTRY_FILENAME = "cache.yaml"


@dataclass
class ServiceCtlConfig:
    home: Path = field(default_factory=Path.home)
    app_dir: str = APP_DIR
    registry_filename: str = REGISTRY_FILENAME

    @property
    def config_dir(self) -> Path:
        """Directory holding the registry file (``~/.config/<app_dir>``)."""
        return Path(self.home) / ".config" / self.app_dir

    @property
    def registry_path(self) -> Path:
        return self.config_dir / self.registry_filename

    def ensure_config_dir(self) -> Path:
        """Create the configuration directory if it is missing."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Failed to create directory {self.config_dir}: {exc}"
            ) from exc
        return self.config_dir


def load_config() -> ServiceCtlConfig:
    """Derive a config from the current environment.

    Called once per operation; ``HOME`` is re-read every time so nothing
    is cached between calls.
    """
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise StorageError(f"Failed to get home directory: {exc}") from exc
    return ServiceCtlConfig(home=home)
