"""Error taxonomy for servicectl."""


class ServiceCtlError(Exception):
    """Base class for all servicectl errors."""


class ServiceAlreadyExists(ServiceCtlError):
    """Start was requested for a binary path that is already registered."""

    def __init__(self, binary_path: str):
        self.binary_path = binary_path
        super().__init__(f"Service with binary path {binary_path} already exists")


class ServiceNotFound(ServiceCtlError):
    """Stop was requested for a binary path that is not registered."""

    def __init__(self, binary_path: str):
        self.binary_path = binary_path
        super().__init__(f"Service with binary path {binary_path} not found")


class MissingPid(ServiceCtlError):
    """A registered service has no recorded pid."""

    def __init__(self, binary_path: str):
        self.binary_path = binary_path
        super().__init__(f"Service PID not found for {binary_path}")


class SpawnFailure(ServiceCtlError):
    """The OS could not start the executable."""


class KillFailure(ServiceCtlError):
    """The OS refused to terminate the recorded process."""


class StorageError(ServiceCtlError):
    """The registry directory or file could not be created, read or written."""


class FormatError(StorageError):
    """The registry file exists but does not hold a list of service records."""
