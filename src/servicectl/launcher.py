"""OS process actions: spawn a detached service, force-kill a pid."""

import os
import signal
import subprocess

from .errors import KillFailure, SpawnFailure


def spawn_service(binary_path: str) -> int:
    """Start *binary_path* in the background and return its pid.

    The child gets no stdin, its output is discarded, it runs in its own
    session and is never waited on.
    """
    try:
        proc = subprocess.Popen(
            [binary_path],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise SpawnFailure(f"Failed to start service {binary_path}: {exc}") from exc
    return proc.pid


def force_kill(pid: int) -> None:
    """Send SIGKILL to *pid*."""
    try:
        os.kill(pid, signal.SIGKILL)
    except OSError as exc:
        raise KillFailure(f"Failed to stop process {pid}: {exc}") from exc
