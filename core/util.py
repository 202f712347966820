from __future__ import annotations
import os, time, socket, pathlib
import logging

log = logging.getLogger(__name__)

FALLBACK_HOST = "localhost"

def now_ts() -> float:
    """
    Get current Unix timestamp.
    
    Returns:
        Current time as float seconds since epoch
    """
    return time.time()

def hostname() -> str:
    """
    Get system hostname, falling back to 'localhost' when the lookup fails.
    
    Returns:
        Current system hostname as string
    """
    try:
        host = socket.gethostname()
    except OSError as e:
        log.warning("hostname lookup failed, using %s", FALLBACK_HOST, extra={"error": str(e)})
        return FALLBACK_HOST
    return host or FALLBACK_HOST

def ensure_parent(path: str | os.PathLike) -> None:
    """
    Create parent directories for a file path, if they don't exist.
    
    Args:
        path: File path whose parent directories should be created
    """
    pathlib.Path(path).parent.mkdir(parents=True, exist_ok=True)
