"""
OS detection — classify the host once, at startup.

Two signals: the platform-type string (``$OSTYPE`` when the shell
exports it, ``sys.platform`` otherwise) and, on Linux, the ``ID`` field
of /etc/os-release.  Nothing here raises: an unreadable os-release just
leaves the platform unknown, and the installer rejects it later if it
ever has to install anything.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from swaplauncher.core.models.platform import Platform, PlatformId

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")


def platform_type() -> str:
    """Return the raw platform-type signal."""
    return os.environ.get("OSTYPE") or sys.platform


def parse_os_release(text: str) -> dict[str, str]:
    """Parse os-release key=value content.

    Blank lines and ``#`` comments are skipped; one level of single or
    double quotes around a value is removed.
    """
    fields: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        fields[key.strip()] = value
    return fields


def read_os_release_id(path: Path = OS_RELEASE_PATH) -> str | None:
    """Read the ``ID`` field from an os-release file, verbatim."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None
    return parse_os_release(text).get("ID") or None


def detect_platform(
    ostype: str | None = None,
    os_release: Path = OS_RELEASE_PATH,
) -> Platform:
    """Classify the host platform.

    Args:
        ostype: Platform-type signal; defaults to :func:`platform_type`.
        os_release: os-release file consulted on Linux.

    Returns:
        A frozen Platform.  ``raw_id`` is the distribution id as written
        in os-release on Linux, ``darwin`` on macOS, ``unknown`` otherwise.
    """
    signal = (ostype if ostype is not None else platform_type()).lower()

    if signal.startswith("linux"):
        distro = read_os_release_id(os_release)
        platform = Platform(family="linux", raw_id=distro or PlatformId.UNKNOWN.value)
    elif signal.startswith("darwin"):
        platform = Platform(family="darwin", raw_id=PlatformId.DARWIN.value)
    else:
        platform = Platform()

    logger.info("Detected platform %s (signal=%s)", platform.raw_id, signal)
    return platform
