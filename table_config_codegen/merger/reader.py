"""
Existing-file reader used as the merge baseline.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


async def read_existing_file(path: Path) -> str | None:
    """Read the current content of ``path``.

    A missing or unreadable file is not an error: it means there is no
    baseline, and None is returned.
    """
    try:
        return await asyncio.to_thread(_read_text, path)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable existing file %s: %s", path, e)
        return None
