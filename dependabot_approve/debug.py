"""Optional dumps of raw API responses for troubleshooting.

Each dump is switched on by an environment variable set to ``1``. A failed
write is logged and otherwise ignored: the dumps never change what the
tool does.
"""

import os
from pathlib import Path

from dependabot_approve.logging import get_logger

logger = get_logger("debug")

WRITE_PRS_ENV = "DA_WRITE_STATUS_PRS"
WRITE_STATUSES_ENV = "DA_WRITE_STATUS_JSON"


def dump_enabled(env_var: str) -> bool:
    return os.environ.get(env_var) == "1"


def dump_response(env_var: str, filename: str, text: str, directory: str | Path = ".") -> Path | None:
    """
    Write a raw response body to ``directory/filename`` if ``env_var`` is set.

    Returns:
        The path written, or None when the dump is disabled or failed
    """
    if not dump_enabled(env_var):
        return None

    # PR titles end up in file names
    safe_name = filename.replace("/", "_").replace("\\", "_")
    path = Path(directory) / safe_name
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.warning("could not write debug dump %s: %s", path, e)
        return None

    logger.debug("wrote debug dump %s", path)
    return path
