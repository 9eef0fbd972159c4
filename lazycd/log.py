"""Optional file logging.

The terminal belongs to the UI and stdout to the exit path, so log records
only ever go to a file, and only when one is requested.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_ENV = "LAZYCD_LOG_FILE"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

package_logger = logging.getLogger("lazycd")
package_logger.addHandler(logging.NullHandler())


def configure_logging(log_file: Path | None = None) -> Path | None:
    """Attach a file handler for ``log_file`` or ``$LAZYCD_LOG_FILE``.

    Returns the path being logged to, or ``None`` when logging stays off.
    """
    if log_file is None:
        env_value = os.environ.get(LOG_FILE_ENV, "").strip()
        if not env_value:
            return None
        log_file = Path(env_value)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return log_file
