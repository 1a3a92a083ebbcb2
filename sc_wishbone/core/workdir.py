from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@contextmanager
def working_directory(prefix: str = "wishbone_", root: Optional[Path] = None) -> Iterator[Path]:
    """
    Create a private, uniquely named temporary directory and remove it on exit.

    Removal happens on every exit path. If removal fails while another
    exception is already propagating, the removal failure is logged and the
    original exception wins. After a clean exit a removal failure is raised.

    :param prefix: Directory name prefix.
    :param root: Parent directory; defaults to the system temp dir.
    """
    path = Path(tempfile.mkdtemp(prefix=prefix, dir=root))
    logger.debug("Created working directory", extra={"work_dir": str(path)})

    failed = False
    try:
        yield path
    except BaseException:
        failed = True
        raise
    finally:
        try:
            shutil.rmtree(path)
        except OSError:
            if not failed:
                raise
            logger.exception("Failed to remove working directory %s", path)
        else:
            logger.debug("Removed working directory", extra={"work_dir": str(path)})
