"""Removal of the local build artifact.

Idempotent: a file that is already gone counts as removed, so the early
cleanup on update failure and the unconditional end-of-run cleanup can
both call this without special-casing.
"""

import logging
from pathlib import Path

from lambdapush.errors import CleanupError

logger = logging.getLogger(__name__)


def remove_artifact(path: Path) -> bool:
    """Delete path if it exists.

    Returns True if a file was deleted, False if it was already absent.
    Raises CleanupError for any other filesystem failure.
    """
    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug("Artifact %s already removed", path)
        return False
    except OSError as exc:
        raise CleanupError(f"Cannot remove build artifact {path}: {exc}") from exc

    logger.info("Removed build artifact %s", path)
    return True
