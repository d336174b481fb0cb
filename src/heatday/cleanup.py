# SPDX-License-Identifier: MIT

import atexit
import logging

from heatday.repository.configuration import CONFIGURATION_REPO
from heatday.repository.event import EVENT_REPO
from heatday.repository.id_map import ID_MAP_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO

logger = logging.getLogger(__name__)


def flush() -> None:
    """Write every repository's pending changes to disk."""
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()

    written = [
        name
        for name, repository in (
            ("projects", PROJECT_REPO),
            ("tasks", TASK_REPO),
            ("events", EVENT_REPO),
        )
        if repository.flush()
    ]
    if written:
        logger.debug("Flushed %s", ", ".join(written))


def register_cleanup() -> None:
    atexit.register(flush)
