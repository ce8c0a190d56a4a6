"""Persistence helpers (path lookup, load, save) for the task list.

The whole collection lives in one pretty-printed JSON array at
``<home>/.tododin``. Decisions:
- Missing file is the normal first-run state and loads as an empty list.
- A corrupt or unreadable file is logged and also loads as empty; the
  next save overwrites it.
- Save failures are logged and reported through the return value only.
- No locking: two concurrent invocations race, last writer wins.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

FILE_NAME = '.tododin'
HOME_VARS = ('HOME', 'USERPROFILE')

TaskEntry = Dict[str, Any]

logger = logging.getLogger(__name__)


def resolve_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the data file path under the first non-empty home variable."""
    env = os.environ if environ is None else environ
    for var in HOME_VARS:
        home = env.get(var)
        if home:
            return Path(home) / FILE_NAME
    logger.debug("neither %s is set; using Path.home()", ' nor '.join(HOME_VARS))
    return Path.home() / FILE_NAME


class Storage:
    """Handle on the JSON file backing one invocation."""

    def __init__(self, path: Optional[Path] = None):
        self.path: Path = Path(path) if path is not None else resolve_path()

    def load_tasks(self) -> List[TaskEntry]:
        """Load the raw task entries from disk.

        Missing, unreadable or malformed file -> empty list.
        """
        if not self.path.exists():
            logger.debug("no data file at %s", self.path)
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("could not parse %s: %s; starting with an empty list", self.path, e)
            return []
        except OSError as e:
            logger.error("could not read %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.error("%s does not hold a JSON array; starting with an empty list", self.path)
            return []
        return data

    def save_tasks(self, tasks: List[TaskEntry]) -> bool:
        """Persist tasks to disk (pretty-printed). Returns False on failure."""
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(tasks, f, indent=4)
                f.write('\n')
        except OSError as e:
            logger.error("could not save tasks to %s: %s", self.path, e)
            return False
        logger.debug("saved %d task(s) to %s", len(tasks), self.path)
        return True
