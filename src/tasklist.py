"""Task list logic: holds the ordered tasks, mutation, and rendering.

Operations take 0-based positions; the CLI converts the 1-based numbers
users type. Any validation failure raises TaskError before anything is
mutated, so callers can skip saving.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional
from models import Task, today_stamp
from theme import color, status_color, BORDER_COLOR, INDEX_COLOR, EMPTY_COLOR, BOLD, DIM
import logging, re

MIN_WIDTH = 30
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

logger = logging.getLogger(__name__)


class TaskError(ValueError):
    """Raised when a command cannot be applied to the task list."""


class TaskList:
    def __init__(self, raw_tasks: Optional[Iterable[Mapping[str, Any]]] = None):
        self.tasks: List[Task] = []
        if raw_tasks:
            self._load_from_list(raw_tasks)

    # -------------------- loading --------------------
    def _load_from_list(self, raw_tasks: Iterable[Mapping[str, Any]]) -> None:
        for raw in raw_tasks:
            if not isinstance(raw, Mapping) or not isinstance(raw.get('text'), str):
                logger.warning("skipping malformed task entry: %r", raw)
                continue
            self.tasks.append(Task.from_dict(raw))

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def texts(self) -> List[str]:
        return [t.text for t in self.tasks]

    def _task_at(self, index: int) -> Task:
        if index < 0 or index >= len(self.tasks):
            raise TaskError(f'No task #{index + 1}. Valid range: 1-{len(self.tasks)}.'
                            if self.tasks else f'No task #{index + 1}. The list is empty.')
        return self.tasks[index]

    # -------------------- task operations --------------------
    def add_task(self, text: str, is_counter: bool = False, count: int = 0) -> Task:
        if not text:
            raise TaskError('Task text required.')
        if text in self.texts():
            raise TaskError(f'Task "{text}" already exists.')
        task = Task(text=text, creation_date=today_stamp(),
                    is_counter=is_counter, count=count if is_counter else 0)
        self.tasks.append(task)
        return task

    def adjust_count(self, index: int, delta: int) -> Task:
        """Add ``delta`` to a counter task's tally (no clamping)."""
        task = self._task_at(index)
        if not task.is_counter:
            raise TaskError(f'Task #{index + 1} "{task.text}" is not a counter.')
        task.count += delta
        return task

    def toggle_done(self, index: int) -> Task:
        task = self._task_at(index)
        task.done = not task.done
        return task

    def remove_task(self, index: int) -> Task:
        self._task_at(index)
        return self.tasks.pop(index)

    def clear(self) -> int:
        removed = len(self.tasks)
        self.tasks = []
        return removed

    # -------------------- serialization --------------------
    def get_tasks(self) -> List[Dict[str, Any]]:
        return [task.to_dict() for task in self.tasks]

    # -------------------- display --------------------
    def display(self) -> None:
        for line in self.render_lines():
            print(line)

    def render_lines(self) -> List[str]:
        """Build the bordered table; empty list -> a single notice line."""
        if not self.tasks:
            return [color('No tasks found.', EMPTY_COLOR)]
        rows = [self._task_line(n, t) for n, t in enumerate(self.tasks, start=1)]
        width = max([MIN_WIDTH] + [self._visible_len(r) for r in rows])
        outer = color('=' * width, BORDER_COLOR)
        inner = color('-' * width, BORDER_COLOR)
        lines = [outer]
        for i, row in enumerate(rows):
            if i:
                lines.append(inner)
            lines.append(row)
        lines.append(outer)
        return lines

    @staticmethod
    def _task_line(number: int, task: Task) -> str:
        glyph = '[x]' if task.done else '[ ]'
        line = (color(f'{number}:', INDEX_COLOR) + ' '
                + color(glyph, status_color(task.done), BOLD) + ' '
                + color(f'[{task.creation_date}]', DIM) + ': '
                + task.text)
        if task.is_counter:
            line += f' (Count: {color(str(task.count), BOLD)})'
        return line

    @staticmethod
    def _visible_len(s: str) -> int:
        return len(ANSI_RE.sub('', s))
