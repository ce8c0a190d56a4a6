"""Command dispatch for tododin.

Each invocation runs exactly one command. Arguments are checked before
the data file is touched; mutating commands end with one explicit
commit step (save) followed by a re-render.
"""
import logging
from typing import List, Optional
from storage import Storage
from tasklist import TaskList, TaskError
from theme import color, ERROR_COLOR, BOLD

logger = logging.getLogger(__name__)

USAGE = """\
Usage: tododin <command> [args]

Commands:
  list                 Show all tasks
  add <text>           Add a task
  add-c <text> [amt]   Add a counter task (starting tally amt, default 0)
  inc <idx> [amt]      Increase a counter by amt (default 1)
  dec <idx> [amt]      Decrease a counter by amt (default 1)
  done <idx>           Toggle a task done / not done
  delete <idx>         Delete a task
  clear                Delete every task"""


def _parse_int(raw: str) -> Optional[int]:
    """Plain ASCII integer with an optional leading minus; anything else -> None."""
    raw = raw.strip()
    digits = raw[1:] if raw.startswith('-') else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw)


def _error(message: str) -> None:
    print(color(message, ERROR_COLOR))


class CLI:
    def __init__(self, storage: Storage):
        self.storage: Storage = storage

    def run(self, argv: List[str]) -> int:
        """Dispatch ``argv`` (program name excluded). Always returns 0."""
        if not argv:
            print(USAGE)
            return 0
        cmd, args = argv[0], argv[1:]
        logger.debug("command %r args %r", cmd, args)
        if cmd == 'list':
            self._load().display()
        elif cmd == 'add':
            self._cmd_add(args, is_counter=False)
        elif cmd == 'add-c':
            self._cmd_add(args, is_counter=True)
        elif cmd == 'inc':
            self._cmd_adjust(args, sign=1)
        elif cmd == 'dec':
            self._cmd_adjust(args, sign=-1)
        elif cmd == 'done':
            self._cmd_index(args, 'done', TaskList.toggle_done)
        elif cmd == 'delete':
            self._cmd_index(args, 'delete', TaskList.remove_task)
        elif cmd == 'clear':
            self._cmd_clear()
        else:
            _error(f"Unknown command: {cmd}")
            print("Run tododin without arguments to see the available commands.")
        return 0

    # -------------------- persistence --------------------
    def _load(self) -> TaskList:
        return TaskList(self.storage.load_tasks())

    def _commit(self, tasks: TaskList) -> None:
        self.storage.save_tasks(tasks.get_tasks())

    # -------------------- individual commands --------------------
    def _cmd_add(self, args: List[str], is_counter: bool) -> None:
        name = 'add-c' if is_counter else 'add'
        if not args or not args[0]:
            _error("Task text required.")
            print(f"Usage: {name} <text>" + (" [amt]" if is_counter else ""))
            return
        count = 0
        if is_counter and len(args) > 1:
            parsed = _parse_int(args[1])
            if parsed is None:
                _error(f"Invalid amount: {args[1]}")
                return
            count = parsed
        tasks = self._load()
        try:
            tasks.add_task(args[0], is_counter=is_counter, count=count)
        except TaskError as e:
            _error(str(e))
            return
        self._commit(tasks)
        tasks.display()

    def _cmd_adjust(self, args: List[str], sign: int) -> None:
        index = _parse_int(args[0]) if args else None
        if index is None:
            # missing or non-numeric index is ignored for inc/dec
            logger.debug("inc/dec without a usable index: %r", args)
            return
        amount = 1
        if len(args) > 1:
            parsed = _parse_int(args[1])
            if parsed is None:
                _error(f"Invalid amount: {args[1]}")
                return
            amount = parsed
        tasks = self._load()
        try:
            tasks.adjust_count(index - 1, sign * amount)
        except TaskError as e:
            _error(str(e))
            return
        self._commit(tasks)
        tasks.display()

    def _cmd_index(self, args: List[str], name: str, action) -> None:
        if not args:
            _error("Task number required.")
            print(f"Usage: {name} <idx>")
            return
        index = _parse_int(args[0])
        if index is None:
            _error(f"Invalid task number: {args[0]}")
            return
        tasks = self._load()
        try:
            action(tasks, index - 1)
        except TaskError as e:
            _error(str(e))
            return
        self._commit(tasks)
        tasks.display()

    def _cmd_clear(self) -> None:
        tasks = self._load()
        removed = tasks.clear()
        self._commit(tasks)
        print(color("All tasks cleared.", BOLD) + f" ({removed} removed)")
