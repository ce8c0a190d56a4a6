"""Main entry point for tododin (installed as the ``tododin`` command)."""
import sys
from typing import List, Optional
from cli import CLI
from logging_setup import setup_logging
from storage import Storage


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    cli = CLI(Storage())
    return cli.run(sys.argv[1:] if argv is None else argv)

if __name__ == "__main__":
    sys.exit(main())
