import logging
import sys


def setup_logging(console_level: int = logging.WARNING) -> None:
    """
    Send diagnostics (unreadable data file, failed saves) to stderr so
    they never mix with the task table on stdout.

    Call this ONCE, before the first command runs.
    """
    root = logging.getLogger()
    root.setLevel(console_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
