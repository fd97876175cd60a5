import logging
import sys

from tailfeather import config
from tailfeather.cli import main


def _setup_logging() -> None:
    if not config.logging_enabled():
        # Keep standard output clean for the colored stream.
        logging.disable(logging.CRITICAL)
        root = logging.getLogger()
        root.handlers.clear()
        return

    level = logging.DEBUG if config.debug_enabled() else logging.INFO
    path = config.log_file()
    if path:
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )


def run() -> int:
    _setup_logging()
    return main()


if __name__ == "__main__":
    raise SystemExit(run())
