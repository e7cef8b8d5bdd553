import atexit
import json
import logging
import logging.config
from logging.handlers import QueueListener
from pathlib import Path
from typing import Any

CONFIG_FILE = Path(__file__).parent / "logging_config.json"

logger = logging.getLogger("OpenAPIGenerator")

_listener: QueueListener | None = None


def _load_config() -> dict[str, Any]:
    with open(CONFIG_FILE, encoding="utf-8") as f:
        return json.load(f)


def setup_logger() -> None:
    """Configure logging and start the queue listener.

    Records go through the queue handler declared in logging_config.json and
    are written to stderr by its listener thread, which is stopped at exit.
    Later calls do nothing once the listener is running.
    """
    global _listener
    if _listener is not None:
        return
    logging.config.dictConfig(_load_config())
    listener = getattr(logging.getHandlerByName("queue_handler"), "listener", None)
    if listener is None:
        return
    listener.start()
    atexit.register(listener.stop)
    _listener = listener
