"""
Process-wide logging for the call pipeline.

Each entry point logs to its own rotating file under ``logs/`` so the API
server and CLI runs never rotate the same file:

    setup_logging()                      # logs/app.log (uvicorn server)
    setup_logging(name="fetch_call_ids") # logs/fetch_call_ids.log
"""
from logging.handlers import RotatingFileHandler
from pathlib import Path
import logging
import sys

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
MAX_BYTES = 50 * 1024 * 1024
BACKUP_COUNT = 5

# uvicorn keeps its own handlers unless pointed at ours
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
QUIET_LOGGERS = {"httpx": logging.WARNING}


def log_file_for(name: str) -> Path:
    return LOG_DIR / f"{name}.log"


def _handlers(log_file: Path) -> list:
    formatter = logging.Formatter(LOG_FORMAT)

    rotating = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    rotating.setFormatter(formatter)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    return [rotating, console]


def setup_logging(name: str = "app", level: int = logging.INFO) -> Path:
    """Send root and uvicorn logs to ``logs/<name>.log`` and stdout; returns the file path."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = log_file_for(name)
    handlers = _handlers(log_file)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
        existing.close()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    for logger_name in SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = list(handlers)
        server_logger.propagate = False

    for logger_name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(quiet_level)

    logging.getLogger(__name__).info("Logging to %s", log_file)
    return log_file
