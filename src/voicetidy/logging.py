import logging
import sys

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

QUIET_LOGGERS = ["httpx", "httpcore", "openai", "google_genai"]


def setup_logging(level: str = "INFO", fmt: str = "text"):
    """
    Configures diagnostic logging for the command-line tools.

    All records go to stderr through a single stream handler so that stdout
    carries nothing but the pipeline result. ``fmt="json"`` switches to the
    structured JSON formatter, which also renders any ``extra`` fields passed
    to the logging call.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    if fmt == "json":
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
