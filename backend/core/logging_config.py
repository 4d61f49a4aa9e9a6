import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install one stream handler on the root logger; safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in root.handlers:
        if getattr(handler, '_appointments_handler', False):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._appointments_handler = True
    root.addHandler(handler)
