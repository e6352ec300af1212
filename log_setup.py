import logging

_HANDLER_NAME = "csvpane-file"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(path: str, level: str = "WARNING") -> logging.Handler | None:
    """Send log records to ``path``.

    The terminal belongs to the viewer, so records never go to stderr.
    Calling this again replaces the previous handler instead of stacking one.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    try:
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
