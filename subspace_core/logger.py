import logging, json, sys, time, os

# One JSON object per line; field order is fixed for log shippers
_LINE_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s",
})


def _level_from_env(default=logging.INFO):
    name = os.getenv("SUBSPACE_LOG_LEVEL", "").upper()
    if not name:
        return default
    value = logging.getLevelName(name)  # int for known names, "Level X" otherwise
    return value if isinstance(value, int) else default


def _json_formatter():
    formatter = logging.Formatter(fmt=_LINE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime
    return formatter


def get_logger(name="subspace", level=None, to_file=None):
    """
    Structured logger shared by every subspace_core component.

    Handlers are attached once per logger name; later calls only adjust the
    level (explicit `level`, else SUBSPACE_LOG_LEVEL, else INFO).
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _level_from_env())
    if logger.handlers:
        return logger

    formatter = _json_formatter()
    handlers = [logging.StreamHandler(sys.stdout)]
    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(to_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
