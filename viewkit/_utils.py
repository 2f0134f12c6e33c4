import functools
import inspect
import logging
import sys
import typing

from viewkit.config import Config


def is_async_callable(obj: typing.Any) -> bool:
    while isinstance(obj, functools.partial):
        obj = obj.func

    return inspect.iscoroutinefunction(obj) or (
        callable(obj) and inspect.iscoroutinefunction(obj.__call__)
    )


_handler = logging.StreamHandler(sys.stdout)
_formatter = logging.Formatter("[%(asctime)s][%(levelname)s][%(name)s]%(message)s")
_logger_cache: typing.Dict[str, logging.Logger] = {}


def get_logger(
    _module: typing.Optional[str] = None, config: typing.Optional[Config] = None
) -> logging.Logger:
    global _logger_cache
    _module = "viewkit" if not _module else _module
    if _module in _logger_cache:
        logger = _logger_cache[_module]
    else:
        logger = logging.Logger(_module)
        _logger_cache[_module] = logger

    config = Config() if config is None else config
    debug = str(config.get("DEBUG", default="False")).lower() in ("true", "1")
    logger.setLevel(logging.DEBUG if debug else logging.ERROR)

    _handler.setFormatter(_formatter)
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
