import contextlib
import logging
from datetime import datetime, timedelta
from pathlib import Path
from time import time
from typing import Optional, Union

from coloredlogs import ColoredFormatter

from containerkit import validation

LOGGER = logging.getLogger(__name__)

PACKAGE_LOGGER = "containerkit"
LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@validation.choices("level", LEVELS, doc=False)
def configure_logging_handler(
    level: str = "ERROR",
    filename: Optional[Union[str, Path]] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    log_filter: Optional[logging.Filter] = None,
):
    """
    Appends a handler to the ``containerkit`` package logger. If a filename is specified, this handler will write to that file. Otherwise, it will write colored output to the console.

    The package logger level is lowered to ``level`` when needed, so that e.g. the heap ``DEBUG`` records (build, removal and sort timings) reach the handler without further setup. The level is never raised.

    .. code-block::

        from containerkit.logging import configure_logging_handler

        handler = configure_logging_handler('DEBUG')

    :param level: Minimum level logged by the created handler.
    :param filename: If specified, a file handler is created instead of a console handler. If a directory, a default filename is created within that directory using the current time (in the ``datefmt`` format) as the name.
    :param fmt: :class:`logging.Formatter` ``fmt`` parameter.
    :param datefmt: :class:`logging.Formatter` ``datefmt`` parameter.
    :param log_filter: An optional :class:`logging.Filter` added to the handler.

    :return: The created handler.
    """

    fmt = fmt or "%(levelname)-8s %(asctime)-23s %(name)s:%(lineno)d %(message)s"
    datefmt = datefmt or "%Y-%m-%d %H:%M:%S"

    # Get default filename
    if filename and (filename := Path(filename)).is_dir():
        filename = filename / (datetime.now().strftime(datefmt) + ".log")

    # Build handler
    if filename is not None:
        handler = logging.FileHandler(filename)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter(fmt=fmt, datefmt=datefmt))
    handler.setLevel(level)
    if log_filter:
        handler.addFilter(log_filter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.getEffectiveLevel() > handler.level:
        logger.setLevel(handler.level)
    logger.addHandler(handler)

    return handler


@contextlib.contextmanager
def log_time(name, logger=LOGGER, severity=logging.INFO):
    """
    with log_time('operation_name', logger):
        ...
    """
    t0 = time()
    logger.log(severity, f">>>>>>>> STARTED {name} <<<<<<<<")
    yield None
    logger.log(
        severity, f"<<<<<<<< FINISHED {name} ({timedelta(seconds=time()-t0)}) >>>>>>>>"
    )
