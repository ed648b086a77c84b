import time
import logging
import inspect
import functools
from pathlib import Path
from datetime import datetime
from logging.handlers import RotatingFileHandler

from .config_variables import LOG_DIR

from libs.helpers.storage_helpers import validate_folder

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def _caller_name(depth: int = 2) -> str:
    """Nombre del módulo que llama (o del script si es `__main__`)."""
    frame_info = inspect.stack()[depth]
    module = inspect.getmodule(frame_info.frame)
    if module is not None and module.__name__ != "__main__":
        return module.__name__
    return Path(frame_info.filename).stem


def _elapsed(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.2f} s"
    if seconds < 3600:
        return f"{seconds / 60:.2f} min"
    return f"{seconds / 3600:.2f} h"


def _build_handlers(name: str) -> list:
    """Consola y archivo rotativo en `logs/<fecha>/<módulo>.log`."""
    day_dir = validate_folder(
        LOG_DIR / datetime.now().strftime("%Y-%m-%d"), create_if_missing=True
    )
    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            day_dir / f"{name}.log",
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        ),
    ]
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def get_logger(module_name=None):
    """Logger por módulo; los handlers se añaden una sola vez."""
    name = module_name or _caller_name()
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        for handler in _build_handlers(name):
            logger.addHandler(handler)
    return logger


def log_execution_time(func=None, *, module=None):
    """Decorador que registra el inicio y la duración de una etapa."""
    if func is None:
        return lambda f: log_execution_time(f, module=module)

    logger = get_logger(module or _caller_name())

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        logger.info(f"Iniciando {func.__name__}")
        result = func(*args, **kwargs)
        logger.info(f"{func.__name__} finalizado en {_elapsed(time.perf_counter() - start)}")
        return result

    return wrapper
