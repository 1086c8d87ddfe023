import logging
import sys
from config.settings import settings


def setup_logging():
    """Configura el logging para toda la aplicación"""
    level = logging.DEBUG if settings.debug else settings.logs.level
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(fmt=settings.logs.format, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.handlers = []
    root_logger.addHandler(console_handler)

    for noisy in ["asyncio", "uvicorn.access", "httpx", "httpcore"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.debug(f"Logging configurado - Nivel: {logging.getLevelName(level)}")
