# src/weatherapi/utils/logger.py
import logging
import sys

from weatherapi.core.settings import LOG_LEVEL

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "weatherapi"


def resolve_level(name: str) -> int:
    # 잘못된 LOG_LEVEL 은 INFO 로
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    핸들러는 패키지 로거(weatherapi)에만 한 번 붙이고,
    모듈 로거는 그쪽으로 전파만 한다.
    root 에 이미 핸들러가 있으면(uvicorn 등) 따로 붙이지 않음.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolve_level(LOG_LEVEL))

    if not package_logger.handlers and not logging.getLogger().handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(logging.Formatter(FORMAT))
        package_logger.addHandler(ch)

    return logging.getLogger(name)
