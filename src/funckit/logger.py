"""패키지 로거 설정"""
import logging
import os
from typing import get_args

from rich.logging import RichHandler

from funckit.config import LogLevel, get_config

__all__ = ["setup_logger"]

HANDLER_NAME = "funckit.console"

# 라이브러리는 import 시 핸들러를 구성하지 않음
logging.getLogger("funckit").addHandler(logging.NullHandler())


def _resolve_level(*candidates: str | None) -> str:
    """처음으로 유효한 레벨 이름 (대소문자 무시)"""
    for candidate in candidates:
        if candidate and candidate.upper() in get_args(LogLevel):
            return candidate.upper()
    return get_config().logging.level


def setup_logger(
    name: str = "funckit",
    level: str | None = None,
    use_rich: bool | None = None,
) -> logging.Logger:
    """
    패키지 로거 구성

    우선순위: 인자 > FUNCKIT_LOG_LEVEL > 설정
    알 수 없는 레벨 이름은 건너뛴다. 콘솔 핸들러는 한 번만 추가된다.
    """
    config = get_config().logging
    level = _resolve_level(level, os.getenv("FUNCKIT_LOG_LEVEL"))
    use_rich = config.rich if use_rich is None else use_rich

    logger = logging.getLogger(name)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        if use_rich:
            handler: logging.Handler = RichHandler(show_path=False)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(config.format))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger
