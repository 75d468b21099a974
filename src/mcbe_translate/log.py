"""
로깅 설정
"""

import logging
import os
from pathlib import Path
from typing import Optional


class EngineFormatter(logging.Formatter):
    """{시분초.ms} {LEVEL} [{logger:line}] {message} 형식의 포맷터"""

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')
        ms = int(record.created * 1000) % 1000
        time_with_ms = f"{timestamp}.{ms:03d}"

        location = f"[{record.name}:{record.lineno}]"
        message = f"{time_with_ms} {record.levelname} {location} {record.getMessage()}"

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class ExcludeLoggerFilter(logging.Filter):
    """특정 로거의 레코드를 걸러내는 필터"""

    def __init__(self, exclude_name: str):
        super().__init__()
        self.exclude_name = exclude_name

    def filter(self, record):
        return record.name != self.exclude_name


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    루트 로거 설정

    Args:
        log_level: 로그 레벨 (기본값: LOG_LEVEL 환경 변수 또는 INFO)
        log_file: 로그 파일 경로 (None이면 콘솔에만 출력)
    """
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    formatter = EngineFormatter()

    handlers = []

    # 콘솔 핸들러
    console_handler = logging.StreamHandler()
    handlers.append(console_handler)

    # 파일 핸들러
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ExcludeLoggerFilter("aiohttp.access"))
        root_logger.addHandler(handler)
