# -*- coding: utf-8 -*-
"""번역 항목 데이터 모델"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class TranslationEntry:
    """하나의 번역 키에 대한 값과 출처"""
    key: str
    value: str
    line: int  # 1부터 시작하는 줄 번호
    source: str  # 파일 경로 또는 "vanilla:<locale>"


# {key: TranslationEntry}
TranslationTable = Dict[str, TranslationEntry]


VANILLA_SOURCE_PREFIX = "vanilla:"


def vanilla_source(locale: str) -> str:
    """바닐라 번역 출처 표기 반환"""
    return f"{VANILLA_SOURCE_PREFIX}{locale}"


def is_vanilla_source(source: str) -> bool:
    """출처가 원격 바닐라 번역인지 확인"""
    return source.startswith(VANILLA_SOURCE_PREFIX)
