"""
.lang 파일 파서

Bedrock 리소스 팩의 .lang 형식:
- '#' 또는 '##'으로 시작하는 줄은 주석
- 빈 줄은 무시
- key=value 형식, 첫 번째 '=' 기준으로 분리 (값에는 '='가 들어갈 수 있음)
"""

import logging
from pathlib import Path
from typing import Set, Union

from .models import TranslationEntry, TranslationTable

logger = logging.getLogger(__name__)

LANG_EXTENSION = ".lang"
TEXTS_DIR_NAME = "texts"

PathLike = Union[str, Path]


def parse_lang_content(content: str, source: str) -> TranslationTable:
    """
    .lang 문자열 파싱

    Args:
        content: .lang 파일 내용
        source: 항목에 기록될 출처 (파일 경로 또는 바닐라 표기)

    Returns:
        TranslationTable: {key: TranslationEntry}
    """
    translations: TranslationTable = {}

    for index, raw_line in enumerate(content.split('\n')):
        line = raw_line.strip()

        # 빈 줄과 주석 건너뛰기 ('##'도 '#'으로 시작)
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        if not sep or not key:
            continue

        # 같은 키가 다시 나오면 나중 줄이 이김
        translations[key] = TranslationEntry(
            key=key,
            value=value,
            line=index + 1,
            source=source,
        )

    return translations


def parse_lang_file(file_path: PathLike) -> TranslationTable:
    """
    .lang 파일 파싱

    파일이 없거나 읽을 수 없으면 빈 테이블을 반환합니다.

    Args:
        file_path: .lang 파일 경로

    Returns:
        TranslationTable: {key: TranslationEntry}
    """
    path = Path(file_path)
    if not path.is_file():
        logger.debug(f".lang 파일이 존재하지 않음: {path}")
        return {}

    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f".lang 파일 읽기 실패 ({path}): {e}")
        return {}

    translations = parse_lang_content(content, str(path))
    logger.debug(f".lang 파일 파싱: {path} ({len(translations)}개)")
    return translations


def find_available_languages(texts_dir: PathLike) -> Set[str]:
    """texts 디렉토리에 있는 언어 코드 목록 반환"""
    directory = Path(texts_dir)
    if not directory.is_dir():
        return set()

    try:
        return {
            entry.name[:-len(LANG_EXTENSION)]
            for entry in directory.iterdir()
            if entry.name.endswith(LANG_EXTENSION) and len(entry.name) > len(LANG_EXTENSION)
        }
    except OSError as e:
        logger.warning(f"언어 목록 조회 실패 ({directory}): {e}")
        return set()


def get_lang_file_path(texts_dir: PathLike, language: str) -> Path:
    """특정 언어의 .lang 파일 경로 반환"""
    return Path(texts_dir) / f"{language}{LANG_EXTENSION}"


def load_pack_translations(pack_path: PathLike, language: str) -> TranslationTable:
    """
    리소스 팩에서 특정 언어의 번역 로드

    Args:
        pack_path: 리소스 팩 루트 경로
        language: 언어 코드

    Returns:
        TranslationTable: {key: TranslationEntry}
    """
    texts_dir = Path(pack_path) / TEXTS_DIR_NAME
    return parse_lang_file(get_lang_file_path(texts_dir, language))
