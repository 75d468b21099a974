"""
.lang 번역 파일 파싱 모듈
"""

from .models import TranslationEntry, TranslationTable, vanilla_source, is_vanilla_source
from .parser import (
    LANG_EXTENSION,
    TEXTS_DIR_NAME,
    parse_lang_content,
    parse_lang_file,
    find_available_languages,
    get_lang_file_path,
    load_pack_translations,
)

__all__ = [
    # 모델
    'TranslationEntry',
    'TranslationTable',
    'vanilla_source',
    'is_vanilla_source',

    # 파서
    'LANG_EXTENSION',
    'TEXTS_DIR_NAME',
    'parse_lang_content',
    'parse_lang_file',
    'find_available_languages',
    'get_lang_file_path',
    'load_pack_translations',
]
