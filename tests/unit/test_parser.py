"""
.lang 파서 단위 테스트
"""

from pathlib import Path

import pytest

from mcbe_translate.lang import (
    find_available_languages,
    get_lang_file_path,
    load_pack_translations,
    parse_lang_content,
    parse_lang_file,
)


class TestParseLangContent:
    """parse_lang_content 테스트"""

    def test_comment_and_value_with_equals(self):
        """주석은 제외하고 값은 첫 '=' 뒤를 그대로 사용"""
        table = parse_lang_content("## note\na.b=Hello=World\n", "test.lang")

        assert list(table.keys()) == ["a.b"]
        entry = table["a.b"]
        assert entry.value == "Hello=World"
        assert entry.line == 2
        assert entry.source == "test.lang"

    def test_duplicate_key_last_wins(self):
        """같은 파일 안의 중복 키는 마지막 줄이 이김"""
        table = parse_lang_content("k=1\nk=2\n", "test.lang")

        assert table["k"].value == "2"
        assert table["k"].line == 2

    def test_skips_comments_blank_and_malformed_lines(self):
        """빈 줄, 주석, '='이 없는 줄, 빈 키는 건너뜀"""
        content = "\n# single\n   ## indented comment\nno separator\n=orphan value\nitem.ok=Ok\n"
        table = parse_lang_content(content, "test.lang")

        assert set(table) == {"item.ok"}
        assert table["item.ok"].line == 6

    def test_empty_value_is_kept(self):
        """빈 값은 빈 문자열로 저장"""
        table = parse_lang_content("tile.air.name=\n", "test.lang")

        assert table["tile.air.name"].value == ""

    def test_crlf_line_endings(self):
        """CRLF 줄 끝은 값에 남지 않음"""
        table = parse_lang_content("a=1\r\nb=2\r\n", "test.lang")

        assert table["a"].value == "1"
        assert table["b"].value == "2"
        assert table["b"].line == 2

    def test_empty_content(self):
        assert parse_lang_content("", "test.lang") == {}


class TestParseLangFile:
    """parse_lang_file 및 관련 함수 테스트"""

    def test_missing_file_returns_empty(self, tmp_path: Path):
        """존재하지 않는 파일은 빈 테이블"""
        assert parse_lang_file(tmp_path / "missing.lang") == {}

    def test_file_source_is_path(self, tmp_path: Path):
        """항목 출처는 파일 경로"""
        lang_file = tmp_path / "en_US.lang"
        lang_file.write_text("item.apple.name=Apple\n", encoding="utf-8")

        table = parse_lang_file(lang_file)

        assert table["item.apple.name"].source == str(lang_file)

    def test_utf8_content(self, tmp_path: Path):
        """UTF-8 내용 파싱"""
        lang_file = tmp_path / "ko_KR.lang"
        lang_file.write_text("item.apple.name=사과\n", encoding="utf-8")

        assert parse_lang_file(lang_file)["item.apple.name"].value == "사과"

    def test_find_available_languages(self, tmp_path: Path):
        """.lang 파일 이름에서 언어 코드 추출"""
        (tmp_path / "en_US.lang").write_text("", encoding="utf-8")
        (tmp_path / "ko_KR.lang").write_text("", encoding="utf-8")
        (tmp_path / "languages.json").write_text("[]", encoding="utf-8")

        assert find_available_languages(tmp_path) == {"en_US", "ko_KR"}

    def test_find_available_languages_missing_dir(self, tmp_path: Path):
        assert find_available_languages(tmp_path / "texts") == set()

    def test_load_pack_translations(self, tmp_path: Path):
        """리소스 팩의 texts/<언어>.lang 로드"""
        texts = tmp_path / "texts"
        texts.mkdir()
        (texts / "en_US.lang").write_text("pack.key=Pack value\n", encoding="utf-8")

        assert get_lang_file_path(texts, "en_US") == texts / "en_US.lang"
        assert load_pack_translations(tmp_path, "en_US")["pack.key"].value == "Pack value"
        assert load_pack_translations(tmp_path, "ja_JP") == {}
