"""
번역 엔진 진단 실행 파일

번역을 한 번 로드하고 상태와 지정한 키의 번역 값을 출력합니다.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import Settings
from .core.translation_manager import close_translation_manager, get_translation_manager
from .log import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MCBE 번역 키 조회")
    parser.add_argument('keys', nargs='*', help="조회할 번역 키")
    parser.add_argument('--language', '-l', help="사용할 언어 코드 (예: ko_KR)")
    parser.add_argument('--search', '-s', help="키 또는 값에서 검색할 문자열")
    parser.add_argument('--limit', type=int, default=20, help="검색 결과 최대 개수")
    parser.add_argument('--no-vanilla', action='store_true', help="바닐라 번역 사용 안 함")
    parser.add_argument('--env-file', help=".env 파일 경로")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = parse_args(argv)

    settings = Settings.from_env(args.env_file)
    if args.language:
        settings.default_language = args.language
    if args.no_vanilla:
        settings.use_vanilla = False

    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    try:
        manager = await get_translation_manager(settings)
        print(manager.get_status_text())

        exit_code = 0
        for key in args.keys:
            entry = manager.get_translation(key)
            if entry is None:
                print(f"{key}: (번역 없음)")
                exit_code = 1
                continue
            print(f"{key}={entry.value}  [{entry.source}:{entry.line}]")

        if args.search:
            for entry in manager.search_translations(args.search, args.limit):
                print(f"{entry.key}={entry.value}")

        return exit_code

    except KeyboardInterrupt:
        logger.info("사용자에 의해 중단됨")
        return 130
    finally:
        await close_translation_manager()


def run() -> None:
    sys.exit(asyncio.run(main()))
