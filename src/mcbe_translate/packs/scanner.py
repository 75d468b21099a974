"""
리소스 팩 탐색

디렉토리 루트에 있는 manifest.json을 확인하여 "resources" 모듈을 선언한
리소스 팩을 찾습니다. 하위 디렉토리는 탐색하지 않습니다.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..lang.parser import TEXTS_DIR_NAME

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "manifest.json"
RESOURCES_MODULE_TYPE = "resources"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ResourcePackInfo:
    """탐색된 리소스 팩 정보"""
    path: str  # 리소스 팩 루트 경로 (중복 제거 기준)
    name: str  # 표시 이름
    has_texts: bool  # texts 디렉토리 존재 여부
    texts_path: str  # texts 디렉토리 경로 (존재 여부와 무관)


@dataclass(frozen=True)
class PackManifest:
    """manifest.json에서 필요한 필드만 담은 구조"""
    header_name: Optional[str] = None
    module_types: List[str] = field(default_factory=list)


def _decode_manifest(data: Any) -> Optional[PackManifest]:
    """JSON 객체를 PackManifest로 변환 (형식이 맞지 않으면 None)"""
    if not isinstance(data, dict):
        return None

    header_name = None
    header = data.get('header')
    if isinstance(header, dict) and isinstance(header.get('name'), str):
        header_name = header['name']

    module_types: List[str] = []
    modules = data.get('modules')
    if isinstance(modules, list):
        for module in modules:
            if isinstance(module, dict) and isinstance(module.get('type'), str):
                module_types.append(module['type'])

    return PackManifest(header_name=header_name, module_types=module_types)


def read_manifest(manifest_path: PathLike) -> Optional[PackManifest]:
    """
    manifest.json 읽기

    파일이 없거나 JSON 파싱에 실패하면 None을 반환합니다.

    Args:
        manifest_path: manifest.json 경로

    Returns:
        Optional[PackManifest]: 매니페스트 (실패 시 None)
    """
    path = Path(manifest_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.debug(f"매니페스트 파싱 실패 ({path}): {e}")
        return None

    return _decode_manifest(data)


def is_resource_pack_manifest(manifest: Optional[PackManifest]) -> bool:
    """매니페스트가 리소스 팩을 선언하는지 확인"""
    if manifest is None:
        return False
    return RESOURCES_MODULE_TYPE in manifest.module_types


def scan_for_resource_packs(root_path: PathLike) -> List[ResourcePackInfo]:
    """
    디렉토리 자체가 리소스 팩인지 확인

    Args:
        root_path: 확인할 디렉토리

    Returns:
        List[ResourcePackInfo]: 리소스 팩이면 한 개, 아니면 빈 리스트
    """
    root = Path(root_path)
    manifest = read_manifest(root / MANIFEST_FILE_NAME)
    if not is_resource_pack_manifest(manifest):
        return []

    texts_path = root / TEXTS_DIR_NAME
    pack = ResourcePackInfo(
        path=str(root),
        name=manifest.header_name or root.name,
        has_texts=texts_path.is_dir(),
        texts_path=str(texts_path),
    )
    logger.debug(f"리소스 팩 발견: {pack.name} ({pack.path})")
    return [pack]


def scan_workspace_for_resource_packs(workspace_roots: Iterable[PathLike]) -> List[ResourcePackInfo]:
    """워크스페이스 루트들에서 리소스 팩 탐색"""
    packs: List[ResourcePackInfo] = []
    for root in workspace_roots:
        packs.extend(scan_for_resource_packs(root))
    return packs


def expand_home(path: PathLike) -> str:
    """경로 앞의 '~'를 현재 사용자 홈 디렉토리로 확장 ('~user' 형식은 그대로 둠)"""
    text = str(path)
    if text == '~' or text.startswith('~' + os.sep) or text.startswith('~/'):
        return os.path.expanduser(text)
    return text


def scan_configured_paths(additional_paths: Iterable[PathLike]) -> List[ResourcePackInfo]:
    """설정에 지정된 경로들에서 리소스 팩 탐색 (존재하지 않는 경로는 건너뜀)"""
    packs: List[ResourcePackInfo] = []
    for config_path in additional_paths:
        expanded = expand_home(config_path)
        if not os.path.exists(expanded):
            logger.debug(f"설정된 리소스 팩 경로가 존재하지 않음: {expanded}")
            continue
        packs.extend(scan_for_resource_packs(expanded))
    return packs


def deduplicate_packs(*pack_lists: Sequence[ResourcePackInfo]) -> List[ResourcePackInfo]:
    """경로 기준으로 중복 제거 (먼저 나온 항목 유지)"""
    unique: Dict[str, ResourcePackInfo] = {}
    for packs in pack_lists:
        for pack in packs:
            if pack.path in unique:
                continue
            unique[pack.path] = pack
    return list(unique.values())


def discover_resource_packs(
    workspace_roots: Iterable[PathLike] = (),
    configured_paths: Iterable[PathLike] = (),
) -> List[ResourcePackInfo]:
    """
    워크스페이스와 설정 경로의 모든 리소스 팩 반환

    Args:
        workspace_roots: 워크스페이스 루트 목록
        configured_paths: 추가로 설정된 경로 목록

    Returns:
        List[ResourcePackInfo]: 탐색 순서대로 중복 제거된 리소스 팩 목록
    """
    workspace_packs = scan_workspace_for_resource_packs(workspace_roots)
    configured_packs = scan_configured_paths(configured_paths)
    packs = deduplicate_packs(workspace_packs, configured_packs)

    logger.info(f"리소스 팩 탐색 완료: {len(packs)}개")
    return packs
