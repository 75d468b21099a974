"""
리소스 팩 탐색 모듈
"""

from .scanner import (
    MANIFEST_FILE_NAME,
    RESOURCES_MODULE_TYPE,
    ResourcePackInfo,
    PackManifest,
    read_manifest,
    is_resource_pack_manifest,
    scan_for_resource_packs,
    scan_workspace_for_resource_packs,
    scan_configured_paths,
    deduplicate_packs,
    discover_resource_packs,
)

__all__ = [
    'MANIFEST_FILE_NAME',
    'RESOURCES_MODULE_TYPE',
    'ResourcePackInfo',
    'PackManifest',
    'read_manifest',
    'is_resource_pack_manifest',
    'scan_for_resource_packs',
    'scan_workspace_for_resource_packs',
    'scan_configured_paths',
    'deduplicate_packs',
    'discover_resource_packs',
]
