"""
Hairstyle catalog loading.

The catalog is static reference data: loaded once, then shared read-only.
"""
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from hairstyle_recommender.models import (
    FaceShape,
    ForeheadTolerance,
    HairCategory,
    HairstyleCatalogEntry,
    StyleTag,
)
from hairstyle_recommender.utils import get_config, get_logger
from hairstyle_recommender.utils.exceptions import CatalogError

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "hairstyles.yaml"

_REQUIRED_FIELDS = (
    'id', 'name', 'category', 'compatible_shapes',
    'jawline_required_threshold', 'forehead_tolerance',
)


class HairstyleCatalog:
    """
    id로 조회 가능한 순서 있는 불변 카탈로그

    Usage:
        catalog = load_catalog()
        entry = catalog['5']
        for entry in catalog:
            ...
    """

    def __init__(self, entries):
        self._entries: Tuple[HairstyleCatalogEntry, ...] = tuple(entries)
        self._by_id: Dict[str, HairstyleCatalogEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise CatalogError(f"Duplicate hairstyle id: {entry.id}")
            self._by_id[entry.id] = entry

    def get(self, style_id: str, default: Optional[HairstyleCatalogEntry] = None):
        return self._by_id.get(style_id, default)

    def __getitem__(self, style_id: str) -> HairstyleCatalogEntry:
        try:
            return self._by_id[style_id]
        except KeyError:
            raise KeyError(f"Unknown hairstyle id: {style_id}") from None

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._by_id

    def __iter__(self) -> Iterator[HairstyleCatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[HairstyleCatalogEntry, ...]:
        return self._entries

    def __repr__(self):
        return f"HairstyleCatalog(size={len(self)})"


def _enum_value(enum_cls, value: Any, style_id: str, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise CatalogError(f"Hairstyle {style_id}: invalid {field_name} '{value}'") from None


def _list_value(data: Dict[str, Any], field_name: str, style_id: str, optional: bool = False) -> List[Any]:
    """리스트 필드 검증 (문자열 하나를 글자 단위로 순회하지 않도록)"""
    value = data.get(field_name)
    if value is None and optional:
        return []
    if not isinstance(value, list):
        raise CatalogError(
            f"Hairstyle {style_id}: {field_name} must be a list, got {type(value).__name__} {value!r}"
        )
    return value


def parse_entry(data: Dict[str, Any]) -> HairstyleCatalogEntry:
    """YAML 항목 하나를 HairstyleCatalogEntry로 변환"""
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog entry must be a mapping, got {type(data).__name__}")

    missing = [name for name in _REQUIRED_FIELDS if name not in data]
    if missing:
        raise CatalogError(f"Catalog entry {data.get('id', '?')} missing fields: {', '.join(missing)}")

    style_id = str(data['id'])

    try:
        threshold = float(data['jawline_required_threshold'])
    except (TypeError, ValueError):
        raise CatalogError(f"Hairstyle {style_id}: jawline_required_threshold must be a number") from None

    shapes = _list_value(data, 'compatible_shapes', style_id)
    tags = _list_value(data, 'style_tags', style_id, optional=True)

    return HairstyleCatalogEntry(
        id=style_id,
        name=str(data['name']),
        category=_enum_value(HairCategory, data['category'], style_id, 'category'),
        compatible_shapes=frozenset(
            _enum_value(FaceShape, s, style_id, 'face shape') for s in shapes
        ),
        jawline_required_threshold=threshold,
        forehead_tolerance=_enum_value(ForeheadTolerance, data['forehead_tolerance'], style_id, 'forehead_tolerance'),
        style_tags=frozenset(
            _enum_value(StyleTag, t, style_id, 'style tag') for t in tags
        ),
        descriptive_notes=str(data.get('descriptive_notes', '')),
    )


def load_catalog(path: Optional[str] = None) -> HairstyleCatalog:
    """
    YAML 카탈로그 파일 로드

    Args:
        path: 카탈로그 경로 (None이면 패키지 기본 카탈로그)

    Returns:
        HairstyleCatalog

    Raises:
        CatalogError: 파일이 없거나 형식이 잘못된 경우
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    if not catalog_path.exists():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            document = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML format in {catalog_path}: {e}") from e

    items = document.get('hairstyles') if isinstance(document, dict) else None
    if not isinstance(items, list):
        raise CatalogError(f"{catalog_path} must contain a 'hairstyles' list")

    catalog = HairstyleCatalog(parse_entry(item) for item in items)
    logger.info(f"Loaded {len(catalog)} hairstyles from {catalog_path.name}")
    return catalog


# Singleton 인스턴스
_default_catalog: Optional[HairstyleCatalog] = None


def get_catalog() -> HairstyleCatalog:
    """
    전역 카탈로그 반환 (최초 호출 시 한 번만 로드)

    recommendation.catalog_path 설정이 있으면 해당 파일을 사용한다.
    """
    global _default_catalog

    if _default_catalog is None:
        _default_catalog = load_catalog(get_config().get('recommendation.catalog_path'))

    return _default_catalog


__all__ = ['HairstyleCatalog', 'load_catalog', 'get_catalog', 'parse_entry', 'DEFAULT_CATALOG_PATH']
