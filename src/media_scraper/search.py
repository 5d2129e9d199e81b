"""搜索查询与搜索结果模块"""
from enum import Enum
from typing import Optional, Dict

from .media_metadata import MediaMetadata, MediaType


class SearchQuery:
    """搜索查询"""

    class Field(Enum):
        """
        查询字段

        成员名（如 RAW_TITLE）是字段的规范名称，用作搜索结果 extra 的键；
        key 是用于显示的名称；copyable 表示是否复制到搜索结果的 extra 中。
        """
        QUERY = ("query", False)
        TITLE = ("title", True)
        RAW_TITLE = ("raw_title", True)
        YEAR = ("year", True)
        IMDB_ID = ("imdb_id", True)
        TMDB_ID = ("tmdb_id", True)
        SEASON = ("season", True)
        EPISODE = ("episode", True)
        EPISODE_TITLE = ("episode_title", True)
        LANGUAGE = ("language", True)

        def __init__(self, key: str, copyable: bool):
            self.key = key
            self.copyable = copyable

        @classmethod
        def copyable_fields(cls):
            return [f for f in cls if f.copyable]

    def __init__(self, media_type: Optional[MediaType] = None, **fields: str):
        self.media_type = media_type
        self._values: Dict["SearchQuery.Field", str] = {}
        for name, value in fields.items():
            self.set(SearchQuery.Field[name.upper()], value)

    def get(self, field: "SearchQuery.Field") -> Optional[str]:
        return self._values.get(field)

    def set(self, field: "SearchQuery.Field", value: Optional[str]):
        if value is None:
            self._values.pop(field, None)
        else:
            self._values[field] = value

    def __str__(self):
        parts = [f"{f.key}={v}" for f, v in self._values.items()]
        if self.media_type:
            parts.append(f"media_type={self.media_type.value}")
        return "SearchQuery(" + ", ".join(parts) + ")"


class MediaSearchResult:
    """搜索结果"""
    def __init__(self, provider_id: str, id: str, title: str = None,
                 year: str = None, score: float = 0.0):
        self.provider_id = provider_id
        self.id = id
        self.title = title
        self.year = year
        self.score = score
        self.extra: Dict[str, str] = {}  # 附加字段
        self.metadata: Optional[MediaMetadata] = None
        self.media_type: Optional[MediaType] = None

    def __str__(self):
        return f"[{self.provider_id}:{self.id}] {self.title} ({self.year}) [得分: {self.score:.2f}]"
