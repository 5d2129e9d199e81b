"""媒体元数据模块"""
from enum import Enum
from typing import Optional, Dict


class MediaType(Enum):
    """媒体类型"""
    MOVIE = "Movie"
    TV = "TV"


class MetadataKey(Enum):
    """元数据键"""
    MEDIA_TITLE = "title"
    ORIGINAL_TITLE = "original_title"
    YEAR = "year"
    RELEASE_DATE = "release_date"
    RUNNING_TIME = "running_time"
    PLOT = "plot"
    RATING = "rating"
    GENRES = "genres"


class MediaMetadata:
    """媒体元数据类"""
    def __init__(self, media_title: str = None, year: str = None):
        self._values: Dict[MetadataKey, str] = {}
        self.set_string(MetadataKey.MEDIA_TITLE, media_title)
        self.set_string(MetadataKey.YEAR, year)

    def set_string(self, key: MetadataKey, value: Optional[str]):
        """设置字符串值，值为空时清除该键"""
        if value:
            self._values[key] = value
        else:
            self._values.pop(key, None)

    def get_string(self, key: MetadataKey) -> Optional[str]:
        return self._values.get(key)

    @property
    def media_title(self) -> Optional[str]:
        return self.get_string(MetadataKey.MEDIA_TITLE)

    @property
    def year(self) -> Optional[str]:
        return self.get_string(MetadataKey.YEAR)

    def is_empty(self) -> bool:
        """是否不包含任何值"""
        return not self._values

    def __str__(self):
        year_info = f" ({self.year})" if self.year else ""
        return f"{self.media_title or '<无标题>'}{year_info}"
