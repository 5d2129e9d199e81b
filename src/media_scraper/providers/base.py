"""元数据提供者基类模块"""
from abc import ABC, abstractmethod
from typing import Optional

from ..media_metadata import MediaMetadata
from ..search import MediaSearchResult


class ProviderInfo:
    """提供者信息"""
    def __init__(self, id: str, name: str = "", description: str = ""):
        self.id = id
        self.name = name or id
        self.description = description


class MediaMetadataProvider(ABC):
    """媒体元数据提供者基类"""

    @abstractmethod
    def get_info(self) -> ProviderInfo:
        """返回提供者信息"""
        pass

    @abstractmethod
    async def get_metadata(self, result: MediaSearchResult) -> Optional[MediaMetadata]:
        """
        获取搜索结果对应的完整元数据

        Args:
            result: 搜索结果（至少包含 provider_id 和 id）

        Returns:
            匹配的媒体元数据，如果未找到则返回 None
        """
        pass
