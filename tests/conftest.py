"""全局测试设置"""
import sys
from pathlib import Path
from typing import Optional

import pytest

# 将 src 目录加入路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from media_scraper.media_metadata import MediaMetadata, MediaType  # noqa: E402
from media_scraper.providers.base import MediaMetadataProvider, ProviderInfo  # noqa: E402
from media_scraper.search import MediaSearchResult, SearchQuery  # noqa: E402


class FakeProvider(MediaMetadataProvider):
    """返回预设元数据（或抛出预设异常）的提供者"""

    def __init__(self, metadata: Optional[MediaMetadata] = None, error: Optional[Exception] = None):
        self.metadata = metadata
        self.error = error
        self.requested = []

    def get_info(self) -> ProviderInfo:
        return ProviderInfo("fake", "Fake Provider")

    async def get_metadata(self, result: MediaSearchResult) -> Optional[MediaMetadata]:
        self.requested.append(result)
        if self.error is not None:
            raise self.error
        return self.metadata


@pytest.fixture
def movie_query() -> SearchQuery:
    return SearchQuery(
        media_type=MediaType.MOVIE,
        query="the matrix 1999",
        raw_title="The Matrix",
        year="1999",
        imdb_id="tt0133093",
    )


@pytest.fixture
def matrix_metadata() -> MediaMetadata:
    return MediaMetadata("The Matrix", "1999")


@pytest.fixture
def provider_factory():
    return FakeProvider
