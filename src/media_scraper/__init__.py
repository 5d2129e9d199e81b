"""
媒体刮削工具
~~~~~~~~~~~

刮削媒体元数据时使用的辅助函数：标题评分、日期规范化、时长解析和按 ID 搜索。
"""

from .config import Config
from .dates import DateFormat, DateFormatError
from .media_metadata import MediaMetadata, MediaType, MetadataKey
from .outcome import Failure, Outcome
from .providers import MediaMetadataProvider, ProviderInfo
from .search import MediaSearchResult, SearchQuery
from .metadata_util import (
    calculate_compressed_score,
    calculate_score,
    convert_time_to_milliseconds_for_sage,
    copy_search_query_to_search_result,
    get_bare_title,
    get_metadata,
    get_metadata_id_parts,
    get_release_date,
    has_metadata,
    parse_running_time,
    remove_non_search_characters,
    search_by_id,
    set_release_date_from_formatted_date,
)

__all__ = [
    'Config',
    'DateFormat',
    'DateFormatError',
    'MediaMetadata',
    'MediaType',
    'MetadataKey',
    'Failure',
    'Outcome',
    'MediaMetadataProvider',
    'ProviderInfo',
    'MediaSearchResult',
    'SearchQuery',
    'calculate_compressed_score',
    'calculate_score',
    'convert_time_to_milliseconds_for_sage',
    'copy_search_query_to_search_result',
    'get_bare_title',
    'get_metadata',
    'get_metadata_id_parts',
    'get_release_date',
    'has_metadata',
    'parse_running_time',
    'remove_non_search_characters',
    'search_by_id',
    'set_release_date_from_formatted_date',
]
