"""
元数据工具模块

刮削流程中使用的辅助函数：标题相似度评分、发行日期规范化、时长解析、
标题清理，以及按 ID 搜索时查询与结果之间的桥接。
"""
import logging
import re
from typing import List, Optional

from .dates import DateFormat, DateFormatError, ISO_PATTERN
from .media_metadata import MediaMetadata, MetadataKey
from .outcome import Failure, Outcome
from .providers.base import MediaMetadataProvider
from .search import MediaSearchResult, SearchQuery
from .similarity import compare_strings

logger = logging.getLogger(__name__)

_COMPRESSED_REGEX = re.compile(r"[^a-zA-Z]+")
_NON_SEARCH_REGEX = re.compile(r"[^A-Za-z0-9&']")
_NON_BARE_REGEX = re.compile(r"[^A-Za-z0-9']")
_SPACES_REGEX = re.compile(r" +")
_LONG_REGEX = re.compile(r"[+-]?\d{1,19}")
_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63 - 1

_ISO_FORMAT = DateFormat(ISO_PATTERN)


def get_metadata_id_parts(id: Optional[str]) -> Optional[List[str]]:
    """
    将 "前缀:编号" 形式的元数据 ID 拆分为两部分

    如果 ID 不是恰好包含一个冒号，则返回只包含原 ID 的列表。
    """
    if id is None:
        return None
    if id.count(":") != 1:
        return [id]
    return id.split(":")


def calculate_score(search_title: Optional[str], match_title: Optional[str]) -> float:
    """
    计算候选标题与搜索标题的最佳得分

    第一次使用原始候选标题，第二次使用去除非搜索字符后的候选标题，取两者最大值。
    """
    score1 = compare_strings(search_title, match_title)
    score2 = compare_strings(search_title, remove_non_search_characters(match_title))
    return max(score1, score2)


def calculate_compressed_score(search_title: Optional[str], match_title: Optional[str]) -> float:
    """
    在 calculate_score 的基础上增加压缩标题比较

    两个标题都去掉所有非字母字符后再比较一次，适用于 "csimiami" 与 "CSI: Miami" 这类录制名称。
    """
    score1 = calculate_score(search_title, match_title)
    if search_title is None or match_title is None:
        return score1

    score2 = compare_strings(_COMPRESSED_REGEX.sub("", search_title),
                             _COMPRESSED_REGEX.sub("", match_title))
    return max(score1, score2)


def set_release_date_from_formatted_date(md: MediaMetadata, str_date: Optional[str],
                                         date_in_format: Optional[str]) -> Outcome:
    """
    以统一的 yyyy-MM-dd 格式设置发行日期

    Args:
        md: 元数据对象
        str_date: 输入的日期文本
        date_in_format: 输入日期的模式（见 dates 模块）

    Returns:
        成功时携带写入的日期字符串；解析失败时发行日期被清除
    """
    if str_date is None or date_in_format is None:
        return Outcome.failed(Failure.MISSING_INPUT, "日期或日期模式为空")

    try:
        parsed = DateFormat(date_in_format).parse(str_date)
        out = _ISO_FORMAT.format(parsed)
    except DateFormatError as e:
        logger.warning(f"解析/格式化发行日期失败; dateIn: {str_date}; dateInFormat: {date_in_format}")
        md.set_string(MetadataKey.RELEASE_DATE, None)
        return Outcome.failed(Failure.PARSE_FAILED, str(e))

    md.set_string(MetadataKey.RELEASE_DATE, out)
    return Outcome.success(out)


def get_release_date(md: Optional[MediaMetadata]) -> Outcome:
    """读取元数据中的发行日期，成功时携带 datetime.date"""
    if md is None:
        return Outcome.failed(Failure.MISSING_INPUT, "元数据为空")
    value = md.get_string(MetadataKey.RELEASE_DATE)
    if value is None:
        return Outcome.failed(Failure.MISSING_INPUT, "元数据中没有发行日期")

    try:
        return Outcome.success(_ISO_FORMAT.parse(value))
    except DateFormatError as e:
        logger.warning(f"无法从元数据日期中解析日期: {value}")
        return Outcome.failed(Failure.PARSE_FAILED, str(e))


def _to_long(text: Optional[str], default: int = 0) -> int:
    """宽松的整数转换，无法转换时返回默认值"""
    if text is None or not _LONG_REGEX.fullmatch(text):
        return default
    value = int(text)
    # 超出 64 位有符号整数范围时同样视为无效
    if not _LONG_MIN <= value <= _LONG_MAX:
        return default
    return value


def convert_time_to_milliseconds_for_sage(time: Optional[str]) -> str:
    """将分钟数转换为毫秒字符串，无效输入按 0 分钟处理"""
    minutes = _to_long(time)
    if minutes == 0 and time not in (None, "0"):
        logger.debug(f"时长不是有效的整数，按 0 处理: {time!r}")
    return str(minutes * 60 * 1000)


def parse_running_time(text: Optional[str], regex: Optional[str]) -> Outcome:
    """
    从文本中解析时长

    Args:
        text: 待搜索的文本
        regex: 包含一个捕获组（分钟数）的正则表达式

    Returns:
        成功时携带毫秒字符串
    """
    if text is None or regex is None:
        return Outcome.failed(Failure.MISSING_INPUT, "文本或正则表达式为空")

    try:
        pattern = re.compile(regex)
    except re.error as e:
        logger.warning(f"无效的时长正则表达式: {regex} ({e})")
        return Outcome.failed(Failure.PARSE_FAILED, f"无效的正则表达式: {regex}")

    match = pattern.search(text)
    if match and pattern.groups >= 1:
        return Outcome.success(convert_time_to_milliseconds_for_sage(match.group(1)))

    logger.warning(f"未在 {text} 中找到时长; 使用正则: {regex}")
    return Outcome.failed(Failure.NO_MATCH, f"没有匹配: {regex}")


def get_bare_title(name: Optional[str]) -> Optional[str]:
    """将字母、数字和单引号以外的字符替换为空格（长度不变）"""
    if name is not None:
        return _NON_BARE_REGEX.sub(" ", name)
    return name


def remove_non_search_characters(s: Optional[str]) -> Optional[str]:
    """只保留字母、数字、& 和单引号，用于搜索"""
    if s is None:
        return None
    return _SPACES_REGEX.sub(" ", _NON_SEARCH_REGEX.sub(" ", s)).strip()


def copy_search_query_to_search_result(query: SearchQuery, sr: MediaSearchResult):
    """将查询中所有可复制且非空的字段复制到搜索结果的 extra 中"""
    for field in SearchQuery.Field.copyable_fields():
        value = query.get(field)
        if value:
            sr.extra[field.name] = value


async def search_by_id(prov: MediaMetadataProvider, query: SearchQuery, id: str) -> Outcome:
    """
    按 ID 搜索

    直接向提供者请求该 ID 的完整元数据，成功时返回只包含一个结果的列表。
    """
    logger.debug(f"search_by_id() for: {query}")
    try:
        res = MediaSearchResult(prov.get_info().id, id, query.get(SearchQuery.Field.RAW_TITLE),
                                query.get(SearchQuery.Field.YEAR), 1.0)
        copy_search_query_to_search_result(query, res)

        md = await prov.get_metadata(res)
        if md is None or md.is_empty():
            raise ValueError("metadata result was empty.")
        res.metadata = md
        res.media_type = query.media_type
        res.score = 1.0
        res.title = md.media_title
        res.year = md.year
        logger.info(f"search_by_id() 成功: {id}")
    except Exception as e:
        logger.warning(f"search_by_id() 失败: {query}: {str(e)}")
        return Outcome.failed(Failure.PROVIDER_FAILED, str(e))

    return Outcome.success([res])


def has_metadata(result: Optional[MediaSearchResult]) -> bool:
    return isinstance(result, MediaSearchResult) and result.metadata is not None


def get_metadata(result: Optional[MediaSearchResult]) -> Optional[MediaMetadata]:
    if isinstance(result, MediaSearchResult):
        return result.metadata
    return None
