"""字符串相似度模块"""
from typing import Optional

from fuzzywuzzy import fuzz


def compare_strings(s1: Optional[str], s2: Optional[str]) -> float:
    """
    比较两个字符串的相似度（不区分大小写）

    Returns:
        0.0 - 1.0 之间的得分，完全相同为 1.0，任一方为空时为 0.0
    """
    if s1 is None or s2 is None:
        return 0.0
    return fuzz.ratio(s1.lower(), s2.lower()) / 100.0
