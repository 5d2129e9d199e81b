"""
日期格式模块

使用显式的模式语言解析和格式化日历日期，不依赖区域设置或时区：

- ``yyyy`` / ``y``: 年份；``yy``: 两位年份（00-68 为 20xx，69-99 为 19xx）
- ``M`` / ``MM``: 数字月份；``MMM``: 英文月份缩写；``MMMM``: 英文月份全称
- ``d`` / ``dd``: 日
- ``'text'``: 字面文本（``''`` 表示单引号），其他非字母字符同样按字面匹配

解析时只要求文本开头与模式匹配，其后的内容（如 ``T10:00:00Z``）被忽略。
"""
import re
from datetime import date
from typing import List, Tuple

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_ABBREVIATIONS = [name[:3] for name in MONTH_NAMES]

ISO_PATTERN = "yyyy-MM-dd"

_FIELD_LETTERS = {"y": "year", "M": "month", "d": "day"}


class DateFormatError(ValueError):
    """日期模式无效或文本与模式不匹配"""


class DateFormat:
    """日期格式"""

    def __init__(self, pattern: str):
        if not pattern:
            raise DateFormatError("日期模式为空")
        self.pattern = pattern
        self._tokens = self._tokenize(pattern)
        self._regex = self._compile()

    @staticmethod
    def _tokenize(pattern: str) -> List[Tuple[str, str, int]]:
        """将模式拆分为 (类型, 内容, 长度) 的列表，类型为 field 或 literal"""
        tokens = []
        i = 0
        while i < len(pattern):
            ch = pattern[i]
            if ch == "'":
                end = pattern.find("'", i + 1)
                if end == -1:
                    raise DateFormatError(f"未闭合的引号: {pattern}")
                # '' 表示单引号本身
                text = pattern[i + 1:end] or "'"
                tokens.append(("literal", text, len(text)))
                i = end + 1
            elif ch.isalpha():
                if ch not in _FIELD_LETTERS:
                    raise DateFormatError(f"不支持的模式字母 '{ch}': {pattern}")
                j = i
                while j < len(pattern) and pattern[j] == ch:
                    j += 1
                tokens.append(("field", ch, j - i))
                i = j
            else:
                tokens.append(("literal", ch, 1))
                i += 1

        seen = set()
        for kind, value, _ in tokens:
            if kind == "field":
                if value in seen:
                    raise DateFormatError(f"重复的模式字段 '{value}': {pattern}")
                seen.add(value)
        return tokens

    @staticmethod
    def _is_numeric(token: Tuple[str, str, int]) -> bool:
        kind, value, count = token
        return kind == "field" and not (value == "M" and count >= 3)

    def _compile(self):
        parts = []
        for index, token in enumerate(self._tokens):
            kind, value, count = token
            if kind == "literal":
                parts.append(re.escape(value))
                continue

            group = _FIELD_LETTERS[value]
            if value == "M" and count >= 3:
                names = MONTH_NAMES if count >= 4 else MONTH_ABBREVIATIONS
                parts.append(f"(?P<month_name>{'|'.join(names)})")
                continue

            # 相邻的数字字段（如 yyyyMMdd）只能按固定宽度切分
            following = self._tokens[index + 1] if index + 1 < len(self._tokens) else None
            if value == "y" and count == 2:
                width = r"\d{2}"
            elif following is not None and self._is_numeric(following):
                width = rf"\d{{{count}}}"
            elif value == "y":
                width = r"\d{1,4}"
            else:
                width = r"\d{1,2}"
            parts.append(f"(?P<{group}>{width})")
        return re.compile("".join(parts), re.IGNORECASE)

    def parse(self, text: str) -> date:
        """按模式解析日期文本"""
        if text is None:
            raise DateFormatError("日期文本为空")
        # 与模式匹配的前缀即可，其后的文本（如时间部分）被忽略
        match = self._regex.match(text.strip())
        if not match or not match.group(0):
            raise DateFormatError(f"日期 '{text}' 与模式 '{self.pattern}' 不匹配")

        fields = match.groupdict()
        year = 1970
        if fields.get("year") is not None:
            year = int(fields["year"])
            if self._year_width() == 2:
                year += 2000 if year < 69 else 1900
        month = 1
        if fields.get("month") is not None:
            month = int(fields["month"])
        elif fields.get("month_name") is not None:
            month = self._month_from_name(fields["month_name"])
        day = int(fields["day"]) if fields.get("day") is not None else 1

        try:
            return date(year, month, day)
        except ValueError as e:
            raise DateFormatError(f"无效的日期 '{text}': {e}") from e

    def format(self, value: date) -> str:
        """按模式格式化日期"""
        out = []
        for kind, token, count in self._tokens:
            if kind == "literal":
                out.append(token)
            elif token == "y":
                if count == 2:
                    out.append(f"{value.year % 100:02d}")
                else:
                    out.append(f"{value.year:0{count}d}")
            elif token == "M":
                if count >= 4:
                    out.append(MONTH_NAMES[value.month - 1])
                elif count == 3:
                    out.append(MONTH_ABBREVIATIONS[value.month - 1])
                else:
                    out.append(f"{value.month:0{count}d}")
            else:
                out.append(f"{value.day:0{count}d}")
        return "".join(out)

    def _year_width(self) -> int:
        for kind, value, count in self._tokens:
            if kind == "field" and value == "y":
                return count
        return 0

    @staticmethod
    def _month_from_name(name: str) -> int:
        lowered = name.lower()
        for index, full in enumerate(MONTH_NAMES):
            if lowered in (full.lower(), full[:3].lower()):
                return index + 1
        raise DateFormatError(f"未知的月份: {name}")

    def __repr__(self):
        return f"DateFormat({self.pattern!r})"
