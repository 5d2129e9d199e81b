"""操作结果模块"""
from enum import Enum
from typing import Any, Optional


class Failure(Enum):
    """失败原因"""
    MISSING_INPUT = "missing_input"
    PARSE_FAILED = "parse_failed"
    NO_MATCH = "no_match"
    PROVIDER_FAILED = "provider_failed"


class Outcome:
    """
    操作结果，要么携带值，要么携带失败原因

    调用方可以通过 failure 区分失败的类型，而不必依赖日志。
    """
    def __init__(self, value: Any = None, failure: Optional[Failure] = None, message: str = ""):
        self.value = value
        self.failure = failure
        self.message = message

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: Failure, message: str = "") -> "Outcome":
        return cls(failure=failure, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self, default: Any = None) -> Any:
        """返回值，失败时返回默认值"""
        return self.value if self.ok else default

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return f"Outcome(value={self.value!r})"
        return f"Outcome(failure={self.failure.value}, message={self.message!r})"
