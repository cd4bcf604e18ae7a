# iter_cursor/core/sentinel.py
from __future__ import annotations

from enum import Enum
from typing import TypeVar, Union

T = TypeVar("T")


class NoValue(Enum):
    """
    "no value" 结果（被过滤 / 方向上已耗尽）

    单例，与 None / 0 / "" / False 等合法元素区分开；
    调用方应使用 `result is NO_VALUE` 判断。
    """

    TOKEN = "no_value"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE = NoValue.TOKEN

Maybe = Union[T, NoValue]


def is_no_value(value: object) -> bool:
    return value is NO_VALUE
