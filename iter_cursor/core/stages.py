# iter_cursor/core/stages.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar

from iter_cursor.core.sentinel import NO_VALUE, Maybe
from iter_cursor.utils.errors import InvalidArgumentError


class StageKind(str, Enum):
    MAP = "map"
    FILTER = "filter"
    TAP = "tap"
    SKIP = "skip"
    TAKE = "take"


def require_callable(fn: Any, combinator: str) -> Callable[[Any], Any]:
    if not callable(fn):
        raise InvalidArgumentError(
            f"{combinator}() expects a callable, got {type(fn).__name__}"
        )
    return fn


def require_count(n: Any, combinator: str) -> int:
    # bool 是 int 子类，这里显式拒绝
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            f"{combinator}() expects an int count, got {type(n).__name__}"
        )
    if n < 0:
        raise InvalidArgumentError(f"{combinator}() count must be >= 0, got {n}")
    return n


class Stage(ABC):
    """
    Pipeline 中的一个阶段：value → value | NO_VALUE

    kind 标识变体；arg 是注册时传入的参数（函数或计数）。
    """

    kind: ClassVar[StageKind]

    @abstractmethod
    def apply(self, value: Any) -> Maybe[Any]:
        raise NotImplementedError

    @property
    @abstractmethod
    def arg(self) -> Any:
        ...


@dataclass
class MapStage(Stage):
    fn: Callable[[Any], Any]
    kind: ClassVar[StageKind] = StageKind.MAP

    def apply(self, value: Any) -> Any:
        return self.fn(value)

    @property
    def arg(self) -> Callable[[Any], Any]:
        return self.fn


@dataclass
class FilterStage(Stage):
    fn: Callable[[Any], Any]
    kind: ClassVar[StageKind] = StageKind.FILTER

    def apply(self, value: Any) -> Maybe[Any]:
        return value if self.fn(value) else NO_VALUE

    @property
    def arg(self) -> Callable[[Any], Any]:
        return self.fn


@dataclass
class TapStage(Stage):
    fn: Callable[[Any], Any]
    kind: ClassVar[StageKind] = StageKind.TAP

    def apply(self, value: Any) -> Any:
        self.fn(value)
        return value

    @property
    def arg(self) -> Callable[[Any], Any]:
        return self.fn


@dataclass
class SkipStage(Stage):
    """丢弃到达本阶段的前 n 个元素。"""

    n: int
    seen: int = field(default=0, init=False)
    kind: ClassVar[StageKind] = StageKind.SKIP

    def apply(self, value: Any) -> Maybe[Any]:
        self.seen += 1
        if self.seen <= self.n:
            return NO_VALUE
        return value

    @property
    def arg(self) -> int:
        return self.n


@dataclass
class TakeStage(Stage):
    """
    只放行到达本阶段的前 n 个元素。

    配额用完后一直返回 NO_VALUE，不会自动恢复（只有 reset() 丢弃本阶段）。
    """

    n: int
    seen: int = field(default=0, init=False)
    kind: ClassVar[StageKind] = StageKind.TAKE

    def apply(self, value: Any) -> Maybe[Any]:
        if self.seen >= self.n:
            return NO_VALUE
        self.seen += 1
        return value

    @property
    def arg(self) -> int:
        return self.n


def run_stages(stages: list[Stage], value: Any) -> Maybe[Any]:
    """按注册顺序执行，遇到 NO_VALUE 立即短路。"""
    for stage in stages:
        value = stage.apply(value)
        if value is NO_VALUE:
            return NO_VALUE
    return value
