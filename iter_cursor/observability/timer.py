#!filepath: iter_cursor/observability/timer.py
import time
from collections import defaultdict
from typing import DefaultDict, List


class Timer:
    """
    按名字分栈的计时器
    - start(name) 压栈，end(name) 弹出最近一次 start，返回耗时秒数
    - 同名 start 可以嵌套（例如 collect 内再次 collect），外层不会被覆盖
    - end 没有匹配的 start 时返回 0.0
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._stacks: DefaultDict[str, List[float]] = defaultdict(list)

    def start(self, name: str) -> None:
        if not self.enabled:
            return
        self._stacks[name].append(time.perf_counter())

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0
        stack = self._stacks.get(name)
        if not stack:
            return 0.0
        elapsed = time.perf_counter() - stack.pop()
        if not stack:
            del self._stacks[name]
        return elapsed

    def depth(self, name: str) -> int:
        return len(self._stacks.get(name, ()))
