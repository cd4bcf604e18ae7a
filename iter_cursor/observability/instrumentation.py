#!filepath: iter_cursor/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from iter_cursor.observability.timer import Timer
from iter_cursor.observability.metrics import MetricRecorder
from iter_cursor import logs


@dataclass
class Instrumentation:
    """
    Cursor 可选的观测层。

    约定：
    1. 热路径（每个元素）只做 counters 计数，不打日志
    2. timeline 只记录 record=True 的 timer
    3. 日志只在 report() 冷路径输出
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    # ---------------------------------------------------------
    # Counters / Metrics
    # ---------------------------------------------------------
    def incr(self, name: str, n: int = 1) -> None:
        self.metrics.incr(name, n)

    def record(self, name: str, value) -> None:
        self.metrics.record(name, value)

    @property
    def counters(self) -> Dict[str, int]:
        return dict(self.metrics.counters)

    # ---------------------------------------------------------
    # Context Manager Timer
    # ---------------------------------------------------------
    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            timeline key
        record : bool
            False 时只计时不写入 timeline
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    # ---------------------------------------------------------
    # Report（冷路径）
    # ---------------------------------------------------------
    def report(self) -> None:
        if not self.enabled:
            return
        for name, value in sorted(self.metrics.counters.items()):
            logs.info(f"[Counter] {name} = {value}")
        for name, value in self.metrics.metrics.items():
            logs.info(f"[Metric] {name} = {value}")
        for name, elapsed in self.timeline.items():
            logs.info(f"[Timeline] {name} took {elapsed:.6f}s")


# -------------------------------------------------------------
# No-op Instrumentation（未传入 inst 时使用）
# -------------------------------------------------------------
class NoOpInstrumentation:
    enabled = False

    def incr(self, name: str, n: int = 1) -> None:
        pass

    def record(self, name: str, value) -> None:
        pass

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def report(self) -> None:
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
