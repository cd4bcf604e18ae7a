#!filepath: iter_cursor/observability/metrics.py
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Any
from iter_cursor import logs


@dataclass
class MetricRecorder:
    """
    两类指标：
      - metrics : 一次性记录的值（冷路径，会打日志）
      - counters: 热路径计数（不打日志）
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)
    counters: Counter = field(default_factory=Counter)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def incr(self, name: str, n: int = 1):
        if not self.enabled:
            return
        self.counters[name] += n
