# iter_cursor/core/cursor.py
from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, Sequence, TypeVar

from iter_cursor.core.sentinel import NO_VALUE, Maybe
from iter_cursor.core.stages import (
    FilterStage,
    MapStage,
    SkipStage,
    Stage,
    StageKind,
    TakeStage,
    TapStage,
    require_callable,
    require_count,
    run_stages,
)
from iter_cursor.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from iter_cursor import logs

T = TypeVar("T")


class Iter(Generic[T]):
    """
    Lazy, bidirectional cursor over a fixed sequence.

    Combinators (map / filter / tap / skip / take) only register stages;
    nothing is evaluated until next() / prev() / collect() pulls a raw
    element through the pipeline.

    Exhaustion is returned as NO_VALUE, never raised. peek() returns the
    raw element at position + 1 and bypasses the pipeline.

    Not thread-safe: callers sharing one cursor across threads must
    serialize access themselves.

    Example:
        it = Iter([1, 5, 3, 9, 7])
        it.map(lambda x: x * 2).filter(lambda x: x > 6)
        it.collect()  # [10, 18, 14]
    """

    def __init__(
        self,
        elements: Optional[Sequence[T]] = None,
        *,
        inst: Instrumentation | None = None,
    ):
        self._elements: tuple[T, ...] = tuple(elements) if elements is not None else ()
        self._position: int = 0
        self._stages: list[Stage] = []
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    # --------------------------------------------------
    # State
    # --------------------------------------------------
    @property
    def elements(self) -> tuple[T, ...]:
        return self._elements

    @property
    def position(self) -> int:
        return self._position

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    @property
    def pipeline(self) -> tuple[tuple[StageKind, Any], ...]:
        """(kind, fn_or_count) pairs in registration order."""
        return tuple((stage.kind, stage.arg) for stage in self._stages)

    def reset(self) -> None:
        self._position = 0
        self._stages = []
        logs.debug("[Iter] reset")

    # --------------------------------------------------
    # Traversal
    # --------------------------------------------------
    def has_next(self) -> bool:
        return self._position < len(self._elements)

    def has_prev(self) -> bool:
        return self._position > 0

    def next(self) -> Maybe[T]:
        """
        Advance until a raw element survives the whole pipeline.

        Returns NO_VALUE once nothing further survives in this direction.
        """
        result: Any = NO_VALUE
        while self.has_next() and result is NO_VALUE:
            raw = self._elements[self._position]
            self._position += 1
            result = self._evaluate(raw)

        assert result is not NO_VALUE or not self.has_next(), "Iterator exhausted abruptly!"
        return result

    def prev(self) -> Maybe[T]:
        """Mirror of next(): decrement first, then read."""
        result: Any = NO_VALUE
        while self.has_prev() and result is NO_VALUE:
            self._position -= 1
            raw = self._elements[self._position]
            result = self._evaluate(raw)

        assert result is not NO_VALUE or not self.has_prev(), "Iterator exhausted abruptly!"
        return result

    def peek(self) -> Maybe[T]:
        idx = self._position + 1
        if 0 <= idx < len(self._elements):
            return self._elements[idx]
        return NO_VALUE

    def _evaluate(self, raw: T) -> Maybe[Any]:
        self.inst.incr("raw_read")
        result = run_stages(self._stages, raw)
        self.inst.incr("dropped" if result is NO_VALUE else "yielded")
        return result

    # --------------------------------------------------
    # Combinators (deferred, chainable)
    # --------------------------------------------------
    def _register(self, stage: Stage) -> "Iter[T]":
        self._stages.append(stage)
        logs.debug(f"[Iter] registered {stage.kind.value} stage #{len(self._stages)}")
        return self

    def map(self, fn: Callable[[T], Any]) -> "Iter[Any]":
        return self._register(MapStage(require_callable(fn, "map")))

    def filter(self, fn: Callable[[T], Any]) -> "Iter[T]":
        return self._register(FilterStage(require_callable(fn, "filter")))

    def tap(self, fn: Callable[[T], Any]) -> "Iter[T]":
        return self._register(TapStage(require_callable(fn, "tap")))

    def skip(self, n: int) -> "Iter[T]":
        return self._register(SkipStage(require_count(n, "skip")))

    def take(self, n: int) -> "Iter[T]":
        return self._register(TakeStage(require_count(n, "take")))

    # --------------------------------------------------
    # Terminal-ish operations
    # --------------------------------------------------
    def some(self, fn: Callable[[T], Any]) -> bool:
        """
        Registers fn as a permanent filter, then pulls once.

        The filter stays in the pipeline, so a second some() only sees
        what the first one let through.
        """
        self._register(FilterStage(require_callable(fn, "some")))
        return self.next() is not NO_VALUE

    def find(self, fn: Callable[[T], Any]) -> Maybe[T]:
        """Registers fn as a permanent filter and returns next()."""
        self._register(FilterStage(require_callable(fn, "find")))
        return self.next()

    def every(self, fn: Callable[[T], Any]) -> bool:
        """
        True iff fn holds for every remaining value (True when none remain).

        Consumes forward; stops at the first failing value. fn is checked
        locally and never joins the pipeline.
        """
        require_callable(fn, "every")
        while self.has_next():
            value = self.next()
            if value is NO_VALUE:
                continue
            if not fn(value):
                return False
        return True

    def collect(self) -> list[Any]:
        collected: list[Any] = []
        with self.inst.timer("Iter.collect"):
            while self.has_next():
                value = self.next()
                if value is not NO_VALUE:
                    collected.append(value)
        self.inst.record("Iter.collected", len(collected))
        return collected

    # --------------------------------------------------
    # Python protocols
    # --------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        value = self.next()
        if value is NO_VALUE:
            raise StopIteration
        return value

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        kinds = ", ".join(stage.kind.value for stage in self._stages)
        return f"Iter(position={self._position}, length={len(self._elements)}, stages=[{kinds}])"
