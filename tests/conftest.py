# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from iter_cursor import Iter
from iter_cursor.utils.logger import LIBRARY_NAME


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    # 库日志默认 disable，测试中打开以便断言日志内容
    logger.enable(LIBRARY_NAME)
    yield
    logger.disable(LIBRARY_NAME)


@pytest.fixture
def iterator() -> Iter[int]:
    return Iter([1, 5, 3, 9, 7])


@pytest.fixture
def side_effects() -> list:
    return []


@pytest.fixture
def captured_logs():
    """
    收集 loguru 输出，用于断言日志内容
    """
    captured: list[str] = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    logger.remove(sink_id)
