#!filepath: iter_cursor/config/app_config.py
from __future__ import annotations

import os
from typing import Any, Sequence

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .log_config import LogConfig
from .observability_config import ObservabilityConfig
from iter_cursor.utils.errors import ConfigError
from iter_cursor.observability.instrumentation import Instrumentation
from iter_cursor.core.cursor import Iter
from iter_cursor import logs

ENV_LOG_LEVEL = "ITER_CURSOR_LOG_LEVEL"
ENV_LOG_DIR = "ITER_CURSOR_LOG_DIR"


def default_config_path() -> str:
    """
    iter_cursor/config/app_config.py → iter_cursor/config/base.yml
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - 环境变量 ITER_CURSOR_LOG_LEVEL / ITER_CURSOR_LOG_DIR 覆盖文件中的 log 配置
        """
        # 1) 先加载 .env（当前工作目录，已有环境变量优先）
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Config file is not valid YAML: {path}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        # 4) env 覆盖
        log_raw: dict[str, Any] = dict(raw.get("log") or {})
        if os.getenv(ENV_LOG_LEVEL):
            log_raw["level"] = os.getenv(ENV_LOG_LEVEL)
        if os.getenv(ENV_LOG_DIR):
            log_raw["dir"] = os.getenv(ENV_LOG_DIR)
        raw["log"] = log_raw

        try:
            cfg = cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e

        logs.debug(f"[Config] loaded {path}")
        return cfg

    def build_instrumentation(self) -> Instrumentation | None:
        if not self.observability.enabled:
            return None
        return Instrumentation(enabled=True)

    def build_cursor(self, elements: Sequence[Any] | None = None) -> Iter:
        """按当前配置构造 Iter。"""
        return Iter(elements, inst=self.build_instrumentation())
