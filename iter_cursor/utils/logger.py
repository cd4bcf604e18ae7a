#!filepath: iter_cursor/utils/logger.py
import os
import sys
from loguru import logger
from typing import List, Optional

# 库内模块名前缀：import 时 disable，由 init_logging 重新 enable
LIBRARY_NAME = "iter_cursor"


class Logging:
    """
    库级日志模块
    ---------------------------------------
    - import 时不挂任何 sink，也不动宿主程序已注册的 sink
    - 库内日志默认 disable，调用 init_logging 后才输出
    - _configure 只移除自己添加过的 sink
    - 配置 log_dir 后额外写入按日期切割的文件
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
        install: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._sink_ids: List[int] = []

        if install:
            self._configure()

    def _configure(self) -> None:
        """
        移除本实例之前添加的 sinks，再按当前配置挂载
        """
        self._remove_own_sinks()

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)

        self._sink_ids.append(
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                filter=LIBRARY_NAME,
                backtrace=True,
                diagnose=False,
            )
        )

        if self.log_dir:
            self._sink_ids.append(
                logger.add(
                    sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                    rotation=self.rotation,
                    retention=self.retention,
                    level=self.level,
                    format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                    filter=LIBRARY_NAME,
                    backtrace=True,
                    diagnose=False,
                )
            )

        logger.enable(LIBRARY_NAME)

    def _remove_own_sinks(self) -> None:
        for sink_id in self._sink_ids:
            try:
                logger.remove(sink_id)
            except ValueError:
                # 已被外部 logger.remove() 清掉
                pass
        self._sink_ids = []

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    用 LogConfig 配置全局 logs（原地替换本库 sinks，已导入的 logs 引用依然有效）
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level

    logs._configure()
    logs.debug(f"[Logging] configured level={cfg.level} dir={cfg.dir}")
    return logs


# 默认全局 logs：import 时不挂 sink，库日志静默（可被 init_logging 启用）
logs = Logging(install=False)
logger.disable(LIBRARY_NAME)
