"""
牌组配置
包含随机种子和日志级别设置
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import DeckConfigError


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DeckConfig:
    """
    牌组配置类
    random_seed为None时由系统熵源播种
    """
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌
    log_level: str = "WARNING"          # 日志级别

    def __post_init__(self):
        """验证配置的有效性"""
        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise DeckConfigError(f"random_seed must be an int, got {self.random_seed!r}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise DeckConfigError(f"Invalid log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> 'DeckConfig':
        """从环境变量DECK_RANDOM_SEED和DECK_LOG_LEVEL读取配置"""
        raw_seed = os.getenv("DECK_RANDOM_SEED")
        seed = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise DeckConfigError(f"DECK_RANDOM_SEED must be an integer, got {raw_seed!r}")

        return cls(
            random_seed=seed,
            log_level=os.getenv("DECK_LOG_LEVEL", "WARNING"),
        )


def setup_logging(level: str = "WARNING") -> None:
    """程序启动时调用一次，库模块本身不安装任何handler"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
