#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
标准52张扑克牌组

模块结构：
- types: 花色、点数、牌组状态枚举
- card: 不可变的扑克牌
- deck: 牌组（洗牌、发牌、重置）
- config: 随机种子和日志配置
- exceptions: 异常类型
"""

from .types import Suit, Rank, DeckState, get_all_suits, get_all_ranks
from .card import Card
from .deck import Deck
from .config import DeckConfig, setup_logging
from .exceptions import DeckError, InsufficientCardsError, DeckConfigError

__version__ = "1.0.0"

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'DeckState', 'get_all_suits', 'get_all_ranks',

    # 卡牌相关
    'Card', 'Deck',

    # 配置相关
    'DeckConfig', 'setup_logging',

    # 异常类型
    'DeckError', 'InsufficientCardsError', 'DeckConfigError',
]
