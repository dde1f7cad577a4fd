"""
扑克牌相关类型定义.

定义标准52张牌的花色、点数以及牌组状态等基础枚举类型.
"""

from enum import Enum, IntEnum, auto
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    枚举顺序即建牌顺序：梅花、方块、红桃、黑桃.
    """

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.CLUB: "♣",
            Suit.DIAMOND: "♦",
            Suit.HEART: "♥",
            Suit.SPADE: "♠",
        }
        return symbols[self]

    @property
    def letter(self) -> str:
        """返回花色的单字母缩写，如"C"表示梅花"""
        return self.name[0]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A为1，K为13，按点数大小排序.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class DeckState(Enum):
    """牌组状态枚举"""
    FULL = auto()     # 52张牌齐全
    PARTIAL = auto()  # 已发出部分牌
    EMPTY = auto()    # 已发完


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按枚举顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
