"""
扑克牌数据结构.

定义不可变的Card类. 同一张牌对象在原始牌序、当前牌组和调用方之间共享引用.
"""

from dataclasses import dataclass
from typing import Dict

from .types import Suit, Rank


_RANK_DISPLAY: Dict[Rank, str] = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K"
}

_RANK_PARSE: Dict[str, Rank] = dict(
    {text: rank for rank, text in _RANK_DISPLAY.items()},
    T=Rank.TEN
)

_SUIT_PARSE: Dict[str, Suit] = {suit.letter: suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，花色和点数在创建后固定. 相等性和哈希均基于(花色, 点数).

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.CLUB, Rank.ACE)
        >>> str(card)
        'AC'
        >>> card.rank.value
        1
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数不是对应枚举成员时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")

    def equals(self, other: object) -> bool:
        """判断两张牌的花色和点数是否都相同"""
        return self == other

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"10H"表示红桃10
        """
        return f"{_RANK_DISPLAY[self.rank]}{self.suit.letter}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AC"、"10h"、"Ts"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card string must be str, got {type(card_str).__name__}")

        if len(card_str) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1].upper(), card_str[-1].upper()

        if rank_str not in _RANK_PARSE:
            raise ValueError(f"Invalid rank: {rank_str!r}")
        if suit_str not in _SUIT_PARSE:
            raise ValueError(f"Invalid suit: {suit_str!r}")

        return cls(_SUIT_PARSE[suit_str], _RANK_PARSE[rank_str])
