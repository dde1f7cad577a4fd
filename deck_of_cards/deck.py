"""
扑克牌组管理.

定义Deck类，管理标准52张牌的洗牌、发牌和重置.
牌组保存两份牌序：构建时确定的原始牌序，以及洗牌、发牌所操作的当前牌序.
"""

import logging
import random
from typing import List, Optional

from .card import Card
from .config import DeckConfig
from .exceptions import InsufficientCardsError
from .types import DeckState, get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    构建时按花色（外层）和点数（内层）的顺序生成52张牌. 发牌从当前牌序的末尾取牌.
    非线程安全，多线程共享时需由调用方加锁.

    Attributes:
        _original: 原始牌序，构建后不再修改
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck()
        >>> deck.shuffle()
        >>> card = deck.deal()
        >>> deck.count()
        51
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 config: Optional[DeckConfig] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器. 优先于config中的随机种子
            config: 牌组配置. 为None时使用默认配置
        """
        config = config or DeckConfig()
        if rng is not None:
            self._rng = rng
            logger.debug("Deck created with injected random generator")
        elif config.random_seed is not None:
            self._rng = random.Random(config.random_seed)
            logger.debug("Deck created with fixed seed %d", config.random_seed)
        else:
            # 无参数时由操作系统熵源播种
            self._rng = random.Random()
            logger.debug("Deck created with entropy-seeded random generator")

        self._original: List[Card] = [
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        self._cards: List[Card] = list(self._original)

    def shuffle(self) -> None:
        """
        洗牌.

        对当前牌序执行Fisher-Yates洗牌. 已发出部分牌时只打乱剩余的牌.
        """
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("Shuffled %d cards", len(cards))

    def deal(self) -> Optional[Card]:
        """
        发一张牌.

        Returns:
            Optional[Card]: 牌组末尾的牌，牌组为空时返回None
        """
        if not self._cards:
            logger.debug("Deal requested from empty deck")
            return None
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发出顺序排列的牌

        Raises:
            ValueError: 当count为负数时
            InsufficientCardsError: 当牌组中的牌不足时，此时不发出任何牌
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise InsufficientCardsError(count, len(self._cards))

        return [self._cards.pop() for _ in range(count)]

    def reset(self) -> None:
        """恢复为原始牌序的52张牌，不洗牌."""
        self._cards = list(self._original)
        logger.debug("Deck reset to %d cards", len(self._cards))

    def count(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    def peek(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 下一张将被发出的牌，牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def state(self) -> DeckState:
        """当前牌组状态"""
        if not self._cards:
            return DeckState.EMPTY
        if len(self._cards) == len(self._original):
            return DeckState.FULL
        return DeckState.PARTIAL

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)}, state={self.state.name})"
