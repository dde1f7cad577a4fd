"""
pytest配置文件

提供牌组测试的通用fixture和测试标记定义.
"""

import random
import sys
from pathlib import Path
from typing import List

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from deck_of_cards import Card, Deck, Suit, Rank


@pytest.fixture
def deck() -> Deck:
    """使用固定种子的牌组，洗牌结果可重现"""
    return Deck(rng=random.Random(20240601))


@pytest.fixture
def construction_order() -> List[Card]:
    """构建顺序：花色在外层，点数在内层"""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


@pytest.fixture
def deal_order(construction_order) -> List[Card]:
    """未洗牌时的发牌顺序，从牌序末尾发出"""
    return list(reversed(construction_order))


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "statistical: 标记统计检验类测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
