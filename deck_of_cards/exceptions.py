"""
牌组业务异常定义
空牌组发单张牌不是异常，返回None
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class InsufficientCardsError(DeckError):
    """剩余牌数不足异常"""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remaining")


class DeckConfigError(DeckError):
    """牌组配置错误异常"""
    pass
