"""
德州扑克胜率计算业务异常定义
所有输入校验错误在边界处立即抛出，不做重试或降级
"""


class HoldemEquityError(Exception):
    """胜率计算基础异常类"""
    pass


class InvalidCardError(HoldemEquityError, ValueError):
    """无效扑克牌异常（点数、花色或长度错误，或重复的已知牌）"""
    pass


class InvalidHandSizeError(HoldemEquityError, ValueError):
    """牌型评估输入不是7张牌"""
    pass


class InvalidPocketInputError(HoldemEquityError, ValueError):
    """手牌座位输入无效"""
    pass


class InvalidBoardError(HoldemEquityError, ValueError):
    """公共牌超过5张"""
    pass


class DeckExhaustedError(HoldemEquityError):
    """牌组剩余牌数不足以补全所有位置"""
    pass
