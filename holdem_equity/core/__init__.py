"""
Core - 纯计算逻辑层

该模块包含胜率计算的全部领域逻辑，不依赖任何外部服务，也不做任何持久化。

Modules:
    deck: 扑克牌模型和工作牌组
    eval: 分组统计、牌型识别和牌力计算
    simulation: 蒙特卡洛胜率模拟
    config: 模拟和日志配置
    exceptions: 业务异常
"""
