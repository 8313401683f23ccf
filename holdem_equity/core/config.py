"""
胜率模拟配置相关类的实现
包含模拟参数、日志设置和预置配置档
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional


logger = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "holdem_equity"


@dataclass(frozen=True)
class SimulationConfig:
    """
    蒙特卡洛模拟配置
    """
    iterations: int = 10_000                 # 请求的模拟次数
    time_limit_ms: Optional[int] = None      # 时间上限（毫秒），None或0表示不限
    time_check_interval: int = 100           # 每隔多少次模拟检查一次时间
    random_seed: Optional[int] = None        # 随机种子，用于可重现的模拟

    def __post_init__(self):
        """验证配置的有效性"""
        if self.iterations < 1:
            raise ValueError(f"模拟次数必须至少为1: {self.iterations}")
        if self.time_limit_ms is not None and self.time_limit_ms < 0:
            raise ValueError(f"时间上限不能为负数: {self.time_limit_ms}")
        if self.time_check_interval < 1:
            raise ValueError(f"时间检查间隔必须至少为1: {self.time_check_interval}")


@dataclass(frozen=True)
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "holdem_equity.log"

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"无效的日志级别: {self.log_level}")


SIMULATION_PROFILES: Dict[str, SimulationConfig] = {
    'default': SimulationConfig(),
    'quick': SimulationConfig(iterations=1_000),
    'precise': SimulationConfig(iterations=100_000),
}


def get_simulation_config(profile: str = "default") -> SimulationConfig:
    """
    获取预置的模拟配置
    
    Args:
        profile: 配置档名称 (default, quick, precise)
        
    Returns:
        对应的模拟配置，未知名称时返回默认配置
    """
    if profile not in SIMULATION_PROFILES:
        logger.warning(f"未找到模拟配置 '{profile}'，使用默认配置")
        profile = "default"
    return SIMULATION_PROFILES[profile]


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    为 holdem_equity 包安装日志处理器
    
    重复调用会替换之前安装的处理器.
    
    Args:
        config: 日志配置，为None时使用默认配置
        
    Returns:
        包级logger
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(config.log_level.upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)
    if config.enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)
    if config.enable_file_logging:
        file_handler = logging.FileHandler(config.log_file_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger
