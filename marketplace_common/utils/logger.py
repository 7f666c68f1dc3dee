# marketplace_common/utils/logger.py
import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from marketplace_common.config.base import LoggingConfig


def setup_logger(log_name: str, log_config: LoggingConfig, log_file_path: Optional[str] = None) -> logging.Logger:
    """
    设置日志记录器，动态决定日志输出到文件或标准输出
    :param log_name: 日志记录器名称
    :param log_config: 通用日志配置模型（调用方注入）
    :param log_file_path: 日志文件路径（可选，优先级高于配置中的路径）
    :return: 配置好的Logger
    """
    log_level = getattr(logging, log_config.level.upper(), logging.INFO)

    logger = logging.getLogger(log_name)
    logger.setLevel(log_level)

    # 防止重复添加处理器
    if not logger.handlers:
        log_file_path = log_file_path or log_config.service_path
        if log_file_path:
            os.makedirs(os.path.dirname(os.path.abspath(log_file_path)), exist_ok=True)
            log_handler = TimedRotatingFileHandler(
                log_file_path,
                when="midnight",
                interval=log_config.interval,
                backupCount=log_config.backup_count,
                encoding="utf-8",
            )
        else:
            log_handler = logging.StreamHandler()

        log_handler.setFormatter(logging.Formatter(log_config.format))
        logger.addHandler(log_handler)

    logger.propagate = False

    return logger


def create_repository_logger(log_config: LoggingConfig) -> logging.Logger:
    """创建数据访问层日志器，仓储模块的子日志器（marketplace_common.repositories.*）都会写入这里"""
    return setup_logger(log_name="marketplace_common.repositories", log_config=log_config)
