"""
Настройка логирования для лабораторной работы
"""
import logging
import sys

from lcg_lab.config import LOG_FILE, LOG_LEVEL

_logger = None


def setup_logger(name: str = "lcg_lab", level: str = None) -> logging.Logger:
    """Создаёт и возвращает логгер (повторные вызовы возвращают тот же экземпляр)"""
    global _logger

    if _logger is not None:
        if level:
            log_level = getattr(logging, level.upper(), logging.INFO)
            _logger.setLevel(log_level)
            for handler in _logger.handlers:
                handler.setLevel(log_level)
        return _logger

    level = level or LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Не дублируем обработчики
    if logger.handlers:
        _logger = logger
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if LOG_FILE:
        try:
            file_handler = logging.FileHandler(LOG_FILE)
        except OSError as e:
            logger.warning(f"Не удалось открыть файл журнала {LOG_FILE}: {e}")
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger(name: str = "lcg_lab") -> logging.Logger:
    """Возвращает логгер, настраивая его при первом обращении"""
    if _logger is None:
        return setup_logger(name)
    return _logger
