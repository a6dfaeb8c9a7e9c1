# -*- coding: utf-8 -*-
'''
Centralized logging configuration.

Sets up file + console logging with proper formatting.
All modules use: _logger = get_module_logger(__name__)

Created on Mon Oct 12 10:21:40 2026

@author: csvwwrw
'''

import logging
import sys
from pathlib import Path
from config.config import Config

def setup_logging(
        log_level=Config.LOG_LEVEL,
        log_file=str(Config.LOG_FILE),
        console=True,
        stream=None
        ):
    '''
    Configure logging for the whole corpus miner.

    Creates unified logger with file + console handlers. All module loggers
    inherit this configuration automatically via root logger.

    Args:
        log_level (str): Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR').

        log_file (str): Path to log file. Creates parent dirs if needed.

        console (bool): Enable console output. Defaults to True.

        stream (TextIO, optional): Console stream. Defaults to sys.stdout.

    Returns:
        None

    Raises:
        ValueError: If log_level is not a known logging level name.
    '''

    level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level: {log_level}')

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if getattr(handler, '_oncobase', False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        fmt=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT
        )

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    file_handler._oncobase = True
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        console_handler._oncobase = True
        root_logger.addHandler(console_handler)

    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)

    root_logger.debug(f'Logging configured: {log_path} (level={log_level})')


def get_module_logger(name):
    '''
    Get logger for specific module.

    Convenience function, equivalent to logging.getLogger(__name__).

    Args:
        name (str): Module name (use __name__).

    Returns:
        logging.Logger: Configured logger instance.
    '''
    return logging.getLogger(name)


if __name__ == '__main__':
    # Test logging setup
    setup_logging('DEBUG', 'logs/test.log')

    logger = logging.getLogger(__name__)
    logger.debug('Debug message')
    logger.info('Info message')
    logger.warning('Warning message')
    logger.error('Error message')

    print('Check logs/test.log for output')
