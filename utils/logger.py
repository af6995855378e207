import logging

_LOGGER_NAMES = set()

class CustomFormatter(logging.Formatter):
    """Bare messages for INFO, full level prefix for everything else"""
    def format(self, record):
        if record.levelno == logging.INFO:
            self._style._fmt = '%(message)s'
        else:
            self._style._fmt = '%(asctime)s - %(levelname)s - %(message)s'
        return super().format(record)

def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Module logger with a single stream handler attached"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(CustomFormatter(datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
    logger.setLevel(level)
    _LOGGER_NAMES.add(name)
    return logger

def set_level(level: int) -> None:
    """Change the level of every logger created through get_logger"""
    for name in _LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)
