from nlu_features.log.logger import Logger
from nlu_features.services.settings import load_settings

_logger = None


def getLogger():
    global _logger
    if _logger is None:
        settings = load_settings()
        _logger = Logger(
            log_dir=settings.log_dir,
            prefix=settings.log_prefix,
            console=settings.log_console,
        )
    return _logger


def resetLogger():
    """Drop the cached logger so the next getLogger() re-reads settings."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = None
