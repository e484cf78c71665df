from .logger import logger, LogLevel, LogMessage

__all__ = ['logger', 'LogLevel', 'LogMessage']
