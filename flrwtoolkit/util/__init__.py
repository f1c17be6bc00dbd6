"""
Logging utilities.
"""

from .log_util import addLoggingLevel, log_wrapper, FLRW_WARN, FLRW_INFO, FLRW_DEBUG

__all__ = ['addLoggingLevel', 'log_wrapper', 'FLRW_WARN', 'FLRW_INFO', 'FLRW_DEBUG']
