import logging

def addLoggingLevel(levelName, levelNum, methodName=None):
    """
    Adds a new logging level to the `logging` module and the currently
    configured logging class.

    `levelName` becomes an attribute of the `logging` module with the value
    `levelNum`. `methodName` becomes a convenience method for both `logging`
    itself and the class returned by `logging.getLoggerClass()` (usually just
    `logging.Logger`). If `methodName` is not specified, `levelName.lower()` is
    used.

    Registering the same name twice with the same number is a no-op, so the
    package can be re-imported safely. Reusing a name with a different number
    raises an `AttributeError`.

    Example
    -------
    >>> addLoggingLevel('TRACE', logging.DEBUG - 5)
    >>> logging.getLogger(__name__).setLevel("TRACE")
    >>> logging.getLogger(__name__).trace('that worked')
    >>> logging.TRACE
    5

    """
    if not methodName:
        methodName = levelName.lower()

    existing = getattr(logging, levelName, None)
    if existing is not None:
        if existing != levelNum:
            raise AttributeError('{} already defined in logging module'.format(levelName))
        return

    def logForLevel(self, message, *args, **kwargs):
        if self.isEnabledFor(levelNum):
            self._log(levelNum, message, args, **kwargs)
    def logToRoot(message, *args, **kwargs):
        logging.log(levelNum, message, *args, **kwargs)

    logging.addLevelName(levelNum, levelName)
    setattr(logging, levelName, levelNum)
    setattr(logging.getLoggerClass(), methodName, logForLevel)
    setattr(logging, methodName, logToRoot)

FLRW_WARN = 37
FLRW_INFO = 35
FLRW_DEBUG = 25

addLoggingLevel('FLRW_WARN', FLRW_WARN)
addLoggingLevel('FLRW_INFO', FLRW_INFO)
addLoggingLevel('FLRW_DEBUG', FLRW_DEBUG)

_LEVELS = {
    'critical': logging.CRITICAL,       # level 50
    'error': logging.ERROR,             # level 40
    'flrw_warn': FLRW_WARN,             # level 37
    'flrw_info': FLRW_INFO,             # level 35
    'warning': logging.WARNING,         # level 30
    'flrw_debug': FLRW_DEBUG,           # level 25
    'info': logging.INFO,               # level 20
    'debug': logging.DEBUG,             # level 10
}

def log_wrapper(logger, message, *args, exception_info=False, level='flrw_warn'):
    try:
        levelNum = _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown logging level: {level}") from None
    logger.log(levelNum, message, *args, exc_info=exception_info)
