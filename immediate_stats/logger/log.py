# coding: utf-8

'''
Logging for Immediate Stats.

Everything goes through one `immediate_stats` logger. Messages use brace
formatting, applied only when the call has args:

  log.warning("{}: {}", location, message)

Unit tests can divert all output to a callback with `ut_set_up()`.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import (Optional, Union, Any, Type, Callable,
                    Mapping, MutableMapping, Dict, List)

import logging
import datetime
import math
import enum
from types import TracebackType

from . import pretty


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

ROOT_NAME = 'immediate_stats'
'''
Name of our logger. Hosts can configure it like any other stdlib logger.
'''

_FMT_DATETIME = '%Y-%m-%d %H:%M:%S.{msecs:03d}%z'

_FMT_LINE = (
    '{asctime:s} - {name:s} - {levelname:8s} - '
    '{module:s}.{funcName:s}{message:s}'
)
'''
`message` is appended directly to `funcName`; `brace_message()` supplies the
separator.
'''

_FMT_MESSAGE = ': {message:s}'

_CONTEXT_INDENT = 4


@enum.unique
class Level(enum.IntEnum):
    '''
    Log levels, with the same values as the stdlib `logging` levels.
    '''

    NOTSET   = logging.NOTSET
    DEBUG    = logging.DEBUG
    INFO     = logging.INFO
    WARNING  = logging.WARNING
    ERROR    = logging.ERROR
    CRITICAL = logging.CRITICAL

    @staticmethod
    def valid(lvl: Union['Level', int]) -> bool:
        return any(lvl == known for known in Level)

    @staticmethod
    def to_logging(lvl: Optional[Union['Level', int]]) -> int:
        return int(Level.NOTSET if lvl is None else lvl)

    @staticmethod
    def from_logging(lvl: Optional[Union['Level', int]]) -> 'Level':
        return Level.NOTSET if lvl is None else Level(lvl)

    @staticmethod
    def most_verbose(lvl_a: Union['Level', int, None],
                     lvl_b: Union['Level', int, None],
                     ignore_notset: bool = True) -> 'Level':
        '''
        The more verbose (lower) of two levels. None counts as NOTSET.

        With `ignore_notset`, NOTSET loses to any real level; otherwise it is
        the most verbose of all.
        '''
        lvl_a = Level.to_logging(lvl_a)
        lvl_b = Level.to_logging(lvl_b)
        if ignore_notset and Level.NOTSET in (lvl_a, lvl_b):
            return Level.from_logging(max(lvl_a, lvl_b))
        return Level.from_logging(min(lvl_a, lvl_b))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"

    __repr__ = __str__


DEFAULT_LEVEL = Level.WARNING
'''
A library should stay quiet unless something needs attention.
'''


# -----------------------------------------------------------------------------
# Variables
# -----------------------------------------------------------------------------

logger: Optional[logging.Logger] = None
'''Our logger, once `init()` has run.'''

_handlers: List[logging.Handler] = []

_unit_test_callback: Optional[Callable[[Level, str], bool]] = None


# -----------------------------------------------------------------------------
# Initialization
# -----------------------------------------------------------------------------

class BestTimeFmt(logging.Formatter):
    '''
    Formatter whose timestamps include milliseconds and the UTC offset.
    '''

    converter = datetime.datetime.fromtimestamp

    def formatTime(self,
                   record: logging.LogRecord,
                   fmt_date: Optional[str] = None) -> str:
        stamp = self.converter(record.created)
        msecs = math.floor(record.msecs)
        if fmt_date:
            return stamp.strftime(fmt_date).format(msecs=msecs)
        return f"{stamp.strftime('%Y-%m-%d %H:%M:%S')}.{msecs:03d}"


def init(level:        Union[Level, int, None]   = DEFAULT_LEVEL,
         handler:      Optional[logging.Handler] = None,
         reinitialize: bool                      = False) -> None:
    '''
    Set up our logger with `handler` (default: a stderr stream handler).

    Does nothing if already initialized, unless `reinitialize`.
    '''
    global logger
    if logger is not None and not reinitialize:
        return

    logger = logging.getLogger(ROOT_NAME)
    logger.setLevel(Level.to_logging(level))

    for each in _handlers:
        logger.removeHandler(each)
    _handlers.clear()

    if handler is None:
        # Leave handler at NOTSET; the logger's level decides.
        handler = logging.StreamHandler()
        handler.setFormatter(BestTimeFmt(fmt=_FMT_LINE,
                                         datefmt=_FMT_DATETIME,
                                         style='{'))
    _handlers.append(handler)
    logger.addHandler(handler)


def get_logger(*names:        str,
               min_log_level: Union[Level, int, None] = None
               ) -> logging.Logger:
    '''
    Get a stdlib logger named by joining the truthy `names` with '.'.

    If `min_log_level` is given, the logger's level is lowered to it when it
    is currently less verbose.

      get_logger(__name__, self.__class__.__name__)
    '''
    named = logging.getLogger('.'.join(each for each in names if each))
    if min_log_level:
        current = get_level(named)
        if Level.to_logging(min_log_level) != current:
            set_level(Level.most_verbose(current, min_log_level), named)
    return named


def _logger(stats_logger: Optional[logging.Logger] = None
            ) -> logging.Logger:
    return stats_logger or logger


# -----------------------------------------------------------------------------
# Levels
# -----------------------------------------------------------------------------

def get_level(stats_logger: Optional[logging.Logger] = None) -> Level:
    return Level(_logger(stats_logger).level)


def set_level(level:        Union[Level, int, None]  = DEFAULT_LEVEL,
              stats_logger: Optional[logging.Logger] = None) -> None:
    if not Level.valid(level):
        error("Invalid log level {}. Ignoring.", level)
        return
    _logger(stats_logger).setLevel(Level.to_logging(level))


def will_output(level:        Union[Level, int],
                stats_logger: Optional[logging.Logger] = None) -> bool:
    '''
    True if a log at `level` would get past the logger's effective level.
    '''
    return int(level) >= _logger(stats_logger).getEffectiveLevel()


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------

def brace_message(fmt_msg:  str,
                  *args:    Any,
                  context:  Optional[Mapping[str, Any]] = None,
                  **kwargs: Any) -> str:
    '''
    Build the output string for a log call.

    `fmt_msg.format(*args, **kwargs)` is applied only if there are args or
    kwargs, so messages with literal braces are safe without them. A bad
    format is reported in the output instead of raised.

    `context`, if given, is appended pretty-printed:
      <message>
      context:
          <indented context>
    '''
    if args or kwargs:
        try:
            message = fmt_msg.format(*args, **kwargs)
        except (IndexError, KeyError) as err:
            message = (f"FORMAT ERROR FOR: {fmt_msg}.format(): "
                       f"args: {args}, kwargs: {kwargs} -> {err}")
    else:
        message = fmt_msg

    if context:
        message += '\ncontext:\n' + pretty.indented(
            context, indent_amount=_CONTEXT_INDENT)

    return _FMT_MESSAGE.format(message=message)


def pop_log_kwargs(kwargs: MutableMapping[str, Any]) -> Dict[str, Any]:
    '''
    Remove the kwargs meant for the stdlib logger from `kwargs` (the rest are
    for the message formatter) and return them.
    '''
    if kwargs and 'stacklevel' in kwargs:
        return {'stacklevel': kwargs.pop('stacklevel')}
    return {}


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

def _output(level:        Level,
            msg:          str,
            args:         Any,
            stats_logger: Optional[logging.Logger],
            context:      Optional[Mapping[str, Any]],
            kwargs:       MutableMapping[str, Any]) -> None:
    log_kwargs = pop_log_kwargs(kwargs)
    output = brace_message(msg, *args, context=context, **kwargs)
    if ut_call(level, output):
        return

    # One frame for us, one for the public function that called us.
    log_kwargs['stacklevel'] = log_kwargs.get('stacklevel', 1) + 2
    _logger(stats_logger).log(int(level), output, **log_kwargs)


def debug(msg:          str,
          *args:        Any,
          stats_logger: Optional[logging.Logger]    = None,
          context:      Optional[Mapping[str, Any]] = None,
          **kwargs:     Any) -> None:
    _output(Level.DEBUG, msg, args, stats_logger, context, kwargs)


def info(msg:          str,
         *args:        Any,
         stats_logger: Optional[logging.Logger]    = None,
         context:      Optional[Mapping[str, Any]] = None,
         **kwargs:     Any) -> None:
    _output(Level.INFO, msg, args, stats_logger, context, kwargs)


def warning(msg:          str,
            *args:        Any,
            stats_logger: Optional[logging.Logger]    = None,
            context:      Optional[Mapping[str, Any]] = None,
            **kwargs:     Any) -> None:
    _output(Level.WARNING, msg, args, stats_logger, context, kwargs)


def error(msg:          str,
          *args:        Any,
          stats_logger: Optional[logging.Logger]    = None,
          context:      Optional[Mapping[str, Any]] = None,
          **kwargs:     Any) -> None:
    _output(Level.ERROR, msg, args, stats_logger, context, kwargs)


def critical(msg:          str,
             *args:        Any,
             stats_logger: Optional[logging.Logger]    = None,
             context:      Optional[Mapping[str, Any]] = None,
             **kwargs:     Any) -> None:
    _output(Level.CRITICAL, msg, args, stats_logger, context, kwargs)


def at_level(level:        Level,
             msg:          str,
             *args:        Any,
             stats_logger: Optional[logging.Logger]    = None,
             context:      Optional[Mapping[str, Any]] = None,
             **kwargs:     Any) -> None:
    '''
    Log at a level chosen at runtime. NOTSET (or anything else that isn't a
    real level) is a ValueError.
    '''
    if level == Level.NOTSET or not Level.valid(level):
        raise exception(ValueError,
                        "Cannot log at level {}.",
                        level)
    _output(Level(level), msg, args, stats_logger, context, kwargs)


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

def _except_msg(message:      Optional[str],
                error_type:   Type[Exception],
                error_string: Optional[str],
                *args:        Any,
                context:      Optional[Mapping[str, Any]] = None,
                **kwargs:     Any) -> str:
    '''
    Message for `exception()`: the formatted `message` (or a stock one) plus
    the exception's type and, for instances, its str.
    '''
    detail = error_type.__name__
    if error_string:
        detail += f", str: {error_string}"

    if not message:
        return f"Exception caught. type: {detail}"

    return (brace_message(message, *args, context=context, **kwargs)
            + f" (Exception type: {detail})")


def exception(err_or_class: Union[Exception, Type[Exception]],
              msg:          Optional[str],
              *args:        Any,
              context:      Optional[Mapping[str, Any]] = None,
              stats_logger: Optional[logging.Logger]    = None,
              **kwargs:     Any) -> Exception:
    '''
    Log an error at ERROR level and return the exception, so:

      raise log.exception(DeriveError,
                          "'{}' is an untagged union.",
                          name)

    An exception class is instantiated with the log message. An exception
    instance is returned as-is.
    '''
    is_instance = isinstance(err_or_class, Exception)
    error_type = type(err_or_class) if is_instance else err_or_class

    log_kwargs = pop_log_kwargs(kwargs)
    log_message = _except_msg(msg,
                              error_type,
                              str(err_or_class) if is_instance else None,
                              *args,
                              context=context,
                              **kwargs)

    if not ut_call(Level.ERROR, log_message):
        _logger(stats_logger).error(log_message, **log_kwargs)

    if is_instance:
        return err_or_class
    return error_type(log_message)


# -----------------------------------------------------------------------------
# Level Context Manager
# -----------------------------------------------------------------------------

class LoggingManager:
    '''
    Temporarily change our log level, e.g.:

      with log.LoggingManager.full_blast():
          something_weird_happening()
    '''

    def __init__(self, level: Level, no_op: bool = False) -> None:
        self._desired = level
        self._original = None
        self._no_op = no_op

    def __enter__(self) -> 'LoggingManager':
        if not self._no_op:
            self._original = get_level()
            set_level(self._desired)
        return self

    def __exit__(self,
                 type:      Optional[Type[BaseException]] = None,
                 value:     Optional[BaseException]       = None,
                 traceback: Optional[TracebackType]       = None) -> bool:
        if not self._no_op:
            set_level(self._original)
        return False

    @staticmethod
    def full_blast() -> 'LoggingManager':
        '''Everything: DEBUG.'''
        return LoggingManager(Level.DEBUG)

    @staticmethod
    def disabled() -> 'LoggingManager':
        '''Only CRITICAL.'''
        return LoggingManager(Level.CRITICAL)

    @staticmethod
    def ignored() -> 'LoggingManager':
        '''Leaves the level alone.'''
        return LoggingManager(Level.CRITICAL, no_op=True)

    @staticmethod
    def on_or_off(enabled: bool) -> 'LoggingManager':
        return (LoggingManager.full_blast()
                if enabled else
                LoggingManager.ignored())


# -----------------------------------------------------------------------------
# Unit Testing
# -----------------------------------------------------------------------------

def ut_call(level: Level, output: str) -> bool:
    '''
    Hand the log to the unit-test callback, if there is one.

    Returns True if the callback ate it (and it should not be logged).
    '''
    if not callable(_unit_test_callback):
        return False
    return _unit_test_callback(level, output)


def ut_set_up(callback: Optional[Callable[[Level, str], bool]]) -> None:
    '''
    Send every log call's (level, output) to `callback`, regardless of the
    logger's level. The callback returns True to swallow the log, False to
    let it through to the logger as well.
    '''
    global _unit_test_callback
    _unit_test_callback = callback


def ut_tear_down() -> None:
    global _unit_test_callback
    _unit_test_callback = None


# -----------------------------------------------------------------------------
# Module Setup
# -----------------------------------------------------------------------------

init()
