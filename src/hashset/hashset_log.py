"""
hashset logs through its own tiny logger so that importing it never touches
the configuration of the `logging` module of the application using it.

Usage:

    log = get_logger(__name__)
    log.debug("Unable to sort %s elements", 3)

    with configure_logger("hashset", 2, "~/hashset.log"):
        ...

Levels:
0: show only critical/exceptions (default, or `HASHSET_LOG_LEVEL`)
1: show info
2: show debug
"""
import os
import sys
import threading
import traceback
from datetime import datetime
from typing import Dict

from hashset.protocols import ILog

name_to_logger: Dict[str, ILog] = {}

_INITIAL_LOG_LEVEL = 0
try:
    _INITIAL_LOG_LEVEL = int(os.environ.get("HASHSET_LOG_LEVEL", _INITIAL_LOG_LEVEL))
except ValueError:
    pass


class _LogConfig(object):

    __slots__ = ["_lock", "prefix", "log_level", "target", "_stream"]

    def __init__(self):
        self._lock = threading.Lock()
        self.prefix = ""
        self.log_level = _INITIAL_LOG_LEVEL
        # None (stderr), a filename or a stream.
        self.target = None
        self._stream = None

    def set(self, prefix, log_level, target):
        with self._lock:
            if isinstance(self.target, str) and self._stream is not None:
                self._stream.close()
            self.prefix = prefix
            self.log_level = log_level
            self.target = target
            self._stream = None

    def _get_stream(self):
        # Must be called with the lock held.
        if self._stream is None:
            if self.target is None:
                self._stream = sys.stderr
            elif isinstance(self.target, str):
                self._stream = open(self.target, "a")
            else:
                self._stream = self.target
        return self._stream

    def write(self, logger_name, levelname, message, show_stacktrace):
        msg = "%s: %s - %s - %s\n%s\n\n" % (
            self.prefix,
            datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            levelname,
            logger_name,
            message,
        )
        try:
            with self._lock:
                stream = self._get_stream()
                stream.write(msg)
                if show_stacktrace:
                    traceback.print_exc(file=stream)
                stream.flush()
        except Exception:
            pass  # Never fail when logging.


_log_config = _LogConfig()


class _Logger(object):
    def __init__(self, name):
        self.name = name

    def critical(self, msg="", *args):
        self._report(0, "CRITICAL", False, msg, args)

    def exception(self, msg="", *args):
        self._report(0, "EXCEPTION", True, msg, args)

    def info(self, msg="", *args):
        self._report(1, "INFO", False, msg, args)

    def debug(self, msg="", *args):
        self._report(2, "DEBUG", False, msg, args)

    warn = warning = info
    error = exception

    def _report(self, level, levelname, show_stacktrace, msg, args):
        if _log_config.log_level < level:
            return
        if args:
            try:
                msg = msg % args
            except Exception:
                msg = "%s - %s" % (msg, args)
        _log_config.write(self.name, levelname, msg, show_stacktrace)


def get_logger(name: str) -> ILog:
    """
    Use as:
        log = get_logger(__name__)
    """
    try:
        return name_to_logger[name]
    except KeyError:
        logger = name_to_logger[name] = _Logger(name)
        return logger


class _RestoreCtxManager(object):
    def __init__(self, config_to_restore):
        self._config_to_restore = config_to_restore

    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc_val, exc_tb):
        _log_config.set(*self._config_to_restore)


def configure_logger(prefix, log_level, log_file):
    """
    :param log_file:
        - If None or an empty string log to stderr.
        - If a string, the path of the file to append to (its directory is
          created if needed).
        - Otherwise, a stream with a `write` method.

    :note: If used as a context manager it'll revert to the previous
           configuration on `__exit__`.
    """
    prev_config = (_log_config.prefix, _log_config.log_level, _log_config.target)

    if log_file and isinstance(log_file, str):
        log_file = os.path.realpath(os.path.expanduser(log_file))
        try:
            os.makedirs(os.path.dirname(log_file), exist_ok=True)
        except OSError:
            # Don't fail when trying to setup logging, just show the exception.
            traceback.print_exc()
            log_file = None

    _log_config.set(prefix, log_level, log_file or None)
    return _RestoreCtxManager(prev_config)
