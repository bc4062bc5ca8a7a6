# coding: utf-8

'''
ZestBase: the unittest.TestCase every Immediate Stats test derives from.

Each test starts with an empty derive cache, the default configuration (or
`self.config`), and no log capture.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, List, Tuple

import sys
import unittest


from immediate_stats.logger      import log
from immediate_stats.derive      import clear_cache
from immediate_stats.data.config import (Configuration,
                                         set_configuration,
                                         reset_configuration)


# -----------------------------------------------------------------------------
# Base Class
# -----------------------------------------------------------------------------

class ZestBase(unittest.TestCase):
    '''
    Subclasses override `pre_set_up()`, `set_up()` and `tear_down()` instead
    of the unittest `setUp()`/`tearDown()`.
    '''

    # -------------------------------------------------------------------------
    # Set-Up
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Instance variables, with type hints and docstrs. First thing in
        `setUp()`.
        '''
        # ------------------------------
        # Debugging
        # ------------------------------

        self._ut_is_verbose = ('-v' in sys.argv) or ('--verbose' in sys.argv)
        '''Tests run with -v: captured logs are also let through.'''

        self.debugging: bool = False
        '''Pass to `log.LoggingManager.on_or_off()` when debugging a test.'''

        # ------------------------------
        # Logging
        # ------------------------------

        self.logs: List[Tuple[log.Level, str]] = []
        '''(level, output) of each log while `capture_logs(True)`.'''

        # ------------------------------
        # Configuration
        # ------------------------------

        self.config: Optional[Configuration] = None
        '''
        If class uses a special config, set it in `pre_set_up()` and it will
        be made the current configuration for the test.
        '''

    def pre_set_up(self) -> None:
        '''
        Called in `self.setUp()` after `self._define_vars()` and before
        anything happens.

        Use it to do any prep-work needed (like creating a special config).
        '''
        ...

    def set_up(self) -> None:
        '''
        Use this!

        Called at the end of self.setUp(), when instance vars are defined and
        global state is reset.
        '''
        ...

    def setUp(self) -> None:
        '''
        unittest.TestCase setUp function. Sub-classes should use `set_up()` for
        their test set-up.
        '''
        self._define_vars()
        self.pre_set_up()

        # ---
        # Our Set-Up.
        # ---
        clear_cache()
        reset_configuration()
        if self.config is not None:
            set_configuration(self.config)

        # ---
        # Our Unit Test's Specific Set-Up.
        # ---
        self.set_up()

    # -------------------------------------------------------------------------
    # Tear-Down
    # -------------------------------------------------------------------------

    def tear_down(self) -> None:
        '''
        Use this!

        Called at the beginning of self.tearDown().
        '''
        ...

    def tearDown(self) -> None:
        '''
        unittest.TestCase tearDown function.

        Sub-classes should use `tear_down()` for their test tear-down. This
        calls tear_down() before any of the base class tear-down happens.
        '''
        try:
            self.tear_down()
        finally:
            self._tear_down_base()

    def _tear_down_base(self) -> None:
        '''
        Do all the base class tear-down.
        '''
        self._ut_is_verbose = False
        self.debugging      = False
        self.logs           = []
        self.config         = None

        try:
            log.ut_tear_down()
        finally:
            clear_cache()
            reset_configuration()

    # -------------------------------------------------------------------------
    # Log Capture
    # -------------------------------------------------------------------------

    def clear_logs(self) -> None:
        '''
        Drop all captured logs from `self.logs` list.
        '''
        self.logs.clear()

    def capture_logs(self, enabled: bool) -> None:
        '''
        Divert logs from being output to being received by
        self._receive_log() instead.
        '''
        if enabled:
            log.ut_set_up(self._receive_log)
        else:
            log.ut_tear_down()

    def _receive_log(self,
                     level: log.Level,
                     output: str) -> bool:
        '''
        Logs will come to this callback when self.capture_logs(True) is
        in effect.

        They get appended to self.logs as (level, log output str) tuples.
        '''
        self.logs.append((level, output))

        # Eat the logs and don't let them into the output...
        # ...unless verbose tests, then let it go through.
        return not self._ut_is_verbose

    def logged(self,
               level: Optional[log.Level] = None,
               substring: str = '') -> List[str]:
        '''
        Captured log lines at `level` (or any level, if None) containing
        `substring`.
        '''
        return [output for lvl, output in self.logs
                if (level is None or lvl == level) and substring in output]

    def assert_logged(self,
                      level: log.Level,
                      substring: str,
                      count: Optional[int] = None) -> None:
        '''
        Assert something was captured at `level` containing `substring`.
        If `count` is given, assert exactly that many such logs.
        '''
        found = self.logged(level, substring)
        if count is None:
            self.assertTrue(
                found,
                f"No {level} log containing {substring!r}. Logs: {self.logs}")
        else:
            self.assertEqual(
                len(found), count,
                f"Expected {count} {level} log(s) containing {substring!r}. "
                f"Logs: {self.logs}")

    def assert_not_logged(self,
                          level: Optional[log.Level] = None,
                          substring: str = '') -> None:
        found = self.logged(level, substring)
        self.assertFalse(found,
                         f"Unexpected logs: {found}")
