# coding: utf-8

'''
Tests for log.py.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.base.exceptions import DeriveError

from . import log
from . import pretty


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Log(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_brace_message(self):
        self.assertEqual(log.brace_message('hello'), ': hello')
        self.assertEqual(log.brace_message('{} + {}', 1, 2), ': 1 + 2')
        self.assertEqual(log.brace_message('{name}', name='Jeff'), ': Jeff')

    def test_brace_message_bad_format(self):
        output = log.brace_message('{} {}', 1)
        self.assertIn('FORMAT ERROR', output)

    def test_brace_message_context(self):
        output = log.brace_message('hello', context={'key': 'value'})
        self.assertIn('\ncontext:\n', output)
        self.assertIn("'key': 'value'", output)

    def test_levels_captured(self):
        log.debug('a {}', 1)
        log.info('b {}', 2)
        log.warning('c {}', 3)
        log.error('d {}', 4)
        log.critical('e {}', 5)

        self.assertEqual(self.logs, [(log.Level.DEBUG,    ': a 1'),
                                     (log.Level.INFO,     ': b 2'),
                                     (log.Level.WARNING,  ': c 3'),
                                     (log.Level.ERROR,    ': d 4'),
                                     (log.Level.CRITICAL, ': e 5')])

    def test_at_level(self):
        log.at_level(log.Level.WARNING, 'careful: {}', 'stairs')
        self.assert_logged(log.Level.WARNING, 'careful: stairs', count=1)

        with self.assertRaises(ValueError):
            log.at_level(log.Level.NOTSET, 'nope')

    def test_exception_from_class(self):
        error = log.exception(DeriveError, "Bad {}.", 'thing')
        self.assertIsInstance(error, DeriveError)
        self.assertIn('Bad thing.', error.message)
        self.assertIn('DeriveError', error.message)
        self.assert_logged(log.Level.ERROR, 'Bad thing.', count=1)

    def test_exception_python_class(self):
        error = log.exception(TypeError, "Not a {}.", 'type')
        self.assertIsInstance(error, TypeError)
        self.assertIn('Not a type.', str(error))

    def test_exception_from_instance(self):
        original = ValueError('boom')
        error = log.exception(original, None)
        self.assertIs(error, original)
        self.assert_logged(log.Level.ERROR, 'boom')

    def test_capture_off(self):
        self.capture_logs(False)
        with log.LoggingManager.disabled():
            log.warning('not captured')
        self.assertEqual(self.logs, [])

    def test_level_helpers(self):
        self.assertEqual(log.Level.most_verbose(log.Level.DEBUG,
                                                log.Level.ERROR),
                         log.Level.DEBUG)
        self.assertEqual(log.Level.most_verbose(log.Level.NOTSET,
                                                log.Level.ERROR),
                         log.Level.ERROR)
        self.assertTrue(log.Level.valid(log.Level.INFO))
        self.assertFalse(log.Level.valid(3))
        self.assertEqual(str(log.Level.INFO), 'Level.INFO')

    def test_logging_manager_restores(self):
        original = log.get_level()
        with log.LoggingManager.full_blast():
            self.assertEqual(log.get_level(), log.Level.DEBUG)
            self.assertTrue(log.will_output(log.Level.DEBUG))
        self.assertEqual(log.get_level(), original)

        with log.LoggingManager.on_or_off(False):
            self.assertEqual(log.get_level(), original)

    def test_will_output(self):
        with log.LoggingManager.disabled():
            self.assertFalse(log.will_output(log.Level.WARNING))
            self.assertTrue(log.will_output(log.Level.CRITICAL))

    def test_get_logger(self):
        named = log.get_logger('immediate_stats', '', 'zest')
        self.assertEqual(named.name, 'immediate_stats.zest')

        named = log.get_logger('immediate_stats', 'zest', 'verbose',
                               min_log_level=log.Level.DEBUG)
        self.assertEqual(log.get_level(named), log.Level.DEBUG)

    def test_set_level_invalid(self):
        original = log.get_level()
        log.set_level(3)
        self.assertEqual(log.get_level(), original)
        self.assert_logged(log.Level.ERROR, 'Invalid log level')


class Test_Pretty(ZestBase):

    def test_indented(self):
        self.assertEqual(pretty.indented('hi', indent_amount=4), '    hi')
        self.assertEqual(pretty.indented({'b': 1, 'a': 2}),
                         "  {'a': 2, 'b': 1}")


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.logger.zest_log

if __name__ == '__main__':
    import unittest
    unittest.main()
