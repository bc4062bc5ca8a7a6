# coding: utf-8

'''
Tests for exceptions.py.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit import ZestBase

from .exceptions import (ImmediateStatsError, DeriveError, ConfigError,
                         is_immediate_stats)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Exceptions(ZestBase):

    def test_hierarchy(self):
        self.assertTrue(issubclass(DeriveError, ImmediateStatsError))
        self.assertTrue(issubclass(ConfigError, ImmediateStatsError))

    def test_is_immediate_stats(self):
        self.assertTrue(is_immediate_stats(DeriveError))
        self.assertTrue(is_immediate_stats(ConfigError('bad')))
        self.assertFalse(is_immediate_stats(ValueError))
        self.assertFalse(is_immediate_stats(ValueError('nope')))

    def test_str(self):
        self.assertEqual(str(DeriveError('no fields')), 'no fields')

        cause = KeyError('derive')
        error = ConfigError('missing key', cause)
        self.assertIs(error.cause, cause)
        self.assertEqual(str(error), "missing key from 'derive'")

    def test_data(self):
        error = DeriveError('bad type', type_name='Hero')
        self.assertEqual(error.data, {'type_name': 'Hero'})
        self.assertIn('Additional Error Data', str(error))
        self.assertIn("'type_name': 'Hero'", str(error))


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.base.zest_exceptions

if __name__ == '__main__':
    import unittest
    unittest.main()
