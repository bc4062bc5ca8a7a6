# coding: utf-8

'''
Tests for config.py (Configuration class and the current configuration).
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import pathlib
import tempfile

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.logger          import log
from immediate_stats.base.exceptions import ConfigError

from .config import (EmptyPolicy, Configuration, default_path,
                     configuration, set_configuration, reset_configuration)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Configuration(ZestBase):

    def set_up(self):
        self.capture_logs(True)
        self.tmp = tempfile.TemporaryDirectory()

    def tear_down(self):
        self.tmp.cleanup()

    def write(self, text):
        path = pathlib.Path(self.tmp.name) / 'config.test.yaml'
        path.write_text(text, encoding='utf-8')
        return path

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def test_default_file(self):
        self.assertIsNotNone(default_path())
        self.assertTrue(default_path().exists())

        config = Configuration()
        self.assertEqual(config.path, default_path())
        self.assertEqual(config.stat_type_token, 'Stat')
        self.assertIs(config.empty_container, EmptyPolicy.WARN)
        self.assertIs(config.redundant_stat_warning, True)

    def test_file(self):
        path = self.write('derive:\n'
                          '  stat-type-token: Attr\n'
                          '  empty-container: error\n'
                          '  redundant-stat-warning: false\n')
        config = Configuration(path)

        self.assertEqual(config.path, path)
        self.assertEqual(config.stat_type_token, 'Attr')
        self.assertIs(config.empty_container, EmptyPolicy.ERROR)
        self.assertIs(config.redundant_stat_warning, False)

    def test_file_as_str(self):
        path = self.write('derive:\n  empty-container: ignore\n')
        config = Configuration(str(path))
        self.assertIs(config.empty_container, EmptyPolicy.IGNORE)

    def test_empty_file_is_defaults(self):
        config = Configuration(self.write(''))
        self.assertEqual(config.stat_type_token, 'Stat')
        self.assertIs(config.empty_container, EmptyPolicy.WARN)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            Configuration(pathlib.Path(self.tmp.name) / 'nope.yaml')
        self.assert_logged(log.Level.ERROR, 'Could not read')

    def test_bad_yaml(self):
        with self.assertRaises(ConfigError):
            Configuration(self.write('derive: [unclosed\n'))
        self.assert_logged(log.Level.ERROR, 'YAML')

    def test_not_a_mapping(self):
        with self.assertRaises(ConfigError):
            Configuration(self.write('- just\n- a list\n'))
        with self.assertRaises(ConfigError):
            Configuration(data=['derive'])

    # -------------------------------------------------------------------------
    # Data / Defaults
    # -------------------------------------------------------------------------

    def test_data(self):
        config = Configuration(data={})
        self.assertIsNone(config.path)
        self.assertEqual(config.stat_type_token, 'Stat')

    def test_partial_data(self):
        config = Configuration(
            data={'derive': {'redundant-stat-warning': False}})
        self.assertIs(config.redundant_stat_warning, False)
        self.assertEqual(config.stat_type_token, 'Stat')
        self.assertIs(config.empty_container, EmptyPolicy.WARN)

    def test_get(self):
        config = Configuration(data={'derive': {'stat-type-token': 'Attr'},
                                     'extra': {'thing': 1}})
        self.assertEqual(config.get('derive', 'stat-type-token'), 'Attr')
        self.assertEqual(config.get('extra', 'thing'), 1)
        self.assertEqual(config.get('derive', 'empty-container'), 'warn')
        self.assertIsNone(config.get('nothing', 'here'))
        self.assertIsNone(config.get('extra', 'thing', 'deeper'))

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def test_invalid_token(self):
        for bad in ('', 42, ['Stat']):
            with self.subTest(token=bad):
                with self.assertRaises(ConfigError):
                    Configuration(
                        data={'derive': {'stat-type-token': bad}})

    def test_invalid_policy(self):
        with self.assertRaises(ConfigError):
            Configuration(data={'derive': {'empty-container': 'explode'}})
        self.assert_logged(log.Level.ERROR, 'explode')

    def test_invalid_redundant_warning(self):
        with self.assertRaises(ConfigError):
            Configuration(
                data={'derive': {'redundant-stat-warning': 'yes'}})


class Test_CurrentConfiguration(ZestBase):

    def test_default_loaded_once(self):
        first = configuration()
        self.assertIsInstance(first, Configuration)
        self.assertIs(configuration(), first)

    def test_set_and_reset(self):
        config = Configuration(data={'derive': {'stat-type-token': 'Attr'}})
        set_configuration(config)
        self.assertIs(configuration(), config)

        reset_configuration()
        self.assertIsNot(configuration(), config)
        self.assertEqual(configuration().stat_type_token, 'Stat')

    def test_set_not_a_config(self):
        self.capture_logs(True)
        with self.assertRaises(ConfigError):
            set_configuration({'derive': {}})


class Test_ZestConfig(ZestBase):
    '''
    ZestBase makes `self.config` current for the test.
    '''

    def pre_set_up(self):
        self.config = Configuration(data={'derive': {'stat-type-token': 'X'}})

    def test_current(self):
        self.assertIs(configuration(), self.config)
        self.assertEqual(configuration().stat_type_token, 'X')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.data.config.zest_config

if __name__ == '__main__':
    import unittest
    unittest.main()
