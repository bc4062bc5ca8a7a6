# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/classify.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.data.config    import Configuration

from .const    import STAT, STAT_IGNORE, DiagnosticCode
from .shape    import FieldShape
from .classify import classify, type_is_stat


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Classify(ZestBase):

    def pre_set_up(self):
        self.config = Configuration(data={})

    def codes(self, result):
        return [each.code for each in result.diagnostics]

    def test_type_is_stat(self):
        self.assertTrue(type_is_stat('Stat', 'Stat'))
        self.assertTrue(type_is_stat('IStat64', 'Stat'))
        self.assertTrue(type_is_stat('typing.Optional[Stat]', 'Stat'))
        self.assertFalse(type_is_stat('stat', 'Stat'))
        self.assertFalse(type_is_stat('int', 'Stat'))

    def test_stat_type(self):
        result = classify('Hero', FieldShape('health', 0, 'Stat'),
                          self.config)
        self.assertTrue(result.is_stat)
        self.assertEqual(result.diagnostics, [])

    def test_name_heuristic_is_loose(self):
        # Substring match, so this counts even though it isn't a Stat.
        result = classify('Hero', FieldShape('log', 0, 'StatisticsTracker'),
                          self.config)
        self.assertTrue(result.is_stat)

    def test_other_type(self):
        result = classify('Hero', FieldShape('name', 0, 'str'), self.config)
        self.assertFalse(result.is_stat)
        self.assertEqual(result.diagnostics, [])

    def test_include(self):
        result = classify('Hero', FieldShape('pool', 0, 'Pool', [STAT]),
                          self.config)
        self.assertTrue(result.is_stat)
        self.assertEqual(result.diagnostics, [])

    def test_exclude(self):
        result = classify('Hero',
                          FieldShape('health', 0, 'Stat', [STAT_IGNORE]),
                          self.config)
        self.assertFalse(result.is_stat)
        self.assertEqual(result.diagnostics, [])

    def test_redundant(self):
        result = classify('Hero', FieldShape('health', 0, 'Stat', [STAT]),
                          self.config)
        self.assertTrue(result.is_stat)
        self.assertEqual(self.codes(result), [DiagnosticCode.REDUNDANT])
        self.assertEqual(result.diagnostics[0].location, 'Hero.health')
        self.assertIn('automatically included',
                      result.diagnostics[0].message)

    def test_redundant_disabled(self):
        config = Configuration(
            data={'derive': {'redundant-stat-warning': False}})
        result = classify('Hero', FieldShape('health', 0, 'Stat', [STAT]),
                          config)
        self.assertTrue(result.is_stat)
        self.assertEqual(result.diagnostics, [])

    def test_conflict_exclude_wins(self):
        result = classify('Hero',
                          FieldShape('pool', 0, 'Pool', [STAT, STAT_IGNORE]),
                          self.config)
        self.assertFalse(result.is_stat)
        self.assertEqual(self.codes(result), [DiagnosticCode.CONFLICT])
        self.assertIn('overruled', result.diagnostics[0].message)

    def test_conflict_on_stat_type(self):
        result = classify('Hero',
                          FieldShape('health', 0, 'Stat',
                                     [STAT, STAT_IGNORE]),
                          self.config)
        self.assertFalse(result.is_stat)
        self.assertEqual(self.codes(result),
                         [DiagnosticCode.REDUNDANT, DiagnosticCode.CONFLICT])

    def test_locations(self):
        result = classify('Status', FieldShape('speed', 0, 'Pool',
                                               [STAT, STAT_IGNORE]),
                          self.config, variant='Buffed')
        self.assertEqual(result.diagnostics[0].location,
                         'Status.Buffed.speed')

        result = classify('Pair', FieldShape(None, 1, 'Pool',
                                             [STAT, STAT_IGNORE]),
                          self.config)
        self.assertEqual(result.diagnostics[0].location, 'Pair.1')

    def test_custom_token(self):
        config = Configuration(data={'derive': {'stat-type-token': 'Attr'}})
        self.assertTrue(
            classify('Hero', FieldShape('str', 0, 'Attribute'),
                     config).is_stat)
        self.assertFalse(
            classify('Hero', FieldShape('health', 0, 'Stat'),
                     config).is_stat)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_classify

if __name__ == '__main__':
    import unittest
    unittest.main()
