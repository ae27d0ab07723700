# Copyright 2026 The Aurachord Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for comparison."""

import collections
import csv
import os

from absl.testing import absltest

from aurachord import comparison
from aurachord import engine


def _broken_parser(figure):
  raise ValueError('cannot parse %s' % figure)


class ComparisonTest(absltest.TestCase):

  def setUp(self):
    self.reference_parsers = collections.OrderedDict([
        ('same', engine.chord_symbol_pitches),
        ('wrong', lambda figure: [0, 4, 7]),
        ('broken', _broken_parser),
    ])

  def testFormatPitchClasses(self):
    self.assertEqual('0·4·7', comparison.format_pitch_classes([7, 0, 4]))
    self.assertEqual('0·4·7',
                     comparison.format_pitch_classes([60, 64, 67, 72]))
    self.assertEqual('', comparison.format_pitch_classes([]))

  def testCompareChord(self):
    row = comparison.compare_chord(
        'Cm', engine.get_default_engine(), self.reference_parsers)
    self.assertEqual('Cm', row.figure)
    self.assertEqual('0·3·7', row.engine)
    self.assertEqual('0·3·7', row.references['same'])
    self.assertEqual('0·4·7', row.references['wrong'])
    self.assertTrue(row.references['broken'].startswith('error:'))
    self.assertEqual({'same': True, 'wrong': False, 'broken': False},
                     dict(row.matches))

  def testEngineErrorNeverMatches(self):
    row = comparison.compare_chord(
        'Cmajm', engine.get_default_engine(),
        {'error_text': lambda figure: [0]})
    self.assertTrue(row.engine.startswith('error:'))
    self.assertFalse(row.matches['error_text'])

  def testCompareChords(self):
    rows, stats = comparison.compare_chords(
        ['C', 'Cm', 'Cmajm'], reference_parsers=self.reference_parsers)
    self.assertEqual(['C', 'Cm', 'Cmajm'], [row.figure for row in rows])
    self.assertEqual(
        ['chords: 3', 'engine_errors: 1',
         'same_matches: 2', 'same_mismatches: 0', 'same_errors: 1',
         'wrong_matches: 1', 'wrong_mismatches: 2', 'wrong_errors: 0',
         'broken_matches: 0', 'broken_mismatches: 0', 'broken_errors: 3'],
        [str(stat) for stat in stats])

  def testWriteCsv(self):
    rows, _ = comparison.compare_chords(
        ['C', 'Cmajm'], reference_parsers=self.reference_parsers)
    path = os.path.join(self.create_tempdir().full_path, 'results.csv')
    comparison.write_csv(rows, path)

    with open(path, newline='', encoding='utf-8') as f:
      reader = csv.DictReader(f)
      self.assertEqual(
          ['Input Chord', 'Aura', 'same', 'same match', 'wrong',
           'wrong match', 'broken', 'broken match'],
          reader.fieldnames)
      records = list(reader)
    self.assertLen(records, 2)
    self.assertEqual('C', records[0]['Input Chord'])
    self.assertEqual('0·4·7', records[0]['Aura'])
    self.assertEqual('yes', records[0]['same match'])
    self.assertEqual('no', records[0]['broken match'])
    self.assertTrue(records[1]['Aura'].startswith('error:'))
    self.assertEqual('no', records[1]['wrong match'])


if __name__ == '__main__':
  absltest.main()
