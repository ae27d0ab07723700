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

"""Compares chord symbol resolution against independent reference parsers.

Each chord figure is resolved by a `ChordSymbolEngine` and by every reference
parser. The pitch-class sets are compared, since reference parsers disagree
on voicing order and octave placement. Results are collected into
`ComparisonRow`s that can be written to CSV with `write_csv`.

A reference parser is any callable taking a figure and returning an iterable
of integer pitch classes (or pitches); it may raise on figures it does not
understand.
"""

import collections
import csv

from absl import logging

from aurachord import constants
from aurachord import engine as engine_lib
from aurachord import errors
from aurachord import statistics

ComparisonRow = collections.namedtuple(
    'ComparisonRow', ['figure', 'engine', 'references', 'matches'])


def note_seq_pitch_classes(figure):
  """Reference parser backed by `note_seq.chord_symbols_lib`."""
  from note_seq import chord_symbols_lib  # pylint: disable=g-import-not-at-top
  return chord_symbols_lib.chord_symbol_pitches(figure)


def music21_pitch_classes(figure):
  """Reference parser backed by `music21.harmony.ChordSymbol`."""
  from music21 import harmony  # pylint: disable=g-import-not-at-top
  return [pitch.pitchClass for pitch in harmony.ChordSymbol(figure).pitches]


REFERENCE_PARSERS = collections.OrderedDict([
    ('note_seq', note_seq_pitch_classes),
    ('music21', music21_pitch_classes),
])


def format_pitch_classes(pitch_classes):
  """Formats pitch classes as a sorted, deduplicated display string."""
  return constants.INTERVAL_SEPARATOR.join(
      str(pitch_class) for pitch_class in sorted(
          set(pitch % constants.NOTES_PER_OCTAVE for pitch in pitch_classes)))


def _error_text(error):
  return 'error: %s' % error


def compare_chord(figure, engine, reference_parsers):
  """Resolves one figure with the engine and every reference parser.

  Args:
    figure: A chord symbol figure string.
    engine: A `ChordSymbolEngine`.
    reference_parsers: Mapping from reference name to reference parser.

  Returns:
    A `ComparisonRow`. Failed parses are recorded as 'error: ...' strings and
    never count as matches.
  """
  engine_ok = True
  try:
    engine_value = format_pitch_classes(engine.parse(figure).pitch_classes)
  except errors.ChordSymbolException as e:
    engine_ok = False
    engine_value = _error_text(e)

  references = collections.OrderedDict()
  matches = collections.OrderedDict()
  for name, parser in reference_parsers.items():
    try:
      value = format_pitch_classes(parser(figure))
      ok = True
    except Exception as e:  # pylint: disable=broad-except
      value = _error_text(e)
      ok = False
    references[name] = value
    matches[name] = engine_ok and ok and value == engine_value
  return ComparisonRow(figure, engine_value, references, matches)


def compare_chords(figures, engine=None, reference_parsers=None):
  """Compares a list of figures and counts matches per reference parser.

  Args:
    figures: Iterable of chord symbol figure strings.
    engine: A `ChordSymbolEngine`; the default engine if None.
    reference_parsers: Mapping from reference name to reference parser;
        `REFERENCE_PARSERS` if None.

  Returns:
    A tuple (rows, stats) of `ComparisonRow`s in input order and a list of
    `statistics.Counter`s.
  """
  if engine is None:
    engine = engine_lib.get_default_engine()
  if reference_parsers is None:
    reference_parsers = REFERENCE_PARSERS

  total = statistics.Counter('chords')
  engine_errors = statistics.Counter('engine_errors')
  counters = collections.OrderedDict()
  for name in reference_parsers:
    counters[name] = (statistics.Counter('%s_matches' % name),
                      statistics.Counter('%s_mismatches' % name),
                      statistics.Counter('%s_errors' % name))

  rows = []
  for figure in figures:
    row = compare_chord(figure, engine, reference_parsers)
    rows.append(row)
    total.increment()
    if row.engine.startswith('error:'):
      engine_errors.increment()
    for name, (matched, mismatched, failed) in counters.items():
      if row.matches[name]:
        matched.increment()
      elif row.references[name].startswith('error:'):
        failed.increment()
      else:
        mismatched.increment()
        logging.warning('%s disagrees on %s: %s vs %s', name, figure,
                        row.references[name], row.engine)

  stats = [total, engine_errors]
  for counter_triple in counters.values():
    stats.extend(counter_triple)
  return rows, stats


def write_csv(rows, path):
  """Writes comparison rows to a CSV file.

  Args:
    rows: List of `ComparisonRow`s sharing the same reference parsers.
    path: Output file path.
  """
  names = list(rows[0].references) if rows else []
  fieldnames = ['Input Chord', 'Aura']
  for name in names:
    fieldnames.extend([name, '%s match' % name])

  with open(path, 'w', newline='', encoding='utf-8') as f:
    writer = csv.DictWriter(f, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
      record = {'Input Chord': row.figure, 'Aura': row.engine}
      for name in names:
        record[name] = row.references[name]
        record['%s match' % name] = 'yes' if row.matches[name] else 'no'
      writer.writerow(record)
  logging.info('Wrote %d comparison rows to %s', len(rows), path)
