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

r"""Compares chord symbol resolution with reference chord parsers.

Resolves each chord with aurachord and with the reference parsers (note_seq
and music21), logs per-parser match counts and optionally writes a CSV.

Usage:
compare_chord_parsers \
  --output_csv="/tmp/chord-parsing-results.csv" \
  --reference_parsers="note_seq,music21"
compare_chord_parsers --chords="C13#11,Bb7#11" --include_invalid
"""

import os

from absl import app
from absl import flags
from absl import logging

from aurachord import chord_corpus
from aurachord import comparison
from aurachord import statistics

FLAGS = flags.FLAGS

flags.DEFINE_list(
    'chords', None,
    'Comma-separated chord figures to compare. Defaults to the built-in '
    'corpus of valid chords.')
flags.DEFINE_boolean(
    'include_invalid', False,
    'If true, also compare the built-in corpus of invalid chords.')
flags.DEFINE_list(
    'reference_parsers', list(comparison.REFERENCE_PARSERS),
    'Reference parsers to compare against.')
flags.DEFINE_string('output_csv', None, 'Path of the CSV file to write.')


def main(unused_argv):
  figures = list(FLAGS.chords or chord_corpus.VALID_CHORDS)
  if FLAGS.include_invalid:
    figures.extend(figure for figure, _ in chord_corpus.INVALID_CHORDS)

  unknown = set(FLAGS.reference_parsers) - set(comparison.REFERENCE_PARSERS)
  if unknown:
    logging.fatal('Unknown reference parsers: %s', ', '.join(sorted(unknown)))
    return
  reference_parsers = dict(
      (name, comparison.REFERENCE_PARSERS[name])
      for name in FLAGS.reference_parsers)

  rows, stats = comparison.compare_chords(
      figures, reference_parsers=reference_parsers)
  for row in rows:
    print('%-12s %-24s %s' % (
        row.figure, row.engine,
        '  '.join('%s=%s%s' % (name, value, '' if row.matches[name] else ' *')
                  for name, value in row.references.items())))
  statistics.log_statistics_list(stats)

  if FLAGS.output_csv:
    comparison.write_csv(rows, os.path.expanduser(FLAGS.output_csv))


def console_entry_point():
  app.run(main)


if __name__ == '__main__':
  console_entry_point()
