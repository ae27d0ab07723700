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

r"""Parses one chord symbol and prints how it was resolved.

Usage:
chord_symbol_info --chord="Cm7b5"
chord_symbol_info --chord="Gsus4add9/D" --trace
"""

import sys

from absl import app
from absl import flags
from absl import logging

from aurachord import engine as engine_lib
from aurachord import errors

FLAGS = flags.FLAGS

flags.DEFINE_string('chord', None, 'Chord symbol figure to parse.')
flags.DEFINE_boolean(
    'trace', False,
    'If true, log every matched token and applied operation.')


def describe(result):
  """Returns the lines printed for a `ChordResult`."""
  lines = [
      'Input Chord: %s' % result.figure,
      'Root: %s (pitch class %d)' % (result.root, result.root_pitch_class),
  ]
  if result.bass is not None:
    lines.append('Bass: %s' % result.bass)
  lines.append('Modifiers: %s' % (', '.join(result.modifiers) or '(none)'))
  lines.append('Operations:')
  for applied in result.operations:
    operation = applied.operation
    lines.append('  %-6s %-8s %-10s %3d' % (applied.alias,
                                            operation.type.value,
                                            operation.role.value,
                                            operation.value))
  lines.append('Intervals:')
  for (role, value), name in zip(result.intervals.items(),
                                 result.interval_names):
    lines.append('  %-10s %3d  %s' % (role.value, value, name))
  lines.append('Semitones: %s' % result.formatted)
  lines.append('Pitch classes: %s' % ', '.join(
      str(pitch_class) for pitch_class in result.pitch_classes))
  return lines


def main(argv):
  chord = FLAGS.chord
  if chord is None and len(argv) > 1:
    chord = argv[1]
  if not chord:
    logging.fatal('--chord required')
    return

  config_name = 'trace' if FLAGS.trace else 'default'
  engine = engine_lib.ChordSymbolEngine(engine_lib.default_configs[config_name])
  try:
    result = engine.parse(chord)
  except errors.ChordSymbolException as e:
    logging.error('Error parsing chord: %s', e)
    sys.exit(1)

  print('\n'.join(describe(result)))


def console_entry_point():
  app.run(main)


if __name__ == '__main__':
  console_entry_point()
