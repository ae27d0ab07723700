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

"""Converts role -> semitone maps into interval names and display strings."""

import collections

from aurachord import constants
from aurachord import errors
from aurachord import modifier_rules

FormattedIntervals = collections.namedtuple(
    'FormattedIntervals', ['names', 'semitones', 'display'])


def interval_name(semitones):
  """Returns the short interval name for a semitone distance from the root.

  Args:
    semitones: Integer semitone offset, possibly compound (e.g. 14).

  Returns:
    The name of the interval reduced to one octave, e.g. 'M2' for 14.

  Raises:
    UnknownInterval: If the reduced value has no name.
  """
  reduced = semitones % constants.NOTES_PER_OCTAVE
  try:
    return constants.INTERVAL_NAMES[reduced]
  except KeyError:
    raise errors.UnknownInterval(semitones)


def format_semitones(semitones, separator=constants.INTERVAL_SEPARATOR):
  return separator.join(str(value) for value in semitones)


def format_intervals(intervals, separator=constants.INTERVAL_SEPARATOR):
  """Formats a role -> semitone map.

  Args:
    intervals: Dict mapping `Role` to integer semitones.
    separator: String placed between semitone values in the display string.

  Returns:
    A `FormattedIntervals` tuple of interval names and raw semitones in
    canonical role order, plus the joined display string.
  """
  semitones = tuple(intervals[role] for role in modifier_rules.ROLE_ORDER
                    if role in intervals)
  names = tuple(interval_name(value) for value in semitones)
  return FormattedIntervals(names, semitones,
                            format_semitones(semitones, separator))
