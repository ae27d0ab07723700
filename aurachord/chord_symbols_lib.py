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

"""Utility functions for splitting chord symbol figures.

The functions in this file treat a chord symbol string as having three
components:

  Root: The root pitch class of the chord, e.g. 'C#' or 'B♭'.
  Modifiers: Everything between the root and the bass, e.g. 'm7b5'. This is
      left unexamined here and handed to the tokenizer unmodified.
  Bass: An optional slash bass note, e.g. '/E'. Bass notes are not part of
      chord resolution; `split_bass` strips them before the modifiers are
      read.
"""

import re

from aurachord import constants
from aurachord import errors

# Regular expression for a single pitch class: one letter A-G and at most one
# accidental.
# Examples: 'C', 'G#', 'Ab', 'F♯', 'E♭'
_PITCH_CLASS_PATTERN = r'([A-G])([#b♯♭]?)'

_ROOT_REGEX = re.compile(_PITCH_CLASS_PATTERN)
_PITCH_CLASS_REGEX = re.compile(_PITCH_CLASS_PATTERN + '$')

# Roots whose ASCII flat may instead begin a flat alteration, as in 'Cb9'.
# Other flat roots ('Bb9', 'Ab13') are never reread.
_AMBIGUOUS_FLAT_ROOT_REGEX = re.compile(r'[CF]b')

# Regular expression for a trailing slash bass.
# Examples: '/E', '/Bb', '/H' (rejected later by _PITCH_CLASS_REGEX)
_BASS_REGEX = re.compile(r'/([^/]*)$')


def split_root(figure, starts_with_alteration=None):
  """Splits a chord symbol figure into its root and modifier suffix.

  'Cb' and 'Fb' are ambiguous: 'Cb7' is C-flat seven but 'Cb9' is C with a
  flat ninth. When `starts_with_alteration` is given and accepts the text
  after the letter, the flat is left to the modifiers.

  Args:
    figure: A chord symbol figure string with any slash bass already removed.
    starts_with_alteration: Optional predicate on a modifier suffix, true
        when the suffix begins with an alteration such as 'b9'.

  Returns:
    A (root, remainder) tuple of strings. The remainder keeps its case.

  Raises:
    InvalidRoot: If the figure does not start with a letter A-G.
  """
  match = _ROOT_REGEX.match(figure)
  if not match:
    raise errors.InvalidRoot(figure)
  if (starts_with_alteration is not None and
      _AMBIGUOUS_FLAT_ROOT_REGEX.match(figure) and
      starts_with_alteration(figure[1:])):
    return figure[0], figure[1:]
  return match.group(0), figure[match.end():]


def split_bass(figure):
  """Splits a slash chord into the chord part and its bass note.

  Args:
    figure: A chord symbol figure string, e.g. 'Cmaj7/E'.

  Returns:
    A (chord, bass) tuple. `bass` is None when the figure has no slash bass.

  Raises:
    InvalidBass: If the text after the slash is not a pitch class.
  """
  match = _BASS_REGEX.search(figure)
  if not match:
    return figure, None
  bass = match.group(1)
  if not _PITCH_CLASS_REGEX.match(bass):
    raise errors.InvalidBass(figure, bass)
  return figure[:match.start()], bass


def parse_pitch_class(pitch_class_str):
  """Parse pitch class from string, returning scale step and alteration."""
  match = _PITCH_CLASS_REGEX.match(pitch_class_str)
  if not match:
    raise errors.InvalidRoot(pitch_class_str)
  step, accidental = match.groups()
  if accidental in constants.SHARP_GLYPHS:
    return step, 1
  elif accidental in constants.FLAT_GLYPHS:
    return step, -1
  return step, 0


def pitch_class_to_midi(step, alter):
  """Convert a pitch class scale step and alteration to MIDI pitch class."""
  return (constants.STEPS_MIDI[step] + alter) % constants.NOTES_PER_OCTAVE


def note_to_pitch_class(note):
  """Returns the integer pitch class (0-11) of a note name such as 'Bb'."""
  return pitch_class_to_midi(*parse_pitch_class(note))
