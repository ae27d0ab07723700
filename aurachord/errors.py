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

"""Exceptions raised while resolving chord symbols.

`ChordSymbolException` and its subclasses describe problems with the input
figure and are meant to be shown to the user. `ChordEngineError` and its
subclasses describe defects in a rule table or in the engine itself.
"""


class ChordSymbolException(Exception):
  """Base class for errors caused by an uninterpretable chord symbol."""
  pass


class InvalidRoot(ChordSymbolException):

  def __init__(self, figure):
    self.figure = figure
    super(InvalidRoot, self).__init__(
        'Chord symbol must start with a root note A-G: %r' % figure)


class InvalidBass(ChordSymbolException):

  def __init__(self, figure, bass):
    self.figure = figure
    self.bass = bass
    super(InvalidBass, self).__init__(
        'Invalid bass note %r in chord symbol %r' % (bass, figure))


class UnrecognizedModifier(ChordSymbolException):

  def __init__(self, figure, remainder):
    self.figure = figure
    self.remainder = remainder
    super(UnrecognizedModifier, self).__init__(
        'Unrecognized modifier in chord symbol %r: %r' % (figure, remainder))


class ConflictingQuality(ChordSymbolException):

  def __init__(self, symbol, existing):
    self.symbol = symbol
    self.existing = existing
    super(ConflictingQuality, self).__init__(
        'Cannot combine %r with existing quality/suspension modifier %r' %
        (symbol, existing))


class ConflictingRole(ChordSymbolException):

  def __init__(self, symbol, role):
    self.symbol = symbol
    self.role = role
    super(ConflictingRole, self).__init__(
        'Modifier %r conflicts with an earlier modifier on the %s' %
        (symbol, role.value))


class ExcludedCombination(ChordSymbolException):

  def __init__(self, symbol, category):
    self.symbol = symbol
    self.category = category
    super(ExcludedCombination, self).__init__(
        'Modifier %r cannot be combined with a %s modifier' %
        (symbol, category.value))


class MissingRequirement(ChordSymbolException):

  def __init__(self, symbol, requirement):
    self.symbol = symbol
    self.requirement = requirement
    super(MissingRequirement, self).__init__(
        '%s requires %s to be present' % (symbol, requirement))


class ChordEngineError(Exception):
  """Base class for internal invariant violations."""
  pass


class RuleTableError(ChordEngineError):
  pass


class UnknownInterval(ChordEngineError):

  def __init__(self, semitones):
    self.semitones = semitones
    super(UnknownInterval, self).__init__(
        'No interval name for %d semitones' % semitones)
