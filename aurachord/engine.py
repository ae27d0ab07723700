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

"""Chord symbol resolution engine.

Use `ChordSymbolEngine.parse` to turn a chord symbol figure such as 'Cm7b5'
into a `ChordResult`:

  engine = ChordSymbolEngine()
  result = engine.parse('Cm7b5')
  result.modifiers      # ('m', '7', 'b5')
  result.semitones      # (0, 3, 6, 10)
  result.interval_names  # ('P1', 'm3', 'TT', 'm7')

A parse runs in three stages. `read` extracts the root and tokenizes and
validates the modifiers into an immutable `ParsedChord`; `resolve` folds the
accepted modifiers into a role -> semitone map and formats it. Any failure
raises a `ChordSymbolException` and no partial result is produced.

The engine owns one immutable `RuleTable` together with the tokenizer and
transducer derived from it. `rebuild` swaps in a new table atomically, so
parses running on other threads see either the old table or the new one.
"""

import collections
import threading

from absl import logging

from aurachord import chord_symbols_lib
from aurachord import concurrency
from aurachord import constants
from aurachord import errors
from aurachord import formatting
from aurachord import modifier_rules
from aurachord import tokenizer
from aurachord import tracing
from aurachord import transducer
from aurachord import validation


class EngineConfig(object):
  """Stores a configuration for a `ChordSymbolEngine`.

  Attributes:
    rules: Iterable of `ModifierRule`s to build the rule table from.
    separator: String placed between semitone values in display strings.
    observer: Optional `ParseObserver` told about each parse.
  """

  def __init__(self, rules=modifier_rules.DEFAULT_RULES,
               separator=constants.INTERVAL_SEPARATOR, observer=None):
    self.rules = tuple(rules)
    self.separator = separator
    self.observer = observer


default_configs = {
    'default': EngineConfig(),
    'trace': EngineConfig(observer=tracing.LoggingObserver()),
}


class ParsedChord(
    collections.namedtuple('ParsedChord', ['figure', 'root', 'bass',
                                           'tokens', 'rule_table'])):
  """A chord symbol split into its root and accepted modifier tokens.

  `rule_table` is the table the tokens were read with; `resolve` folds them
  against that table even if the engine has been rebuilt since.
  """
  __slots__ = ()

  @property
  def modifiers(self):
    return tuple(token.alias for token in self.tokens)


ChordResult = collections.namedtuple('ChordResult', [
    'figure',            # The input figure.
    'root',              # Root token, e.g. 'Bb'.
    'bass',              # Slash bass token, or None.
    'modifiers',         # Matched aliases in input order.
    'operations',        # Applied `AppliedOperation`s in application order.
    'intervals',         # Role -> semitones, in canonical role order.
    'interval_names',    # Interval names in canonical role order.
    'semitones',         # Raw semitones in canonical role order.
    'formatted',         # Semitones joined by the display separator.
    'root_pitch_class',  # Integer pitch class of the root.
    'pitch_classes',     # Pitch classes in canonical role order.
])

_EngineState = collections.namedtuple(
    '_EngineState', ['rule_table', 'tokenizer', 'transducer'])


class ChordSymbolEngine(object):
  """Resolves chord symbol figures against a rule table.

  Args:
    config: An `EngineConfig`. Defaults to `default_configs['default']`.
  """

  def __init__(self, config=None):
    self._config = config or default_configs['default']
    self._lock = threading.RLock()
    self._state = self._build_state(self._config.rules)

  def _build_state(self, rules):
    rule_table = modifier_rules.RuleTable(rules)
    return _EngineState(
        rule_table=rule_table,
        tokenizer=tokenizer.ModifierTokenizer(rule_table),
        transducer=transducer.IntervalTransducer(rule_table,
                                                 self._config.observer))

  @property
  def rule_table(self):
    return self._state.rule_table

  @property
  def observer(self):
    return self._config.observer

  @concurrency.serialized
  def rebuild(self, rules):
    """Replaces the rule table with one built from `rules`.

    Args:
      rules: Iterable of `ModifierRule`s.

    Raises:
      RuleTableError: If the rules are inconsistent. The current table is
          kept in that case.
    """
    self._state = self._build_state(rules)
    logging.info('Rebuilt rule table with %d rules',
                 len(self._state.rule_table))

  def _read(self, state, figure, bass):
    root, remainder = chord_symbols_lib.split_root(
        figure, state.tokenizer.starts_with_alteration)
    validator = validation.ConstraintValidator(figure)
    for token in state.tokenizer.tokenize(figure, remainder):
      validator.accept(token)
      if self.observer is not None:
        self.observer.on_token(figure, token)
    return ParsedChord(figure, root, bass, validator.finish(),
                       state.rule_table)

  def read(self, figure):
    """Extracts the root and accepted modifiers of a slash-free figure.

    Args:
      figure: A chord symbol figure string without a slash bass.

    Returns:
      A `ParsedChord`.

    Raises:
      ChordSymbolException: If the figure cannot be interpreted.
    """
    return self._read(self._state, figure, None)

  def _resolve(self, interval_transducer, parsed):
    intervals, applied = interval_transducer.transduce(parsed.tokens)
    formatted = formatting.format_intervals(intervals, self._config.separator)
    root_pitch_class = chord_symbols_lib.note_to_pitch_class(parsed.root)
    pitch_classes = tuple(
        (root_pitch_class + value) % constants.NOTES_PER_OCTAVE
        for value in formatted.semitones)
    return ChordResult(
        figure=parsed.figure,
        root=parsed.root,
        bass=parsed.bass,
        modifiers=parsed.modifiers,
        operations=applied,
        intervals=intervals,
        interval_names=formatted.names,
        semitones=formatted.semitones,
        formatted=formatted.display,
        root_pitch_class=root_pitch_class,
        pitch_classes=pitch_classes)

  def resolve(self, parsed):
    """Folds the modifiers of a `ParsedChord` into a `ChordResult`.

    The modifiers are folded against the rule table they were read with, so
    a `rebuild` between `read` and `resolve` does not mix tables.
    """
    state = self._state
    interval_transducer = state.transducer
    if parsed.rule_table is not state.rule_table:
      interval_transducer = transducer.IntervalTransducer(
          parsed.rule_table, self._config.observer)
    return self._resolve(interval_transducer, parsed)

  def _parse(self, figure, chord_figure, bass):
    # Every stage of one parse uses the same table even if `rebuild` runs
    # concurrently.
    state = self._state
    try:
      parsed = self._read(state, chord_figure, bass)
      result = self._resolve(state.transducer, parsed)._replace(figure=figure)
    except errors.ChordSymbolException as e:
      if self.observer is not None:
        self.observer.on_error(figure, e)
      raise
    if self.observer is not None:
      self.observer.on_result(result)
    return result

  def parse_core(self, figure):
    """Parses a chord symbol figure that has no slash bass.

    Args:
      figure: A chord symbol figure string, e.g. 'Gsus4add9'.

    Returns:
      A `ChordResult`.

    Raises:
      ChordSymbolException: If the figure cannot be interpreted.
    """
    return self._parse(figure, figure, None)

  def parse(self, figure):
    """Parses a chord symbol figure, stripping any slash bass first.

    The bass note is validated and reported in the result but takes no part
    in resolving the chord itself: 'C/E' resolves exactly like 'C'.

    Args:
      figure: A chord symbol figure string, e.g. 'Cmaj7/E'.

    Returns:
      A `ChordResult`.

    Raises:
      ChordSymbolException: If the figure cannot be interpreted.
    """
    chord_figure, bass = chord_symbols_lib.split_bass(figure)
    return self._parse(figure, chord_figure, bass)


_DEFAULT_ENGINE = concurrency.LazySingleton(ChordSymbolEngine)


def get_default_engine():
  """Returns the shared engine built from `DEFAULT_RULES`."""
  return _DEFAULT_ENGINE.get()


def parse_chord_symbol(figure):
  """Parses `figure` with the default engine. See `ChordSymbolEngine.parse`."""
  return get_default_engine().parse(figure)


def chord_symbol_root(figure):
  """Return the root pitch class of a chord, an integer in [0, 11]."""
  return parse_chord_symbol(figure).root_pitch_class


def chord_symbol_pitches(figure):
  """Return the pitch classes contained in a chord, root first."""
  return list(parse_chord_symbol(figure).pitch_classes)


def chord_symbol_intervals(figure):
  """Return the interval names of a chord, root first."""
  return list(parse_chord_symbol(figure).interval_names)
