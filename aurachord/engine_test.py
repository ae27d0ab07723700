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

"""Tests for engine."""

from concurrent import futures

from absl.testing import absltest
from absl.testing import parameterized

from aurachord import chord_corpus
from aurachord import engine
from aurachord import errors
from aurachord import modifier_rules
from aurachord import tracing

Category = modifier_rules.Category
Role = modifier_rules.Role


class ChordSymbolEngineTest(parameterized.TestCase):

  def setUp(self):
    self.engine = engine.ChordSymbolEngine()

  @parameterized.parameters(
      ('C', (0, 4, 7), ('P1', 'M3', 'P5')),
      ('Cm7b5', (0, 3, 6, 10), ('P1', 'm3', 'TT', 'm7')),
      ('Gsus4add9', (0, 5, 7, 14), ('P1', 'P4', 'P5', 'M2')),
      ('Cdim7', (0, 3, 6, 9), ('P1', 'm3', 'TT', 'M6')),
      ('C9', (0, 4, 7, 10, 14), ('P1', 'M3', 'P5', 'm7', 'M2')),
      ('C13', (0, 4, 7, 10, 14, 21), ('P1', 'M3', 'P5', 'm7', 'M2', 'M6')),
      ('C13#11', (0, 4, 7, 10, 14, 18, 21),
       ('P1', 'M3', 'P5', 'm7', 'M2', 'TT', 'M6')),
      ('Caug', (0, 4, 8), ('P1', 'M3', 'm6')),
      ('C5', (0, 7), ('P1', 'P5')),
      ('C7no3', (0, 7, 10), ('P1', 'P5', 'm7')),
      ('C7sus4', (0, 5, 7, 10), ('P1', 'P4', 'P5', 'm7')),
      ('C6', (0, 4, 7, 21), ('P1', 'M3', 'P5', 'M6')),
      ('CmM7', (0, 3, 7, 11), ('P1', 'm3', 'P5', 'M7')),
      ('Cmaj9', (0, 4, 7, 11, 14), ('P1', 'M3', 'P5', 'M7', 'M2')),
  )
  def testParse(self, figure, semitones, names):
    result = self.engine.parse(figure)
    self.assertEqual(figure, result.figure)
    self.assertEqual(semitones, result.semitones)
    self.assertEqual(names, result.interval_names)
    self.assertEqual('·'.join(str(s) for s in semitones), result.formatted)

  def testParseDetails(self):
    result = self.engine.parse('Cm7b5')
    self.assertEqual('C', result.root)
    self.assertIsNone(result.bass)
    self.assertEqual(('m', '7', 'b5'), result.modifiers)
    self.assertEqual(
        [Role.ROOT, Role.THIRD, Role.FIFTH, Role.SEVENTH],
        list(result.intervals))
    self.assertLen(result.operations, 4)

  def testModifiersKeepInputText(self):
    result = self.engine.parse('CSUS4ADD9')
    self.assertEqual(('SUS4', 'ADD9'), result.modifiers)
    self.assertEqual((0, 5, 7, 14), result.semitones)

  @parameterized.parameters(
      ('C', 0, (0, 4, 7)),
      ('Bb7', 10, (10, 2, 5, 8)),
      ('F#m', 6, (6, 9, 1)),
      ('E♭maj7', 3, (3, 7, 10, 2)),
      ('C♭', 11, (11, 3, 6)),
      ('Dm9', 2, (2, 5, 9, 0, 4)),
  )
  def testPitchClasses(self, figure, root_pitch_class, pitch_classes):
    result = self.engine.parse(figure)
    self.assertEqual(root_pitch_class, result.root_pitch_class)
    self.assertEqual(pitch_classes, result.pitch_classes)

  @parameterized.parameters(
      ('Cb7', 'Cb', 11, (0, 4, 7, 10)),
      ('Fb7', 'Fb', 4, (0, 4, 7, 10)),
      ('Cb6', 'Cb', 11, (0, 4, 7, 21)),
      ('Cb11', 'Cb', 11, (0, 4, 7, 10, 14, 17)),
      ('Cbmaj7', 'Cb', 11, (0, 4, 7, 11)),
      ('Cb5', 'C', 0, (0, 4, 6)),
      ('C7b9', 'C', 0, (0, 4, 7, 10, 13)),
      ('Cb97', 'C', 0, (0, 4, 7, 10, 13)),
      ('Bb9', 'Bb', 10, (0, 4, 7, 10, 14)),
  )
  def testFlatRootOrFlatAlteration(self, figure, root, root_pitch_class,
                                   semitones):
    result = self.engine.parse(figure)
    self.assertEqual(root, result.root)
    self.assertEqual(root_pitch_class, result.root_pitch_class)
    self.assertEqual(semitones, result.semitones)

  @parameterized.parameters('Cb9', 'Cb13', 'Fb9')
  def testFlatAlterationWithoutSeventh(self, figure):
    with self.assertRaises(errors.MissingRequirement):
      self.engine.parse(figure)

  @parameterized.parameters(
      ('C/E', 'C', 'E'),
      ('Cmaj7/E', 'Cmaj7', 'E'),
      ('Bbsus4/Ab', 'Bbsus4', 'Ab'),
      ('Cm7/E♭', 'Cm7', 'E♭'),
  )
  def testSlashBassDoesNotChangeChord(self, figure, chord_figure, bass):
    result = self.engine.parse(figure)
    plain = self.engine.parse(chord_figure)
    self.assertEqual(figure, result.figure)
    self.assertEqual(bass, result.bass)
    self.assertEqual(plain.semitones, result.semitones)
    self.assertEqual(plain.modifiers, result.modifiers)

  def testParseCoreRejectsSlash(self):
    with self.assertRaises(errors.UnrecognizedModifier) as context:
      self.engine.parse_core('C/E')
    self.assertEqual('/E', context.exception.remainder)

  def testReadThenResolve(self):
    parsed = self.engine.read('Cm7')
    self.assertEqual('C', parsed.root)
    self.assertEqual(('m', '7'), parsed.modifiers)
    result = self.engine.resolve(parsed)
    self.assertEqual((0, 3, 7, 10), result.semitones)

  def testResolveUsesTableOfRead(self):
    parsed = self.engine.read('C7')
    self.assertIs(self.engine.rule_table, parsed.rule_table)
    suspended_default = [
        rule._replace(is_default=(rule.symbol == 'sus4'))
        for rule in modifier_rules.DEFAULT_RULES]
    self.engine.rebuild(suspended_default)

    self.assertEqual((0, 4, 7, 10), self.engine.resolve(parsed).semitones)
    self.assertEqual((0, 5, 7, 10), self.engine.parse('C7').semitones)
    self.assertEqual((0, 5, 7, 10),
                     self.engine.resolve(self.engine.read('C7')).semitones)

  def testResolveIsRepeatable(self):
    parsed = self.engine.read('C7b9#11')
    self.assertEqual(self.engine.resolve(parsed),
                     self.engine.resolve(parsed))

  def testErrorContext(self):
    with self.assertRaises(errors.ConflictingQuality) as context:
      self.engine.parse('Cmajm')
    self.assertEqual('m', context.exception.symbol)
    self.assertEqual('maj', context.exception.existing)

    with self.assertRaises(errors.ConflictingRole) as context:
      self.engine.parse('Cb5#5')
    self.assertEqual(Role.FIFTH, context.exception.role)

    with self.assertRaises(errors.MissingRequirement) as context:
      self.engine.parse('Cb9')
    self.assertEqual('b9', context.exception.symbol)

  def testObserverEvents(self):
    observer = tracing.RecordingObserver()
    trace_engine = engine.ChordSymbolEngine(
        engine.EngineConfig(observer=observer))
    result = trace_engine.parse('Cm7')
    self.assertLen(observer.events_of_kind('token'), 2)
    self.assertLen(observer.events_of_kind('operation'), 3)
    self.assertEqual([('result', result)], observer.events_of_kind('result'))
    self.assertEqual('result', observer.events[-1][0])

  def testObserverErrorEvent(self):
    observer = tracing.RecordingObserver()
    trace_engine = engine.ChordSymbolEngine(
        engine.EngineConfig(observer=observer))
    with self.assertRaises(errors.ConflictingQuality):
      trace_engine.parse('Cmajm')
    self.assertLen(observer.events_of_kind('token'), 1)
    self.assertEqual([], observer.events_of_kind('result'))
    (_, figure, error), = observer.events_of_kind('error')
    self.assertEqual('Cmajm', figure)
    self.assertIsInstance(error, errors.ConflictingQuality)

  def testObserverDoesNotChangeResult(self):
    trace_engine = engine.ChordSymbolEngine(
        engine.EngineConfig(observer=tracing.RecordingObserver()))
    for figure in chord_corpus.VALID_CHORDS:
      self.assertEqual(self.engine.parse(figure), trace_engine.parse(figure))

  def testCustomSeparator(self):
    spaced = engine.ChordSymbolEngine(engine.EngineConfig(separator=' '))
    self.assertEqual('0 3 7 10', spaced.parse('Cm7').formatted)

  def testRebuild(self):
    altered = modifier_rules.modifier_rule(
        ['alt'], Category.ALTERATION,
        [modifier_rules.modify(Role.FIFTH, 1),
         modifier_rules.modify(Role.NINTH, 1)],
        requires=[modifier_rules.requires_symbol('7')])
    with self.assertRaises(errors.UnrecognizedModifier):
      self.engine.parse('C7alt')

    self.engine.rebuild(modifier_rules.DEFAULT_RULES + (altered,))
    self.assertEqual((0, 4, 8, 10, 15), self.engine.parse('C7alt').semitones)
    with self.assertRaises(errors.MissingRequirement):
      self.engine.parse('Calt')

  def testRebuildFailureKeepsTable(self):
    rule_table = self.engine.rule_table
    with self.assertRaises(errors.RuleTableError):
      self.engine.rebuild([])
    self.assertIs(rule_table, self.engine.rule_table)
    self.assertEqual((0, 3, 7), self.engine.parse('Cm').semitones)

  def testConcurrentParses(self):
    figures = list(chord_corpus.VALID_CHORDS) * 4
    expected = [self.engine.parse(figure) for figure in figures]
    with futures.ThreadPoolExecutor(max_workers=8) as executor:
      rebuilds = [executor.submit(self.engine.rebuild,
                                  modifier_rules.DEFAULT_RULES)
                  for _ in range(4)]
      results = list(executor.map(self.engine.parse, figures))
    for rebuild in rebuilds:
      rebuild.result()
    self.assertEqual(expected, results)

  @parameterized.parameters(*chord_corpus.VALID_CHORDS)
  def testValidCorpus(self, figure):
    self.engine.parse(figure)

  @parameterized.parameters(*chord_corpus.INVALID_CHORDS)
  def testInvalidCorpus(self, figure, error_name):
    with self.assertRaises(getattr(errors, error_name)):
      self.engine.parse(figure)


class DefaultEngineTest(absltest.TestCase):

  def testDefaultEngineIsShared(self):
    self.assertIs(engine.get_default_engine(), engine.get_default_engine())

  def testParseChordSymbol(self):
    self.assertEqual((0, 3, 6, 10),
                     engine.parse_chord_symbol('Cm7b5').semitones)

  def testChordSymbolRoot(self):
    self.assertEqual(2, engine.chord_symbol_root('Dm9'))
    self.assertEqual(10, engine.chord_symbol_root('Bb7/D'))

  def testChordSymbolPitches(self):
    self.assertEqual([9, 0, 4], engine.chord_symbol_pitches('Am'))
    self.assertEqual([7, 11, 2, 5], engine.chord_symbol_pitches('G7'))

  def testChordSymbolIntervals(self):
    self.assertEqual(['P1', 'M3', 'P5', 'm7'],
                     engine.chord_symbol_intervals('C7'))

  def testInvalidFigure(self):
    with self.assertRaises(errors.ChordSymbolException):
      engine.chord_symbol_pitches('H')


if __name__ == '__main__':
  absltest.main()
