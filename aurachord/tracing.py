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

"""Observers that receive step-by-step detail from a chord symbol parse.

Observers are told about each matched token, each applied primitive operation
and each finished result. They are pure listeners: nothing an observer does
changes what the engine returns.
"""

from absl import logging


class ParseObserver(object):
  """Receives events from `ChordSymbolEngine.parse`.

  Subclasses override the events they care about; the default implementations
  do nothing.
  """

  def on_token(self, figure, token):
    """Called for each `MatchedModifier` accepted while parsing `figure`."""
    pass

  def on_operation(self, applied):
    """Called for each `AppliedOperation`, in application order."""
    pass

  def on_result(self, result):
    """Called with the `ChordResult` once a parse succeeds."""
    pass

  def on_error(self, figure, error):
    """Called with the `ChordSymbolException` that ended a failed parse."""
    pass


class LoggingObserver(ParseObserver):
  """Writes parse events to the absl log.

  Args:
    level: absl logging level used for token and operation events.
  """

  def __init__(self, level=logging.INFO):
    self._level = level

  def on_token(self, figure, token):
    logging.log(self._level, 'MATCH %s: %r -> %s (%s, priority %d)', figure,
                token.alias, token.rule.symbol, token.rule.category.value,
                token.rule.priority)

  def on_operation(self, applied):
    operation = applied.operation
    logging.log(self._level, 'OPERATION %s: %s %s %d  [%s] -> [%s]',
                applied.alias, operation.type.value, operation.role.value,
                operation.value, _format_state(applied.before),
                _format_state(applied.after))

  def on_result(self, result):
    logging.log(self._level, 'RESULT %s: %s (%s)', result.figure,
                result.formatted, ' '.join(result.interval_names))

  def on_error(self, figure, error):
    logging.warning('ERROR %s: %s', figure, error)


class RecordingObserver(ParseObserver):
  """Keeps every event in memory, in the order received."""

  def __init__(self):
    self.events = []

  def on_token(self, figure, token):
    self.events.append(('token', figure, token))

  def on_operation(self, applied):
    self.events.append(('operation', applied))

  def on_result(self, result):
    self.events.append(('result', result))

  def on_error(self, figure, error):
    self.events.append(('error', figure, error))

  def events_of_kind(self, kind):
    return [event for event in self.events if event[0] == kind]


def _format_state(intervals):
  return ', '.join('%s=%d' % (role.value, value)
                   for role, value in intervals.items())
