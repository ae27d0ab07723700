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

"""Folds accepted modifiers into a role -> semitone map.

Every parse starts from `{ROOT: 0}`. If no quality or suspension modifier was
accepted, the table's default (major) rule is folded in first without being
recorded. The accepted modifiers are then applied in ascending priority,
keeping the written order between modifiers of equal priority, so that
'C7b9#11' applies the seventh, then the flat ninth, then the sharp eleventh.

Semitone values are stored uncompressed (a ninth is 14, not 2); reduction to
a single octave happens only when the result is formatted.
"""

import collections

from absl import logging

from aurachord import constants
from aurachord import modifier_rules

OperationType = modifier_rules.OperationType
Role = modifier_rules.Role
ROLE_ORDER = modifier_rules.ROLE_ORDER

# One primitive operation as applied during a parse, with the role map before
# and after it, for tracing.
AppliedOperation = collections.namedtuple(
    'AppliedOperation', ['alias', 'operation', 'before', 'after'])


def default_semitones(role):
  """Returns the major-scale stack value used when `role` must be implied."""
  return constants.DEFAULT_ROLE_SEMITONES[role.index]


def _replace(intervals, role, value):
  for lower_role in ROLE_ORDER[:role.index]:
    if lower_role not in intervals:
      intervals[lower_role] = default_semitones(lower_role)
  intervals[role] = value


def _modify(intervals, role, delta):
  intervals[role] = intervals.get(role, default_semitones(role)) + delta


def _add(intervals, role, value):
  intervals[role] = value


def _remove(intervals, role, unused_value):
  intervals.pop(role, None)


_OPERATION_FNS = {
    OperationType.REPLACE: _replace,
    OperationType.MODIFY: _modify,
    OperationType.ADD: _add,
    OperationType.REMOVE: _remove,
}


def apply_operation(intervals, operation):
  """Applies one `Operation` to a role -> semitone dict in place."""
  _OPERATION_FNS[operation.type](intervals, operation.role, operation.value)


def ordered_intervals(intervals):
  """Returns a copy of `intervals` with roles in canonical order."""
  return dict((role, intervals[role]) for role in ROLE_ORDER
              if role in intervals)


def sort_by_priority(tokens):
  """Stable sort of `MatchedModifier`s by rule priority."""
  return sorted(tokens, key=lambda token: token.rule.priority)


class IntervalTransducer(object):
  """Turns accepted modifier tokens into a final interval map."""

  def __init__(self, rule_table, observer=None):
    self._rule_table = rule_table
    self._observer = observer

  def initial_intervals(self, tokens):
    """Returns the starting role map for a parse of `tokens`."""
    intervals = {Role.ROOT: 0}
    if not any(token.rule.category in modifier_rules.BASE_CATEGORIES
               for token in tokens):
      for operation in self._rule_table.default_rule.operations:
        apply_operation(intervals, operation)
    return intervals

  def transduce(self, tokens):
    """Folds the operations of `tokens` over a fresh role map.

    Args:
      tokens: Accepted `MatchedModifier`s in input order.

    Returns:
      A tuple (intervals, applied) where `intervals` is a role -> semitone
      dict in canonical role order and `applied` is a tuple of
      `AppliedOperation`s in the order they were applied.
    """
    intervals = self.initial_intervals(tokens)
    applied = []
    for token in sort_by_priority(tokens):
      for operation in token.rule.operations:
        before = ordered_intervals(intervals)
        apply_operation(intervals, operation)
        record = AppliedOperation(token.alias, operation, before,
                                  ordered_intervals(intervals))
        applied.append(record)
        logging.debug('%s %s %s (%s): %s -> %s', operation.type.value,
                      operation.role.value, operation.value, token.alias,
                      list(before.values()), list(record.after.values()))
        if self._observer is not None:
          self._observer.on_operation(record)
    return ordered_intervals(intervals), tuple(applied)
