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

"""Splits the modifier suffix of a chord symbol into rule tokens."""

import collections
import re

from absl import logging

from aurachord import errors
from aurachord import modifier_rules

# A rule alias as it was matched in the input, e.g. (rule for 'maj7', 'M7').
MatchedModifier = collections.namedtuple('MatchedModifier', ['rule', 'alias'])

# One compiled alias pattern. `alias` is the alias as written in the table.
_ModifierPattern = collections.namedtuple(
    '_ModifierPattern', ['regex', 'alias', 'rule'])


def _alias_to_pattern(alias, rule):
  """Compiles a regex matching `alias` at the start of a string."""
  pattern = re.escape(alias)
  for suffix in rule.not_before:
    pattern += '(?!%s)' % re.escape(suffix)
  flags = 0 if rule.case_sensitive else re.IGNORECASE
  return re.compile(pattern, flags)


def build_patterns(rule_table):
  """Builds the ordered pattern list for a rule table.

  Aliases are ordered longest first so that 'maj7' is tried before 'maj' and
  'm'. Aliases of equal length are ordered by rule priority, then by their
  position in the table.

  Args:
    rule_table: A `RuleTable`.

  Returns:
    A tuple of patterns in the order they should be tried.
  """
  entries = []
  for position, rule in enumerate(rule_table):
    for alias in rule.symbols:
      entries.append(((-len(alias), rule.priority, position),
                      _ModifierPattern(_alias_to_pattern(alias, rule),
                                       alias, rule)))
  entries.sort(key=lambda entry: entry[0])
  return tuple(pattern for _, pattern in entries)


class ModifierTokenizer(object):
  """Longest-match tokenizer over the aliases of a rule table.

  The pattern list is built once, when the tokenizer is constructed, and never
  changes afterwards.
  """

  def __init__(self, rule_table):
    self._patterns = build_patterns(rule_table)

  @property
  def patterns(self):
    return self._patterns

  def match(self, remainder):
    """Returns the `MatchedModifier` at the start of `remainder`, or None."""
    for pattern in self._patterns:
      match = pattern.regex.match(remainder)
      if match:
        return MatchedModifier(pattern.rule, match.group(0))
    return None

  def starts_with_alteration(self, remainder):
    """Returns True if the first token of `remainder` is an alteration."""
    token = self.match(remainder)
    return (token is not None and
            token.rule.category is modifier_rules.Category.ALTERATION)

  def tokenize(self, figure, remainder):
    """Yields `MatchedModifier`s until `remainder` is consumed.

    Args:
      figure: The full chord symbol figure, used in error messages.
      remainder: The modifier suffix left after the root.

    Yields:
      `MatchedModifier` tuples in input order.

    Raises:
      UnrecognizedModifier: If no alias matches at the current position.
    """
    while remainder:
      token = self.match(remainder)
      if token is None:
        raise errors.UnrecognizedModifier(figure, remainder)
      logging.debug('Matched modifier %r (%s) in %r', token.alias,
                    token.rule.symbol, figure)
      remainder = remainder[len(token.alias):]
      yield token
