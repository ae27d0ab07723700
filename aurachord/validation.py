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

"""Constraint checks applied to the modifiers of a single chord symbol.

A `ConstraintValidator` lives for exactly one parse. Each token is checked
against the tokens accepted before it as it arrives; prerequisites are checked
once every token is in, so a requirement may be satisfied by a token written
either before or after the one that declares it.
"""

from absl import logging

from aurachord import errors
from aurachord import modifier_rules

Category = modifier_rules.Category
OperationType = modifier_rules.OperationType

# Categories whose edits an alteration may adjust afterwards.
_ALTERABLE_CATEGORIES = frozenset([Category.EXTENSION, Category.ADDITION])


class ConstraintValidator(object):
  """Accepts tokens one at a time, rejecting invalid combinations.

  Attributes:
    figure: The chord symbol figure being validated, for logging.
  """

  def __init__(self, figure=None):
    self.figure = figure
    self._tokens = []
    self._categories = set()
    self._base_token = None
    # Role -> categories of earlier tokens that replaced, modified or removed
    # it.
    self._edited_roles = {}
    # Role -> alias of the earlier token that added it.
    self._added_roles = {}

  @property
  def tokens(self):
    return tuple(self._tokens)

  def _check_quality(self, token):
    if token.rule.category not in modifier_rules.BASE_CATEGORIES:
      return
    if self._base_token is not None:
      raise errors.ConflictingQuality(token.alias, self._base_token.alias)

  def _check_roles(self, token):
    rule = token.rule
    for operation in rule.operations:
      role = operation.role
      if operation.type is OperationType.ADD:
        if role in self._added_roles:
          raise errors.ConflictingRole(token.alias, role)
        continue
      prior_categories = self._edited_roles.get(role)
      if not prior_categories:
        continue
      if (rule.category is Category.ALTERATION and
          prior_categories <= _ALTERABLE_CATEGORIES):
        continue
      raise errors.ConflictingRole(token.alias, role)

  def _check_exclusions(self, token):
    rule = token.rule
    for category in rule.excludes:
      if category in self._categories:
        raise errors.ExcludedCombination(token.alias, category)
    for prior in self._tokens:
      if rule.category in prior.rule.excludes:
        raise errors.ExcludedCombination(prior.alias, rule.category)

  def accept(self, token):
    """Checks `token` against the tokens accepted so far and records it.

    Args:
      token: A `MatchedModifier`.

    Raises:
      ConflictingQuality: If a second quality or suspension is supplied.
      ConflictingRole: If the token edits a role another token already owns.
      ExcludedCombination: If an explicit exclusion is triggered.
    """
    self._check_quality(token)
    self._check_roles(token)
    self._check_exclusions(token)

    rule = token.rule
    self._tokens.append(token)
    self._categories.add(rule.category)
    if rule.category in modifier_rules.BASE_CATEGORIES:
      self._base_token = token
    for operation in rule.operations:
      if operation.type is OperationType.ADD:
        self._added_roles[operation.role] = token.alias
      else:
        self._edited_roles.setdefault(operation.role, set()).add(rule.category)

  def finish(self):
    """Runs the prerequisite pass and returns the accepted tokens.

    Returns:
      A tuple of accepted `MatchedModifier`s in input order.

    Raises:
      MissingRequirement: If a required companion modifier or category is
          absent.
    """
    check_requirements(self._tokens)
    logging.debug('Accepted modifiers for %r: %s', self.figure,
                  [token.alias for token in self._tokens])
    return tuple(self._tokens)


def check_requirements(tokens):
  """Raises MissingRequirement unless every `requires` entry is satisfied."""
  for token in tokens:
    for requirement in token.rule.requires:
      if not any(requirement.is_satisfied_by(other.rule) for other in tokens):
        raise errors.MissingRequirement(token.alias, requirement)
