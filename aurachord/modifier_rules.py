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

"""Declarative table of chord symbol modifiers.

A chord symbol figure such as 'Cm7b5' is read as a root ('C') followed by a
sequence of modifier tokens ('m', '7', 'b5'). Each token is an alias of one
`ModifierRule`, which records:

  Category: One of quality, suspension, extension, addition or alteration.
      Quality and suspension modifiers are mutually exclusive.
  Operations: Primitive edits to the chord's role -> semitone map. A role is a
      harmonic slot (third, fifth, seventh, ...) independent of its value.
  Priority: Modifiers are applied in ascending priority, so a quality is
      always in place before an alteration adjusts it.
  Requirements and exclusions: Companion modifiers or categories that must be
      (or must not be) present in the same chord.

Nothing in this module performs parsing; the tokenizer, validator and
transducer all read a `RuleTable` built from these rules.
"""

import collections
import enum

from aurachord import errors


class Role(enum.Enum):
  """Harmonic roles, in canonical root-to-highest order."""
  ROOT = 'root'
  THIRD = 'third'
  FIFTH = 'fifth'
  SEVENTH = 'seventh'
  NINTH = 'ninth'
  ELEVENTH = 'eleventh'
  THIRTEENTH = 'thirteenth'

  @property
  def index(self):
    """Position of this role in canonical order."""
    return ROLE_ORDER.index(self)

  @property
  def degree(self):
    """Scale degree number of this role, e.g. 9 for the ninth."""
    return 2 * self.index + 1


ROLE_ORDER = tuple(Role)


class Category(enum.Enum):
  QUALITY = 'quality'
  SUSPENSION = 'suspension'
  EXTENSION = 'extension'
  ADDITION = 'addition'
  ALTERATION = 'alteration'


# Quality and suspension share one mutual-exclusion class.
BASE_CATEGORIES = frozenset([Category.QUALITY, Category.SUSPENSION])

# Default application priority per category; lower values apply earlier.
CATEGORY_PRIORITIES = {
    Category.QUALITY: 1,
    Category.SUSPENSION: 1,
    Category.EXTENSION: 2,
    Category.ADDITION: 3,
    Category.ALTERATION: 4,
}


class OperationType(enum.Enum):
  REPLACE = 'replace'  # Set a role, implying any lower roles.
  MODIFY = 'modify'    # Shift a role by a delta.
  ADD = 'add'          # Set a role without implying anything else.
  REMOVE = 'remove'    # Drop a role.


Operation = collections.namedtuple('Operation', ['type', 'role', 'value'])


def replace(role, value):
  return Operation(OperationType.REPLACE, role, value)


def modify(role, delta):
  return Operation(OperationType.MODIFY, role, delta)


def add(role, value):
  return Operation(OperationType.ADD, role, value)


def remove(role):
  return Operation(OperationType.REMOVE, role, 0)


class Requirement(
    collections.namedtuple('Requirement', ['symbol', 'category', 'role'])):
  """A companion modifier that must be accepted alongside a rule.

  Exactly one of `symbol` or `category` is set. A symbol requirement names the
  canonical symbol of a specific rule. A category requirement is met by any
  rule of that category; if `role` is also set, the rule must touch that role.
  """
  __slots__ = ()

  def is_satisfied_by(self, rule):
    if self.symbol is not None:
      return rule.symbol == self.symbol
    if rule.category != self.category:
      return False
    return self.role is None or self.role in rule.roles

  def __str__(self):
    if self.symbol is not None:
      return self.symbol
    if self.role is None:
      return self.category.value
    return '%s.%d' % (self.category.value, self.role.degree)


def requires_symbol(symbol):
  return Requirement(symbol, None, None)


def requires_category(category, role=None):
  return Requirement(None, category, role)


class ModifierRule(collections.namedtuple('ModifierRule', [
    'symbols', 'category', 'operations', 'priority', 'requires', 'excludes',
    'is_default', 'case_sensitive', 'not_before'])):
  """One recognized modifier and all of its aliases.

  Attributes:
    symbols: Tuple of alias strings; the first is canonical.
    category: The `Category` of this modifier.
    operations: Tuple of `Operation`s applied in order.
    priority: Integer application priority; lower applies earlier.
    requires: Tuple of `Requirement`s checked once all tokens are accepted.
    excludes: Frozenset of `Category`s that may not co-occur with this rule.
    is_default: True for the quality assumed when no quality or suspension
        modifier is present.
    case_sensitive: If True, aliases only match with exact case. Needed to
        tell 'M' (major) from 'm' (minor).
    not_before: Tuple of strings that may not immediately follow an alias of
        this rule, e.g. 'aj' so that 'm' never matches the start of 'maj'.
  """
  __slots__ = ()

  @property
  def symbol(self):
    return self.symbols[0]

  @property
  def roles(self):
    return frozenset(operation.role for operation in self.operations)

  def __str__(self):
    return self.symbol


def modifier_rule(symbols, category, operations, priority=None, requires=(),
                  excludes=(), is_default=False, case_sensitive=False,
                  not_before=()):
  """Builds a `ModifierRule`, defaulting priority from the category."""
  if priority is None:
    priority = CATEGORY_PRIORITIES[category]
  return ModifierRule(
      symbols=tuple(symbols),
      category=category,
      operations=tuple(operations),
      priority=priority,
      requires=tuple(requires),
      excludes=frozenset(excludes),
      is_default=is_default,
      case_sensitive=case_sensitive,
      not_before=tuple(not_before))


def _aliases_collide(alias, rule, other_alias, other_rule):
  if alias == other_alias:
    return True
  if rule.case_sensitive and other_rule.case_sensitive:
    return False
  return alias.lower() == other_alias.lower()


def _check_rules(rules):
  """Raises RuleTableError if the rules cannot form a consistent table."""
  if not rules:
    raise errors.RuleTableError('Rule table is empty')
  seen = []
  for rule in rules:
    if not rule.symbols or not all(rule.symbols):
      raise errors.RuleTableError('Rule has an empty symbol: %r' % (rule,))
    if not isinstance(rule.category, Category):
      raise errors.RuleTableError(
          'Rule %s has invalid category %r' % (rule.symbol, rule.category))
    for operation in rule.operations:
      if not isinstance(operation.type, OperationType):
        raise errors.RuleTableError(
            'Rule %s has invalid operation type %r' %
            (rule.symbol, operation.type))
      if not isinstance(operation.role, Role):
        raise errors.RuleTableError(
            'Rule %s has invalid role %r' % (rule.symbol, operation.role))
    for alias in rule.symbols:
      for other_alias, other_rule in seen:
        if _aliases_collide(alias, rule, other_alias, other_rule):
          raise errors.RuleTableError(
              'Alias %r of %s collides with alias %r of %s' %
              (alias, rule.symbol, other_alias, other_rule.symbol))
      seen.append((alias, rule))

  defaults = [rule for rule in rules if rule.is_default]
  if len(defaults) != 1:
    raise errors.RuleTableError(
        'Expected exactly one default rule, found %d' % len(defaults))
  if defaults[0].category not in BASE_CATEGORIES:
    raise errors.RuleTableError(
        'Default rule %s must be a quality or suspension' % defaults[0].symbol)

  for rule in rules:
    for requirement in rule.requires:
      if (requirement.symbol is not None and
          not any(other.symbol == requirement.symbol for other in rules)):
        raise errors.RuleTableError(
            'Rule %s requires unknown symbol %r' %
            (rule.symbol, requirement.symbol))


class RuleTable(object):
  """An immutable, validated collection of `ModifierRule`s."""

  def __init__(self, rules):
    self._rules = tuple(rules)
    _check_rules(self._rules)
    self._rules_by_symbol = dict((rule.symbol, rule) for rule in self._rules)
    self._default_rule = next(rule for rule in self._rules if rule.is_default)

  @property
  def rules(self):
    return self._rules

  @property
  def default_rule(self):
    return self._default_rule

  def get(self, symbol):
    """Returns the rule whose canonical symbol is `symbol`, or None."""
    return self._rules_by_symbol.get(symbol)

  def __iter__(self):
    return iter(self._rules)

  def __len__(self):
    return len(self._rules)


_SEVENTH_PRESENT = requires_category(Category.EXTENSION, Role.SEVENTH)

DEFAULT_RULES = (
    # Qualities.
    modifier_rule(['maj', 'M', 'major'], Category.QUALITY,
                  [replace(Role.THIRD, 4), add(Role.FIFTH, 7)],
                  is_default=True, case_sensitive=True),
    modifier_rule(['m', 'min', 'minor', '-'], Category.QUALITY,
                  [replace(Role.THIRD, 3), add(Role.FIFTH, 7)],
                  case_sensitive=True, not_before=['aj']),
    modifier_rule(['dim', '°', 'o'], Category.QUALITY,
                  [replace(Role.THIRD, 3), replace(Role.FIFTH, 6)]),
    modifier_rule(['dim7', '°7', 'o7'], Category.QUALITY,
                  [replace(Role.THIRD, 3), replace(Role.FIFTH, 6),
                   add(Role.SEVENTH, 9)]),
    modifier_rule(['ø', 'ø7'], Category.QUALITY,
                  [replace(Role.THIRD, 3), replace(Role.FIFTH, 6),
                   add(Role.SEVENTH, 10)]),
    # The third is implied by replacing the fifth.
    modifier_rule(['aug', '+'], Category.QUALITY,
                  [replace(Role.FIFTH, 8)]),
    modifier_rule(['5'], Category.QUALITY,
                  [remove(Role.THIRD), add(Role.FIFTH, 7)],
                  excludes=[Category.EXTENSION]),

    # Suspensions.
    modifier_rule(['sus4', 'sus'], Category.SUSPENSION,
                  [replace(Role.THIRD, 5), add(Role.FIFTH, 7)],
                  excludes=[Category.QUALITY]),
    modifier_rule(['sus2'], Category.SUSPENSION,
                  [replace(Role.THIRD, 2), add(Role.FIFTH, 7)],
                  excludes=[Category.QUALITY]),

    # Extensions. These stack: a ninth implies a seventh, and so on. The
    # eleventh is left out of thirteenth chords.
    modifier_rule(['maj7', 'M7', 'Δ', 'Δ7'], Category.EXTENSION,
                  [add(Role.SEVENTH, 11)],
                  excludes=[Category.EXTENSION], case_sensitive=True),
    modifier_rule(['7'], Category.EXTENSION,
                  [add(Role.SEVENTH, 10)],
                  excludes=[Category.EXTENSION]),
    modifier_rule(['9'], Category.EXTENSION,
                  [add(Role.SEVENTH, 10), add(Role.NINTH, 14)],
                  excludes=[Category.EXTENSION]),
    modifier_rule(['11'], Category.EXTENSION,
                  [add(Role.SEVENTH, 10), add(Role.NINTH, 14),
                   add(Role.ELEVENTH, 17)],
                  excludes=[Category.EXTENSION]),
    modifier_rule(['13'], Category.EXTENSION,
                  [add(Role.SEVENTH, 10), add(Role.NINTH, 14),
                   add(Role.THIRTEENTH, 21)],
                  excludes=[Category.EXTENSION]),
    modifier_rule(['maj9', 'M9', 'Δ9'], Category.EXTENSION,
                  [add(Role.SEVENTH, 11), add(Role.NINTH, 14)],
                  excludes=[Category.EXTENSION], case_sensitive=True),
    modifier_rule(['maj11', 'M11', 'Δ11'], Category.EXTENSION,
                  [add(Role.SEVENTH, 11), add(Role.NINTH, 14),
                   add(Role.ELEVENTH, 17)],
                  excludes=[Category.EXTENSION], case_sensitive=True),
    modifier_rule(['maj13', 'M13', 'Δ13'], Category.EXTENSION,
                  [add(Role.SEVENTH, 11), add(Role.NINTH, 14),
                   add(Role.THIRTEENTH, 21)],
                  excludes=[Category.EXTENSION], case_sensitive=True),

    # Additions never imply a seventh.
    modifier_rule(['add9', 'add2'], Category.ADDITION,
                  [add(Role.NINTH, 14)]),
    modifier_rule(['add11', 'add4'], Category.ADDITION,
                  [add(Role.ELEVENTH, 17)]),
    modifier_rule(['add13', 'add6', '6'], Category.ADDITION,
                  [add(Role.THIRTEENTH, 21)]),

    # Alterations.
    modifier_rule(['b5', '♭5', '-5'], Category.ALTERATION,
                  [modify(Role.FIFTH, -1)]),
    modifier_rule(['#5', '♯5', '+5'], Category.ALTERATION,
                  [modify(Role.FIFTH, 1)]),
    modifier_rule(['b9', '♭9', '-9'], Category.ALTERATION,
                  [modify(Role.NINTH, -1)],
                  requires=[_SEVENTH_PRESENT]),
    modifier_rule(['#9', '♯9', '+9'], Category.ALTERATION,
                  [modify(Role.NINTH, 1)],
                  requires=[_SEVENTH_PRESENT]),
    modifier_rule(['#11', '♯11', '+11'], Category.ALTERATION,
                  [modify(Role.ELEVENTH, 1)],
                  requires=[_SEVENTH_PRESENT]),
    modifier_rule(['b13', '♭13', '-13'], Category.ALTERATION,
                  [modify(Role.THIRTEENTH, -1)],
                  requires=[_SEVENTH_PRESENT]),
    modifier_rule(['no3'], Category.ALTERATION,
                  [remove(Role.THIRD)]),
    modifier_rule(['no5'], Category.ALTERATION,
                  [remove(Role.FIFTH)]),
)
