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

"""Counters that summarise a batch of chord symbol comparisons."""

import copy

from absl import logging


class MergeStatisticsError(Exception):
  pass


class Counter(object):
  """A named count, e.g. how many chords matched a reference parser.

  Counters with the same name can be merged, which is how per-parser counts
  from separate comparison runs are combined.
  """

  def __init__(self, name, start_value=0):
    """Constructs a Counter.

    Args:
      name: String name of this counter.
      start_value: What value to start the count at.
    """
    self.name = name
    self.count = start_value

  def increment(self, inc=1):
    self.count += inc

  def merge_from(self, other):
    if not isinstance(other, Counter):
      raise MergeStatisticsError(
          'Cannot merge %s into Counter' % other.__class__.__name__)
    if self.name != other.name:
      raise MergeStatisticsError(
          'Name "%s" does not match this name "%s"' % (other.name, self.name))
    self.count += other.count

  def copy(self):
    return copy.copy(self)

  def __str__(self):
    return '%s: %d' % (self.name, self.count)


def merge_statistics(stats_list):
  """Merge together counters of the same name in the given list.

  Args:
    stats_list: A list of `Counter` objects.

  Returns:
    A list of merged counters in first-seen order. Each name appears once.
  """
  name_map = {}
  for stat in stats_list:
    if stat.name not in name_map:
      name_map[stat.name] = stat.copy()
    else:
      name_map[stat.name].merge_from(stat)
  return list(name_map.values())


def log_statistics_list(stats_list, logger_fn=logging.info):
  """Calls the given logger function on each counter in the list."""
  for stat in stats_list:
    logger_fn(str(stat))
