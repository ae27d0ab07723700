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

"""Utility functions for concurrency."""

import functools
import threading


def serialized(func):
  """Decorator to provide mutual exclusion for method using _lock attribute."""

  @functools.wraps(func)
  def serialized_method(self, *args, **kwargs):
    lock = getattr(self, '_lock')
    with lock:
      return func(self, *args, **kwargs)

  return serialized_method


class LazySingleton(object):
  """Threadsafe holder for a value built on first use.

  Args:
    factory: Callable with no arguments that builds the value.
  """

  def __init__(self, factory):
    self._factory = factory
    self._lock = threading.RLock()
    self._value = None

  @serialized
  def get(self):
    """Returns the value, building it first if needed."""
    if self._value is None:
      self._value = self._factory()
    return self._value

  @serialized
  def reset(self):
    """Discards the value so the next `get` builds a new one."""
    self._value = None
