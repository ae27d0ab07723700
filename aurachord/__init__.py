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

r"""Pulls in all aurachord libraries that are in the public API."""

import aurachord.chord_symbols_lib
import aurachord.comparison
import aurachord.engine
import aurachord.errors
import aurachord.formatting
import aurachord.modifier_rules
import aurachord.tokenizer
import aurachord.tracing
import aurachord.transducer
import aurachord.validation
import aurachord.version
from aurachord.engine import ChordSymbolEngine
from aurachord.engine import parse_chord_symbol
from aurachord.version import __version__
