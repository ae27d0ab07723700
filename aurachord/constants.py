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

"""Constants for chord symbol resolution."""

NOTES_PER_OCTAVE = 12

# Semitone offset each role takes in a major-scale stack when it has to be
# implied, indexed by canonical role position:
# root, third, fifth, seventh, ninth, eleventh, thirteenth.
DEFAULT_ROLE_SEMITONES = (0, 4, 7, 11, 14, 17, 21)

# Short interval names for semitone distances 0 through 12.
# ex. INTERVAL_NAMES[4] == 'M3' (major third), INTERVAL_NAMES[6] == 'TT'.
INTERVAL_NAMES = {
    0: 'P1',   # unison
    1: 'm2',   # minor second
    2: 'M2',   # major second
    3: 'm3',   # minor third
    4: 'M3',   # major third
    5: 'P4',   # fourth
    6: 'TT',   # tritone
    7: 'P5',   # fifth
    8: 'm6',   # minor sixth
    9: 'M6',   # major sixth
    10: 'm7',  # minor seventh
    11: 'M7',  # major seventh
    12: 'P8',  # octave
}

# Separator used when displaying a sequence of semitone values.
INTERVAL_SEPARATOR = '·'

# Accidentals accepted after a root or bass letter.
SHARP_GLYPHS = ('#', '♯')
FLAT_GLYPHS = ('b', '♭')

# Scale steps to MIDI pitch class mapping.
STEPS_MIDI = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
