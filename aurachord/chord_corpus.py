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

"""Chord symbol fixtures used by the comparison harness and the tests."""

# Figures the default rule table accepts.
VALID_CHORDS = (
    # Major chords and extensions.
    'C', 'Cmaj', 'CM', 'Cmaj7', 'CM7', 'CM7b9',
    # Minor chords and extensions.
    'Cm', 'Cmin', 'Cm7', 'Cm9', 'Cm11', 'Cm7b5', 'CmM7', 'Cm7#5', 'Cm7b9',
    # Dominant chords and alterations.
    'C7', 'C9', 'C7sus4', 'C7#5', 'C7b9', 'C7#9', 'C7b9#11',
    # Suspended chords.
    'Csus', 'Csus4', 'Csus2',
    # Diminished and augmented.
    'Cdim', 'Caug', 'C+', 'C°', 'Cdim7', 'Aø',
    # Slash chords.
    'C/E', 'Cmaj7/E', 'Cm7/Eb', 'C7/Bb', 'Csus4/G', 'Cadd9/G', 'CM7/B',
    # Flat roots.
    'Bb', 'Bbmaj7', 'Bbm7', 'Bb7#11', 'Bb/D', 'Bbsus4/Ab',
    # Major extensions and their alterations.
    'Cmaj9', 'Cmaj11', 'Cmaj13', 'Cmaj7#11', 'Cmaj9#11', 'Cmaj13#11',
    'CM7#5',
    # Additions.
    'Cadd9', 'CM7add13', 'Cmadd9', 'C7add13', 'C6', 'Cm6',
    # Upper structure.
    'Cm13', 'Cm9b5', 'C7#11', 'C7b13', 'C7#9b13', 'C11', 'C13', 'C13#11',
    # Power chords and omissions.
    'C5', 'C7no3',
)

# Figures the default rule table rejects, with the error each one raises.
INVALID_CHORDS = (
    ('Cmajm', 'ConflictingQuality'),
    ('Csus4sus2', 'ConflictingQuality'),
    ('Cdimmaj', 'ConflictingQuality'),
    ('Cm7maj7', 'ConflictingRole'),
    ('C7maj7', 'ConflictingRole'),
    ('C7#9#9', 'ConflictingRole'),
    ('Cb5#5', 'ConflictingRole'),
    ('C9add9', 'ConflictingRole'),
    ('C75', 'ExcludedCombination'),
    ('Cb9', 'MissingRequirement'),
    ('Csus4b9', 'MissingRequirement'),
    ('Csus3', 'UnrecognizedModifier'),
    ('Cadd1', 'UnrecognizedModifier'),
    ('Cmaj7##11', 'UnrecognizedModifier'),
    ('C13#13', 'UnrecognizedModifier'),
    ('C/H', 'InvalidBass'),
    ('H7', 'InvalidRoot'),
)
