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

"""A setuptools based setup module for aurachord."""

from setuptools import find_packages
from setuptools import setup

# Bit of a hack to parse the version string stored in version.py without
# executing __init__.py, which will end up requiring the package's
# dependencies to be importable.
# Makes the __version__ variable available.
with open('aurachord/version.py') as in_file:
  exec(in_file.read())  # pylint: disable=exec-used

REQUIRED_PACKAGES = [
    'absl-py >= 1.0.0',
]

EXTRAS_REQUIRE = {
    'compare': [
        'note-seq >= 0.0.3',
        'music21 >= 6.0.0',
    ],
    'test': [
        'pylint >= 2.14.5',
        'pytest >= 7.1.2',
    ]
}

CONSOLE_SCRIPTS = [
    'aurachord.scripts.chord_symbol_info',
    'aurachord.scripts.compare_chord_parsers',
]

setup(
    name='aurachord',
    version=__version__,  # pylint: disable=undefined-variable
    description='Resolve chord symbols into harmonic roles and intervals',
    long_description='',
    author='The Aurachord Authors',
    license='Apache 2',
    # PyPI package information.
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Sound/Audio :: Analysis',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='music chord symbols harmony parser',

    packages=find_packages(),
    install_requires=REQUIRED_PACKAGES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        'console_scripts': ['%s = %s:console_entry_point' % (n, p) for n, p in
                            ((s.split('.')[-1], s) for s in CONSOLE_SCRIPTS)],
    },
)
