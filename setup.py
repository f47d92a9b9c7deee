#!/usr/bin/env python
#
# Copyright 2022 NCC Group
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
import re
from io import open

from setuptools import setup

__author__ = "NCC Group"


tests_requires = ["pytest"]

with open("src/jwtreauth/__init__.py", "r") as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

setup(
    name="jwtreauth",
    version=version,
    description="URL matching for JWT reauthentication of captured requests",
    long_description=open("README.rst", encoding="utf-8").read(),
    author="NCC Group",
    license="Apache-2.0",
    packages=[
        "jwtreauth",
        "jwtreauth/utils",
    ],
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires="~=3.9",
    extras_require={
        "testing": tests_requires,
        "quality": ["mypy", "ruff", "bandit"],
        "types": ["types-requests"],
    },
    install_requires=[
        "requests",
        "pydantic",
        "pydantic-settings",
    ],
    long_description_content_type="text/x-rst",
    zip_safe=False,
)
