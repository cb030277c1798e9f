#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Setup script for Erg Planner.
"""

from setuptools import setup, find_packages
import re

# Get the version from ergplanner/constants.py
with open('ergplanner/constants.py', 'r') as f:
    version_file = f.read()
    version_match = re.search(r"VERSION = ['\"]([^'\"]*)['\"]", version_file)
    if version_match:
        version = version_match.group(1)
    else:
        version = '0.0.0'

# Get the long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

# Dependencies
REQUIRED = [
    'numpy',
    'pandas',
    'openpyxl',
    'pyyaml',
]

# Optional dependencies
EXTRAS = {
    'dev': [
        'pytest',
        'pytest-cov',
        'pytest-mock',
        'flake8',
    ],
}

setup(
    name='erg-planner',
    version=version,
    description='Convert workout sheets of an Excel workbook to ERG files for indoor trainers',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Erg Planner Contributors',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['erg_planner'],
    include_package_data=True,
    install_requires=REQUIRED,
    extras_require=EXTRAS,
    entry_points={
        'console_scripts': [
            'erg-planner=erg_planner:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    keywords='erg, cycling, trainer, workout, excel',
)
