#!/usr/bin/python3

# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2018 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

#
# A setup.py file
#

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

version = "1.0.0"

with open(path.join(here, 'README.md'), 'r') as f:
    long_description = f.read()

setup(
    name='ldapaccesslog',
    license='GPLv3+',
    version=version,
    description='A library for parsing directory server access logs into ' +
                'typed messages',
    long_description=long_description,
    long_description_content_type='text/markdown',

    author='Red Hat Inc.',
    author_email='389-devel@lists.fedoraproject.org',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: System :: Logging',
        'Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP'],

    keywords='ldap directory server access log parser',
    packages=find_packages(exclude=['tests*']),
    python_requires='>=3.6',

    install_requires=[
        'python-dateutil',
        'argcomplete',
        'setuptools',
        ],

    extras_require={
        'test': ['pytest'],
    },

    entry_points={
        'console_scripts': [
            'ds-accesslog=ldapaccesslog.cli:main',
        ],
    },

)
