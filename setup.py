#!/usr/bin/env python3
#
# DiveProfile - dive profile analysis library.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#


from setuptools import setup, find_packages

import diveprofile

setup(
    name='diveprofile',
    version=diveprofile.__version__,
    description='DiveProfile - dive profile analysis library',
    author='Artur Wroblewski',
    author_email='wrobell@pld-linux.org',
    packages=find_packages('.'),
    include_package_data=True,
    long_description=\
"""\
DiveProfile is Python library to build dive profile series from dive
computer samples. It estimates cylinder pressure missing due to pressure
transmitter gaps, classifies vertical velocity and calculates depth
statistics around each sample.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive profile pressure',
    license='GPL',
    install_requires=[],
    extras_require={
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
    test_suite='diveprofile.tests',
)

# vim: sw=4:et:ai
