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


"""
DiveProfile exceptions.
"""

class DiveProfileError(Exception):
    """
    Base class for all DiveProfile errors.
    """


class ConfigError(DiveProfileError):
    """
    DiveProfile engine configuration error.
    """


class DataError(DiveProfileError):
    """
    Malformed dive data error.
    """


# vim: sw=4:et:ai
