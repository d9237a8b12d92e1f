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
Dive data as recorded by a dive computer.

The units are chosen, so all values are integers

- time in seconds
- depth in millimetres
- pressure in millibar
- temperature in millikelvin
- volume in millilitres

Zero pressure or temperature means the value was not recorded.
"""

from collections import namedtuple

from .const import MAX_CYLINDERS

Sample = namedtuple('Sample', 'time depth temperature cylinder pressure')
Sample.__new__.__defaults__ = (0, 0, 0)
Sample.__doc__ = """
Dive computer sample.

:var time: Time since start of a dive [s].
:var depth: Depth [mm].
:var temperature: Water temperature [mK], zero if unknown.
:var cylinder: Index of the active cylinder.
:var pressure: Sensor pressure of the active cylinder [mbar], zero if
    unknown.
"""

Cylinder = namedtuple('Cylinder', 'size work_pressure description start end')
Cylinder.__new__.__defaults__ = (0, 0, '', 0, 0)
Cylinder.__doc__ = """
Cylinder information.

:var size: Water capacity of a cylinder [ml].
:var work_pressure: Working pressure of a cylinder [mbar].
:var description: Cylinder type description, i.e. "AL80".
:var start: Recorded start pressure [mbar], zero if unknown.
:var end: Recorded end pressure [mbar], zero if unknown.
"""

Dive = namedtuple('Dive', 'samples cylinders meandepth maxdepth')
Dive.__new__.__defaults__ = ((), 0, 0)
Dive.__doc__ = """
Dive record.

:var samples: Samples ordered by time.
:var cylinders: Cylinders used during a dive.
:var meandepth: Mean depth of a dive [mm].
:var maxdepth: Maximum depth of a dive [mm].
"""

BLANK_CYLINDER = Cylinder()


def cylinder_table(dive):
    """
    Return cylinder table of a dive with exactly `MAX_CYLINDERS` entries.

    Missing cylinders are replaced with blank cylinder information.

    :param dive: Dive record.
    """
    cylinders = tuple(dive.cylinders)
    n = MAX_CYLINDERS - len(cylinders)
    return cylinders + (BLANK_CYLINDER,) * n


# vim: sw=4:et:ai
