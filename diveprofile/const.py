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
DiveProfile constants.
"""

# maximum number of cylinders of a dive
MAX_CYLINDERS = 8

# amount of leading padding points of a series
PADDING_HEAD = 2

# time offsets of trailing padding points [s]
PADDING_TAIL = (20, 40)

# half-widths of depth statistics windows [s]
WINDOWS = (90, 180, 270)

# depth change of one atmosphere used by pressure-time integral [mm]
ATM_DEPTH = 10000

# surface pressure used for gas volume calculation [mbar]
SURFACE_PRESSURE = 1013.25

# velocity classification is widened for intervals shorter than this [s]
VELOCITY_LOOKBACK = 15

# maximum amount of points to look back when widening the interval
VELOCITY_LOOKBACK_LIMIT = 100

# upper velocity boundaries [mm/s], ascent is negative
VELOCITY_CRAZY_ASCENT = -304
VELOCITY_FAST_ASCENT = -152
VELOCITY_MODERATE_ASCENT = -76
VELOCITY_SLOW_ASCENT = -25
VELOCITY_STABLE = 25
VELOCITY_SLOW_DESCENT = 152
VELOCITY_MODERATE_DESCENT = 304
VELOCITY_FAST_DESCENT = 507

# vim: sw=4:et:ai
