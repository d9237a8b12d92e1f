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
Dive profile series.

The series is list of points derived from dive computer samples. The real
samples are surrounded with padding points, so calculations looking at
neighbour points do not need to check boundaries of the series. For ``n``
samples, the series has ``n + 4`` points

- points ``0`` and ``1`` are leading padding
- points ``2`` to ``n + 1`` are dive computer samples
- points ``n + 2`` and ``n + 3`` are trailing padding, 20s and 40s after
  the last sample
"""

from .const import PADDING_HEAD, PADDING_TAIL


class Velocity(object):
    """
    Vertical velocity enumeration.

    The values are ordered, so velocity classes can be compared

    STABLE
        Depth change is very small or there is no depth change at all.
    SLOW
        Slow ascent or descent.
    MODERATE
        Moderate ascent or descent.
    FAST
        Fast ascent or descent.
    CRAZY
        Ascent or descent which is way too fast.
    """
    STABLE = 0
    SLOW = 1
    MODERATE = 2
    FAST = 3
    CRAZY = 4

    NAMES = ('stable', 'slow', 'moderate', 'fast', 'crazy')


class Point(object):
    """
    Dive profile point.

    The sensor pressure and interpolated pressure are separate values, so
    measured and estimated data can be distinguished.

    :var time: Time since start of a dive [s].
    :var depth: Depth [mm].
    :var smoothed: Smoothed depth [mm], null if not calculated.
    :var pressure: Sensor pressure of active cylinder [mbar], zero if not
        reported.
    :var interpolated: Interpolated pressure of active cylinder [mbar],
        null if no estimate is available.
    :var temperature: Temperature [mK], zero if unknown.
    :var cylinder: Index of active cylinder.
    :var same_cylinder: True if previous point has the same active cylinder.
    :var velocity: Vertical velocity class.
    :var min: Index of point with minimum depth for each depth statistics
        window.
    :var max: Index of point with maximum depth for each depth statistics
        window.
    :var avg: Average depth for each depth statistics window [mm].
    """
    def __init__(self, time=0, depth=0):
        self.time = time
        self.depth = depth
        self.smoothed = None
        self.pressure = 0
        self.interpolated = None
        self.temperature = 0
        self.cylinder = 0
        self.same_cylinder = False
        self.velocity = Velocity.STABLE
        self.min = []
        self.max = []
        self.avg = []


    @property
    def tank_pressure(self):
        """
        Sensor pressure if reported, otherwise interpolated pressure.

        Null if neither is available.
        """
        return self.pressure if self.pressure else self.interpolated


    def __repr__(self):
        return 'Point(time={}, depth={}, pressure={}, interpolated={},' \
            ' cylinder={})'.format(
                self.time, self.depth, self.pressure, self.interpolated,
                self.cylinder
            )


class Series(list):
    """
    Dive profile series.

    The class is a list of dive profile points with additional dive
    aggregates.

    :var maxtime: Time of last analysed point [s].
    :var meandepth: Mean depth of a dive as recorded by dive computer [mm].
    :var maxdepth: Maximum depth of dive samples [mm].
    :var minpressure: Minimum tank pressure [mbar].
    :var maxpressure: Maximum tank pressure [mbar].
    :var endpressure: End pressure of first cylinder [mbar].
    :var mintemp: Minimum temperature [mK].
    :var maxtemp: Maximum temperature [mK].
    :var lastindex: Index of last point, which is not part of trailing
        surface samples; null for a dive without samples.
    :var segments: Pressure segments of each cylinder.
    """
    def __init__(self, size):
        """
        Create series of `size` empty points.

        :param size: Amount of points.
        """
        super().__init__(Point() for i in range(size))
        self.maxtime = 0
        self.meandepth = 0
        self.maxdepth = 0
        self.minpressure = 0
        self.maxpressure = 0
        self.endpressure = 0
        self.mintemp = 0
        self.maxtemp = 0
        self.lastindex = None
        self.segments = []


    @property
    def samples(self):
        """
        Points derived from dive computer samples.

        A new list is created on each access.
        """
        return self[PADDING_HEAD:len(self) - len(PADDING_TAIL)]


    def analysed(self):
        """
        Return range of indices of real points up to last index.
        """
        if self.lastindex is None:
            return range(0)
        return range(PADDING_HEAD, self.lastindex + 1)


# vim: sw=4:et:ai
