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
Cylinder pressure segments tracking.

A pressure segment is a time interval during which a cylinder was
continuously the active one and its pressure sensor was continuously
reporting (or continuously not reporting) pressure.

For each segment, the integral of time weighted by ambient pressure is
accumulated. Gas consumption is roughly proportional to the integral, so
pressure drop of a segment without sensor readings can be distributed
between its samples.

Discrete integration of a sample lasting ``dt`` seconds at depth ``d``
[mm] is

    .. math::

        pt = dt * (1 + d / 10000)

For example, 30 seconds at 18m adds 84 to the integral.
"""

import logging

from .const import ATM_DEPTH

logger = logging.getLogger(__name__)


class Segment(object):
    """
    Cylinder pressure segment.

    The end pressure of a segment is zero until it is resolved by a sensor
    reading or by recorded end pressure of a cylinder. The end time of a
    segment is null until the segment is closed.

    :var start: Start pressure [mbar].
    :var end: End pressure [mbar].
    :var t_start: Start time [s].
    :var t_end: End time [s].
    :var pressure_time: Pressure-time integral.
    """
    def __init__(self, start, t_start):
        self.start = start
        self.end = 0
        self.t_start = t_start
        self.t_end = None
        self.pressure_time = 0.0


    @property
    def initial(self):
        """
        True if segment is initial segment of a cylinder.
        """
        return self.t_start < 0


    def __repr__(self):
        return 'Segment(start={}, end={}, t_start={}, t_end={},' \
            ' pressure_time={:.4f})'.format(
                self.start, self.end, self.t_start, self.t_end,
                self.pressure_time
            )


def pressure_time(dt, depth):
    """
    Calculate pressure-time integral of a sample.

    :param dt: Duration of a sample [s].
    :param depth: Depth of a sample [mm].
    """
    return dt * (1 + depth / ATM_DEPTH)


class SegmentTracker(object):
    """
    Pressure segments tracker.

    The tracker receives dive samples in time order and maintains ordered
    list of pressure segments for each cylinder. Each list starts with
    initial segment, which carries recorded start pressure of a cylinder.

    :var segments: List of pressure segments for each cylinder.
    :var current: Currently open segment.
    """
    def __init__(self, cylinders):
        """
        Create pressure segments tracker.

        :param cylinders: Cylinders of a dive.
        """
        self.segments = [[Segment(c.start, -1)] for c in cylinders]
        self.current = None
        self._pressure = 0
        self._time = 0


    def on_sample(self, cylinder, pressure, time, depth, same_cylinder):
        """
        Track pressure segments for next dive sample.

        :param cylinder: Index of active cylinder.
        :param pressure: Sensor pressure of active cylinder [mbar].
        :param time: Time of the sample [s].
        :param depth: Depth of the sample [mm].
        :param same_cylinder: False if active cylinder has changed since
            previous sample.
        """
        if self.current is None:
            self.current = self.segments[cylinder][-1]

        prev_pressure = self._pressure
        prev_time = self._time
        pt = pressure_time(time - prev_time, depth)

        # sensor started reporting after a gap
        resumed = same_cylinder and pressure and not prev_pressure
        toggled = bool(pressure) != bool(prev_pressure)

        if not same_cylinder or toggled:
            current = self.current
            if resumed:
                current.pressure_time += pt
                self._close(current, pressure, prev_time)
            else:
                self._close(current, prev_pressure, prev_time)
                if pressure:
                    self._resolve(cylinder, pressure)

            self.current = Segment(pressure, time)
            self.segments[cylinder].append(self.current)

            if __debug__:
                logger.debug('segment opened for cylinder {}: {}'.format(
                    cylinder, self.current
                ))

        if not resumed:
            self.current.pressure_time += pt

        self._pressure = pressure
        self._time = time


    def finish(self, cylinders):
        """
        Close the walk over dive samples.

        The open segment gets end time of the last sample. Unresolved last
        segment of each used cylinder is resolved with recorded end
        pressure of the cylinder.

        :param cylinders: Cylinders of a dive.
        """
        if self.current is not None:
            self.current.t_end = self._time

        for k, (cyl, segments) in enumerate(zip(cylinders, self.segments)):
            if cyl.end and len(segments) > 1 and not segments[-1].end:
                segments[-1].end = cyl.end
                logger.debug('cylinder {} end pressure {}mbar'.format(
                    k, cyl.end
                ))


    def _close(self, segment, pressure, time):
        """
        Close a segment.

        :param segment: Segment to close.
        :param pressure: End pressure, zero if unknown.
        :param time: End time.
        """
        segment.end = pressure
        segment.t_end = time
        assert segment.initial or segment.t_start <= segment.t_end, segment


    def _resolve(self, cylinder, pressure):
        """
        Resolve end pressure of last segment of a cylinder with sensor
        reading taken when the cylinder is back in use.

        :param cylinder: Index of cylinder.
        :param pressure: Sensor pressure [mbar].
        """
        last = self.segments[cylinder][-1]
        if not last.initial and last.t_end is not None and not last.end:
            last.end = pressure
            logger.debug('cylinder {} segment resolved: {}'.format(
                cylinder, last
            ))


# vim: sw=4:et:ai
