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
Interpolation of missing cylinder pressure.

When a dive computer does not report cylinder pressure for a sample, the
pressure is estimated using pressure segment, which contains the sample.
The pressure drop of the segment is distributed between its samples
proportionally to the pressure-time integral of each sample, i.e. for
sample ``i`` in a segment

    .. math::

        P_i = P_{i - 1} + pt_i * (P_{end} - P_{start}) / PT

where :math:`PT` is pressure-time integral of the whole segment and
:math:`pt_i` is pressure-time integral of the sample.

If end pressure of a segment is unknown, then the integrals of following
segments of the same cylinder are added until a segment with known end
pressure is found. Without such segment, there is no gas consumption
information and no pressure is estimated.
"""

import logging

from .const import PADDING_HEAD, PADDING_TAIL
from .segment import pressure_time

logger = logging.getLogger(__name__)


def find_segment(segments, k, time):
    """
    Find index of last segment starting at or before given time.

    The search starts at segment `k` and moves forward only.

    :param segments: Pressure segments of a cylinder.
    :param k: Index of segment to start search from.
    :param time: Time [s].
    """
    n = len(segments)
    while k + 1 < n and segments[k + 1].t_start <= time:
        k += 1
    return k


def consumption(segments, k, pressure):
    """
    Calculate pressure change per pressure-time integral unit for a run of
    segments starting at segment `k`.

    Null is returned if end pressure of the run is unknown or the run has
    zero pressure-time integral.

    :param segments: Pressure segments of a cylinder.
    :param k: Index of first segment of the run.
    :param pressure: Current pressure of the cylinder [mbar].
    """
    n = len(segments)
    pt = segments[k].pressure_time
    while not segments[k].end:
        k += 1
        if k == n:
            return None
        pt += segments[k].pressure_time

    if pt == 0:
        return None
    return (segments[k].end - pressure) / pt


def fill_missing_pressures(series, segments):
    """
    Estimate cylinder pressure for series points without sensor pressure.

    The sensor pressure of a point is never changed, the estimate is stored
    as interpolated pressure.

    :param series: Dive profile series.
    :param segments: Pressure segments of each cylinder.
    """
    current = [s[0].start for s in segments]
    position = [0] * len(segments)
    cylinder = segment = magic = None

    for i in range(PADDING_HEAD, len(series) - len(PADDING_TAIL)):
        point = series[i]
        cyl = point.cylinder
        if point.pressure:
            current[cyl] = point.pressure
            continue

        if cyl != cylinder or segment.t_end < point.time:
            cyl_segments = segments[cyl]
            k = position[cyl] = find_segment(
                cyl_segments, position[cyl], point.time
            )
            cylinder = cyl
            segment = cyl_segments[k]
            magic = consumption(cyl_segments, k, current[cyl])
            if magic is None:
                logger.debug(
                    'no consumption data for cylinder {} at {}s'.format(
                        cyl, point.time
                    ))

        if magic is None:
            continue

        pt = pressure_time(point.time - series[i - 1].time, point.depth)
        point.interpolated = current[cyl] = int(current[cyl] + pt * magic)


# vim: sw=4:et:ai
