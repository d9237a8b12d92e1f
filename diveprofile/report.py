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
Dive reports.

The reports summarize analysed dive profile series

- gas usage of each cylinder
- surface air consumption (SAC) rate
- ascent rate warnings
"""

from collections import namedtuple, OrderedDict
import logging

from .const import ATM_DEPTH, PADDING_HEAD, SURFACE_PRESSURE
from .dive import cylinder_table
from .series import Velocity

logger = logging.getLogger(__name__)

CylinderUsage = namedtuple(
    'CylinderUsage', 'cylinder start end duration meandepth gas sac'
)
CylinderUsage.__doc__ = """
Cylinder usage information.

:var cylinder: Cylinder index.
:var start: Start pressure [mbar].
:var end: End pressure [mbar].
:var duration: Time of breathing from the cylinder [s].
:var meandepth: Mean depth while breathing from the cylinder [mm].
:var gas: Surface volume of used gas [ml], null if unknown.
:var sac: Surface air consumption rate [ml/min], null if unknown.
"""

AscentWarning = namedtuple('AscentWarning', 'time depth velocity')
AscentWarning.__doc__ = """
Too fast ascent warning.

:var time: Time of a point [s].
:var depth: Depth of a point [mm].
:var velocity: Velocity class.
"""

DiveSummary = namedtuple(
    'DiveSummary',
    'duration maxdepth meandepth mintemp maxtemp cylinders warnings'
)
DiveSummary.__doc__ = """
Dive summary.

:var duration: Dive duration [s].
:var maxdepth: Maximum depth [mm].
:var meandepth: Mean depth [mm].
:var mintemp: Minimum temperature [mK].
:var maxtemp: Maximum temperature [mK].
:var cylinders: Usage of each used cylinder.
:var warnings: Ascent rate warnings.
"""


def gas_volume(size, pressure):
    """
    Calculate surface volume of gas in a cylinder.

    Ideal gas is assumed.

    :param size: Water capacity of a cylinder [ml].
    :param pressure: Cylinder pressure [mbar].
    """
    return size * pressure / SURFACE_PRESSURE


def sac_rate(gas, meandepth, duration):
    """
    Calculate surface air consumption rate [ml/min].

    Null is returned if gas volume or duration is unknown.

    :param gas: Surface volume of used gas [ml].
    :param meandepth: Mean depth [mm].
    :param duration: Duration [s].
    """
    if not gas or not duration:
        return None
    atm = 1 + meandepth / ATM_DEPTH
    return round(gas / (atm * duration / 60))


def cylinder_usage(series, cylinders):
    """
    Calculate usage of each cylinder used during a dive.

    The time between two points is attributed to the cylinder active at
    the later point. The mean depth is time weighted.

    The start and end pressures are the first and last known tank
    pressures of the cylinder. The recorded start and end pressures of a
    cylinder are used when no tank pressure is known.

    :param series: Dive profile series.
    :param cylinders: Cylinder table of a dive.
    """
    data = OrderedDict()
    points = series.samples
    prev = series[PADDING_HEAD - 1]
    for point in points:
        usage = data.setdefault(point.cylinder, [None, None, 0, 0])
        pressure = point.tank_pressure
        if pressure:
            if usage[0] is None:
                usage[0] = pressure
            usage[1] = pressure

        dt = point.time - prev.time
        usage[2] += dt
        usage[3] += dt * (prev.depth + point.depth) / 2
        prev = point

    result = []
    for k in sorted(data):
        start, end, duration, area = data[k]
        cyl = cylinders[k]
        if start is None:
            start = cyl.start
        if end is None:
            end = cyl.end

        meandepth = round(area / duration) if duration else 0
        gas = None
        if cyl.size and start and end and start > end:
            gas = gas_volume(cyl.size, start - end)
        sac = sac_rate(gas, meandepth, duration)

        result.append(CylinderUsage(k, start, end, duration, meandepth, gas, sac))
        logger.debug('cylinder usage: {}'.format(result[-1]))

    return result


def ascent_warnings(series):
    """
    Find points of too fast ascent.

    :param series: Dive profile series.
    """
    return [
        AscentWarning(series[i].time, series[i].depth, series[i].velocity)
        for i in series.analysed()
        if series[i].depth < series[i - 1].depth
            and series[i].velocity >= Velocity.FAST
    ]


def summarize(dive, series):
    """
    Create summary of a dive.

    :param dive: Dive record.
    :param series: Dive profile series of the dive.
    """
    return DiveSummary(
        series.maxtime, series.maxdepth, series.meandepth, series.mintemp,
        series.maxtemp, cylinder_usage(series, cylinder_table(dive)),
        ascent_warnings(series)
    )


# vim: sw=4:et:ai
