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
Dive profile annotations.

The functions select data, which should be annotated on a dive profile
plot, i.e. depth of deepest and shallowest points or temperature every
few minutes. They also calculate plot extent, so short and shallow dives
are not stretched over whole plot area.

The functions do not paint anything.
"""

from collections import namedtuple

from .const import PADDING_HEAD

Label = namedtuple('Label', 'kind time value cylinder')
Label.__new__.__defaults__ = (None,)
Label.__doc__ = """
Dive profile annotation.

:var kind: Annotation kind, i.e. `deep`, `shallow`, `temperature`,
    `start` or `end`.
:var time: Time of annotated value [s].
:var value: Annotated value.
:var cylinder: Cylinder index for cylinder pressure annotations.
"""

# depth below which depth is not annotated [mm]
MARKER_MIN_DEPTH = 2000

# minimum time between temperature annotations [s]
TEMPERATURE_INTERVAL = 300

# minimum difference of final temperature to be annotated [mK]
TEMPERATURE_END_DELTA = 500


def _round_up(x, y):
    return (x + y - 1) // y * y


def time_limit(series):
    """
    Calculate time extent of dive profile plot [s].

    The extent is at least 30 minutes, rounded up to 5 minutes with at
    least 2.5 minutes to spare.

    :param series: Dive profile series.
    """
    return max(30 * 60, _round_up(series.maxtime + 150, 5 * 60))


def depth_limit(series):
    """
    Calculate depth extent of dive profile plot [mm].

    The extent is at least 30m, rounded up to 10m with at least 3m to
    spare.

    :param series: Dive profile series.
    """
    return max(30000, _round_up(series.maxdepth + 3000, 10000))


def depth_markers(series):
    """
    Find deepest and shallowest points of dive profile.

    A point is marked if it is the deepest or shallowest point of the
    widest depth statistics window around it.

    :param series: Dive profile series.
    """
    labels = []
    for i in series.analysed():
        point = series[i]
        if point.depth < MARKER_MIN_DEPTH:
            continue
        if point.max and point.max[-1] == i:
            labels.append(Label('deep', point.time, point.depth))
        if point.min and point.min[-1] == i:
            labels.append(Label('shallow', point.time, point.depth))
    return labels


def temperature_labels(series):
    """
    Select temperatures to be annotated.

    The temperatures are annotated at least every 5 minutes. The final
    temperature is annotated if it differs from last annotated value by
    more than 0.5K.

    No temperatures are annotated if temperature does not change during a
    dive.

    :param series: Dive profile series.
    """
    if series.maxtemp <= series.mintemp:
        return []

    labels = []
    last = 0
    time = 0
    last_temperature = last_labelled = 0
    for i in series.analysed():
        point = series[i]
        if not point.temperature:
            continue

        last_temperature = point.temperature
        time = point.time
        if time < last + TEMPERATURE_INTERVAL:
            continue
        last = time
        labels.append(Label('temperature', time, point.temperature))
        last_labelled = point.temperature

    if abs(last_temperature - last_labelled) > TEMPERATURE_END_DELTA:
        labels.append(Label('temperature', time, last_temperature))
    return labels


def pressure_labels(series):
    """
    Select cylinder pressures to be annotated.

    The start pressure of a cylinder is annotated when the cylinder is
    used for the first time. The end pressure is annotated at the last use
    of a cylinder.

    :param series: Dive profile series.
    """
    labels = []
    seen = set()
    last = {}
    indices = series.analysed()
    for i in indices:
        point = series[i]
        if point.same_cylinder:
            continue

        cyl = point.cylinder
        if cyl not in seen:
            seen.add(cyl)
            if point.tank_pressure:
                labels.append(Label('start', point.time, point.tank_pressure, cyl))

        if i > PADDING_HEAD:
            prev = series[i - 1]
            last[prev.cylinder] = prev

    if indices:
        point = series[indices[-1]]
        last[point.cylinder] = point

    for cyl in sorted(last):
        point = last[cyl]
        if point.tank_pressure:
            labels.append(Label('end', point.time, point.tank_pressure, cyl))
    return labels


# vim: sw=4:et:ai
