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
Dive profile series analysis.

The analysis of a series consists of

- minimum and maximum of tank pressure and temperature
- smoothing of depth curve
- vertical velocity classification
- minimum, maximum and average depth within time windows around each
  point
"""

import logging

from .series import Velocity
from . import const

logger = logging.getLogger(__name__)


def _div(a, b):
    """
    Integer division rounding toward zero.
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def velocity(speed):
    """
    Classify vertical speed.

    Ascent and descent share boundaries of slow, moderate and fast
    velocity classes, but stable velocity range is narrower for ascent.

    :param speed: Vertical speed [mm/s], ascent is negative.
    """
    if speed < const.VELOCITY_CRAZY_ASCENT: # faster than 60ft/min
        v = Velocity.CRAZY
    elif speed < const.VELOCITY_FAST_ASCENT:
        v = Velocity.FAST
    elif speed < const.VELOCITY_MODERATE_ASCENT:
        v = Velocity.MODERATE
    elif speed < const.VELOCITY_SLOW_ASCENT:
        v = Velocity.SLOW
    elif speed < const.VELOCITY_STABLE:
        v = Velocity.STABLE
    elif speed < const.VELOCITY_SLOW_DESCENT:
        v = Velocity.SLOW
    elif speed < const.VELOCITY_MODERATE_DESCENT:
        v = Velocity.MODERATE
    elif speed < const.VELOCITY_FAST_DESCENT: # up to 100ft/min
        v = Velocity.FAST
    else:
        v = Velocity.CRAZY
    return v


def extrema(series):
    """
    Find minimum and maximum of tank pressure and temperature.

    Zero and unknown values are skipped. The minimum and maximum pressure
    of the series are updated only when exceeded by point pressure.

    :param series: Dive profile series.
    """
    for point in series:
        pressure = point.tank_pressure
        temperature = point.temperature

        if pressure:
            if not series.minpressure or pressure < series.minpressure:
                series.minpressure = pressure
            if pressure > series.maxpressure:
                series.maxpressure = pressure

        if temperature:
            if not series.mintemp or temperature < series.mintemp:
                series.mintemp = temperature
            if temperature > series.maxtemp:
                series.maxtemp = temperature


def smooth(series):
    """
    Smooth depth curve with 5-point triangular window.

    Only points with full window of dive samples are smoothed.

    :param series: Dive profile series.
    """
    for i in series.analysed()[2:-2]:
        depth = series[i - 2].depth + 2 * series[i - 1].depth \
            + 3 * series[i].depth + 2 * series[i + 1].depth \
            + series[i + 2].depth
        series[i].smoothed = (depth + 4) // 9


def speed(p1, p2):
    """
    Calculate vertical speed between two points [mm/s].

    Null is returned for points at the same time.

    :param p1: Earlier point.
    :param p2: Later point.
    """
    dt = p2.time - p1.time
    if dt == 0:
        return None
    return _div(p2.depth - p1.depth, dt)


def classify(series, lookback=const.VELOCITY_LOOKBACK,
        limit=const.VELOCITY_LOOKBACK_LIMIT):
    """
    Classify vertical velocity of series points.

    Velocity between closely spaced samples is noisy. When a sample
    interval is shorter than `lookback` seconds and the velocity is not
    fast, then the velocity is calculated using the most recent point at
    least `lookback` seconds earlier. At most `limit` points are looked
    back.

    :param series: Dive profile series.
    :param lookback: Minimum interval of velocity calculation [s].
    :param limit: Maximum amount of points to look back.
    """
    for i in series.analysed():
        point = series[i]
        v = speed(series[i - 1], point)
        if v is None:
            point.velocity = Velocity.STABLE
            continue

        point.velocity = velocity(v)
        if point.time - series[i - 1].time < lookback \
                and point.velocity < Velocity.FAST:
            k = i - 2
            while k > 0 and i - k < limit \
                    and point.time - series[k].time < lookback:
                k -= 1

            if i - k >= limit and point.time - series[k].time < lookback:
                logger.warning(
                    'velocity lookback limit reached at {}s'.format(point.time)
                )

            v = speed(series[k], point)
            point.velocity = Velocity.STABLE if v is None else velocity(v)


def window_stats(series, index, width):
    """
    Find minimum and maximum depth points and average depth within time
    window around a series point.

    The window spans `width` seconds before and after the point. On equal
    depth, the first point found is minimum or maximum.

    :param series: Dive profile series.
    :param index: Index of series point.
    :param width: Half-width of time window [s].
    """
    time = series[index].time
    p = index

    # go back in time
    while p > 0:
        if series[p - 1].time < time - width:
            break
        p -= 1

    # then go forward until a point is past the time
    lo = hi = p
    total = series[p].depth
    nr = 1
    p += 1
    n = len(series)
    while p < n and series[p].time <= time + width:
        depth = series[p].depth
        total += depth
        nr += 1
        if depth < series[lo].depth:
            lo = p
        if depth > series[hi].depth:
            hi = p
        p += 1

    return lo, hi, (total + nr // 2) // nr


def minmax(series, windows=const.WINDOWS):
    """
    Calculate depth statistics for each series point and for each time
    window.

    :param series: Dive profile series.
    :param windows: Half-widths of time windows [s].
    """
    for i, point in enumerate(series):
        stats = [window_stats(series, i, w) for w in windows]
        point.min = [s[0] for s in stats]
        point.max = [s[1] for s in stats]
        point.avg = [s[2] for s in stats]


def analyze(series, windows=const.WINDOWS, lookback=const.VELOCITY_LOOKBACK,
        limit=const.VELOCITY_LOOKBACK_LIMIT):
    """
    Analyze dive profile series.

    :param series: Dive profile series.
    :param windows: Half-widths of depth statistics time windows [s].
    :param lookback: Minimum interval of velocity calculation [s].
    :param limit: Maximum amount of points to look back for velocity
        calculation.
    """
    extrema(series)
    smooth(series)
    classify(series, lookback, limit)
    minmax(series, windows)

    if __debug__:
        logger.debug(
            'series analysed: pressure {}-{}mbar, temperature {}-{}mK'.format(
                series.minpressure, series.maxpressure, series.mintemp,
                series.maxtemp
            ))
    return series


# vim: sw=4:et:ai
