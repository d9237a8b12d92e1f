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
DiveProfile dive profile analysis engine.

The engine builds dive profile series from dive computer samples

#. samples are copied into series points and pressure segments of each
   cylinder are tracked
#. missing cylinder pressure is interpolated
#. the series is analysed (pressure and temperature extrema, smoothing,
   velocity, depth statistics)
"""

import logging

from .analysis import analyze
from .dive import cylinder_table
from .error import ConfigError, DataError
from .interpolate import fill_missing_pressures
from .segment import SegmentTracker
from .series import Series
from . import const

logger = logging.getLogger(__name__)


class Engine(object):
    """
    DiveProfile dive profile analysis engine.

    The engine attributes can be changed before calculation of a series.

    :var windows: Half-widths of depth statistics time windows [s].
    :var velocity_lookback: Minimum interval of velocity calculation [s].
    :var velocity_lookback_limit: Maximum amount of points to look back
        for velocity calculation.
    """
    def __init__(self):
        super().__init__()
        self.windows = const.WINDOWS
        self.velocity_lookback = const.VELOCITY_LOOKBACK
        self.velocity_lookback_limit = const.VELOCITY_LOOKBACK_LIMIT


    def _validate_config(self):
        """
        Validate engine configuration.

        `ConfigError` is raised if configuration is invalid.
        """
        windows = tuple(self.windows)
        if not windows:
            raise ConfigError('No depth statistics windows configured')
        if windows[0] <= 0:
            raise ConfigError(
                'Depth statistics window half-width has to be positive'
            )
        if any(w1 >= w2 for w1, w2 in zip(windows, windows[1:])):
            raise ConfigError(
                'Depth statistics windows have to be strictly increasing'
            )
        if self.velocity_lookback <= 0:
            raise ConfigError('Velocity lookback interval has to be positive')
        if self.velocity_lookback_limit < 2:
            raise ConfigError('Velocity lookback limit has to be at least 2')


    def samples(self, dive):
        """
        Iterate over samples of a dive.

        :param dive: Dive record.
        """
        for sample in dive.samples:
            yield sample


    def _create_series(self, dive, cylinders):
        """
        Create dive profile series and track pressure segments of
        cylinders.

        Returns the series and flag indicating missing sensor pressure.

        :param dive: Dive record.
        :param cylinders: Cylinder table of the dive.
        """
        n = len(dive.samples)
        series = Series(n + const.PADDING_HEAD + len(const.PADDING_TAIL))
        tracker = SegmentTracker(cylinders)

        cylinder = -1
        time = 0
        missing = False
        for i, sample in enumerate(self.samples(dive), const.PADDING_HEAD):
            point = series[i]
            point.time = time = sample.time
            point.depth = depth = sample.depth
            point.same_cylinder = sample.cylinder == cylinder
            point.cylinder = cylinder = sample.cylinder
            point.pressure = sample.pressure
            point.temperature = sample.temperature

            tracker.on_sample(
                cylinder, point.pressure, time, depth, point.same_cylinder
            )
            missing |= not point.pressure

            # the first sample is always analysed, trailing surface
            # samples are not
            if depth or series[i - 1].depth or i == const.PADDING_HEAD:
                series.lastindex = i
            if depth > series.maxdepth:
                series.maxdepth = depth

        tracker.finish(cylinders)

        for i, offset in enumerate(const.PADDING_TAIL, n + const.PADDING_HEAD):
            series[i].time = time + offset

        if series.lastindex is not None:
            series.maxtime = series[series.lastindex].time

        series.endpressure = series.minpressure = cylinders[0].end
        series.maxpressure = cylinders[0].start
        series.meandepth = dive.meandepth
        series.segments = tracker.segments

        logger.debug(
            'series created: {} samples, last index {}, max depth {}mm,' \
            ' missing pressure {}'.format(
                n, series.lastindex, series.maxdepth, missing
            ))
        return series, missing


    def calculate(self, dive):
        """
        Calculate dive profile series of a dive.

        :param dive: Dive record.
        """
        self._validate_config()

        if len(dive.cylinders) > const.MAX_CYLINDERS:
            raise DataError('Too many cylinders: {}'.format(
                len(dive.cylinders)
            ))
        cylinders = cylinder_table(dive)

        series, missing = self._create_series(dive, cylinders)
        if missing:
            fill_missing_pressures(series, series.segments)

        return analyze(
            series, self.windows, self.velocity_lookback,
            self.velocity_lookback_limit
        )


# vim: sw=4:et:ai
