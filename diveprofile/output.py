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
DiveProfile output functions and coroutines.

The implemented coroutines save dive profile series points in a CSV file.
"""

import csv
import logging

from .flow import coroutine
from .series import Velocity

logger = logging.getLogger(__name__)


def _value(v):
    return '' if v is None else v


@coroutine
def csv_writer(f, series, target=None):
    """
    Write dive profile series points into a CSV file.

    Unknown values are written as empty strings. For each depth statistics
    window, the minimum and maximum depth and the average depth is
    written.

    :param f: File object.
    :param series: Dive profile series of the points.
    :param target: Optional coroutine to forward points to.
    """
    header = [
        'time', 'depth', 'smoothed', 'pressure', 'interpolated',
        'temperature', 'cylinder', 'velocity', 'min_depth', 'max_depth',
        'avg_depth'
    ]

    fcsv = csv.writer(f)
    fcsv.writerow(header)

    while True:
        point = yield
        min_depth = (series[k].depth for k in point.min)
        max_depth = (series[k].depth for k in point.max)

        fcsv.writerow([
            point.time, point.depth, _value(point.smoothed),
            _value(point.pressure or None), _value(point.interpolated),
            _value(point.temperature or None), point.cylinder,
            Velocity.NAMES[point.velocity],
            ' '.join(str(d) for d in min_depth),
            ' '.join(str(d) for d in max_depth),
            ' '.join(str(d) for d in point.avg),
        ])

        if target:
            target.send(point)


def write_csv(f, series):
    """
    Write dive profile series samples into a CSV file.

    :param f: File object.
    :param series: Dive profile series.
    """
    points = series.samples
    writer = csv_writer(f, series)
    for point in points:
        writer.send(point)
    logger.debug('written {} points'.format(len(points)))


# vim: sw=4:et:ai
