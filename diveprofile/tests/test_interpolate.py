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
Missing cylinder pressure interpolation tests.
"""

from diveprofile.dive import Dive, Sample, cylinder_table
from diveprofile.engine import Engine
from diveprofile.interpolate import find_segment, consumption, \
    fill_missing_pressures
from diveprofile.segment import Segment

from .tools import _dive_a, D12

import unittest


def _segment(start, end, t_start, t_end, pt):
    s = Segment(start, t_start)
    s.end = end
    s.t_end = t_end
    s.pressure_time = pt
    return s


class FindSegmentTestCase(unittest.TestCase):
    """
    Segment search tests.
    """
    def setUp(self):
        self.segments = [
            _segment(200000, 0, -1, 0, 0),
            _segment(200000, 190000, 0, 30, 60),
            _segment(0, 160000, 60, 90, 198),
            _segment(160000, 0, 120, 120, 0),
        ]


    def test_find(self):
        """
        Test finding segment containing given time
        """
        self.assertEqual(1, find_segment(self.segments, 0, 0))
        self.assertEqual(1, find_segment(self.segments, 0, 30))
        self.assertEqual(2, find_segment(self.segments, 0, 60))
        self.assertEqual(2, find_segment(self.segments, 0, 90))
        self.assertEqual(3, find_segment(self.segments, 0, 150))


    def test_find_forward(self):
        """
        Test segment search moves only forward
        """
        self.assertEqual(2, find_segment(self.segments, 2, 30))



class ConsumptionTestCase(unittest.TestCase):
    """
    Segment run consumption tests.
    """
    def test_resolved(self):
        """
        Test consumption of resolved segment
        """
        segments = [_segment(0, 160000, 60, 90, 200)]
        v = consumption(segments, 0, 190000)
        self.assertEqual(-150, v)


    def test_run(self):
        """
        Test consumption of run of segments
        """
        segments = [
            _segment(0, 0, 30, 30, 60),
            _segment(0, 164000, 90, 90, 120),
        ]
        v = consumption(segments, 0, 200000)
        self.assertEqual(-200, v)


    def test_unresolved(self):
        """
        Test consumption of unresolved run of segments
        """
        segments = [
            _segment(0, 0, 30, 30, 60),
            _segment(0, 0, 90, 90, 120),
        ]
        self.assertIsNone(consumption(segments, 0, 200000))


    def test_zero_pressure_time(self):
        """
        Test consumption of segment with zero pressure-time integral
        """
        segments = [_segment(0, 160000, 60, 60, 0)]
        self.assertIsNone(consumption(segments, 0, 190000))



class InterpolationTestCase(unittest.TestCase):
    """
    Missing cylinder pressure interpolation tests.
    """
    def _series(self, dive):
        engine = Engine()
        series, missing = engine._create_series(dive, cylinder_table(dive))
        fill_missing_pressures(series, series.segments)
        return series


    def test_gap(self):
        """
        Test interpolation of sensor gap
        """
        series = self._series(_dive_a(end=0))
        values = [p.interpolated for p in series.samples]
        self.assertEqual([None, None, 177272, 164544, None], values)

        # sensor pressure is never overwritten
        values = [p.pressure for p in series.samples]
        self.assertEqual([200000, 190000, 0, 0, 160000], values)


    def test_gap_monotonic(self):
        """
        Test interpolated pressure decreases within sensor gap
        """
        series = self._series(_dive_a())
        p60, p90 = (p.interpolated for p in series.samples[2:4])
        self.assertTrue(190000 > p60 > p90 > 160000)


    def test_gap_unresolved(self):
        """
        Test interpolation without end pressure
        """
        samples = [
            Sample(0, 0, pressure=200000),
            Sample(30, 10000, pressure=190000),
            Sample(60, 18000),
            Sample(90, 0),
        ]
        series = self._series(Dive(samples, [D12]))
        self.assertTrue(all(p.interpolated is None for p in series))


    def test_gap_end_pressure(self):
        """
        Test interpolation with recorded cylinder end pressure
        """
        samples = [
            Sample(0, 0, pressure=200000),
            Sample(30, 0, pressure=190000),
            Sample(60, 0),
            Sample(90, 0),
        ]
        series = self._series(Dive(samples, [D12._replace(end=130000)]))
        values = [p.interpolated for p in series.samples]
        self.assertEqual([None, None, 160000, 130000], values)


    def test_gap_over_gas_switch(self):
        """
        Test interpolation of sensor gap interrupted by gas switch
        """
        samples = [
            Sample(0, 0, pressure=200000),
            Sample(30, 10000),
            Sample(60, 10000, cylinder=1, pressure=210000),
            Sample(90, 10000),
            Sample(120, 10000, pressure=164000),
        ]
        series = self._series(Dive(samples, [D12, D12]))
        values = [p.interpolated for p in series.samples]
        self.assertEqual([None, 188000, None, 176000, None], values)


    def test_full_sensor_data(self):
        """
        Test interpolation with all sensor pressures available
        """
        samples = [
            Sample(0, 0, pressure=200000),
            Sample(30, 10000, pressure=190000),
            Sample(60, 0, pressure=185000),
        ]
        series = self._series(Dive(samples, [D12]))
        self.assertTrue(all(p.interpolated is None for p in series))


# vim: sw=4:et:ai
