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
Generate random dive and calculate its dive profile series.
"""

from diveprofile.dive import Dive, Sample, Cylinder
from diveprofile.report import summarize
import diveprofile

import random
from pprint import pprint

import unittest

class RandomTestCase(unittest.TestCase):
    """
    Generate random dive and calculate its dive profile series.
    """
    def test_random(self):
        """
        Test random dive profile
        """
        # 10min - 2h, sampled every 1-30s
        duration = random.randint(10 * 60, 2 * 60 * 60)
        depth = random.randint(5000, 60000)
        sensor = random.randint(0, 100) / 100
        n = random.randint(1, 4)

        desc = """\
duration: {}
max depth: {}
sensor ratio: {}
cylinders: {}
""".format(duration, depth, sensor, n)

        print(desc)

        cylinders = [
            Cylinder(12000, 232000, 'D12', 220000, random.randint(0, 80000))
            for k in range(n)
        ]
        pressure = [c.start for c in cylinders]
        samples = []
        time = cyl = 0
        while time < duration:
            if random.random() < 0.02:
                cyl = random.randrange(n)
            pressure[cyl] = max(pressure[cyl] - random.randint(0, 300), 1)
            p = pressure[cyl] if random.random() < sensor else 0
            samples.append(Sample(
                time, random.randint(0, depth), 290000, cyl, p
            ))
            time += random.randint(1, 30)

        dive = Dive(samples, cylinders)
        series = diveprofile.build_series(dive)
        self.assertEqual(len(samples) + 4, len(series), desc)
        self.assertTrue(series.lastindex is not None, desc)

        for segments in series.segments:
            times = [s.t_start for s in segments]
            self.assertEqual(sorted(times), times, desc)

        summary = summarize(dive, series)
        self.assertTrue(summary.cylinders, desc)

        pprint(summary)

# vim: sw=4:et:ai
