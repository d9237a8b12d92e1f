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
Tests for DiveProfile output functions and coroutines.
"""

import io

from diveprofile.engine import Engine
from diveprofile.output import csv_writer, write_csv
from diveprofile.flow import coroutine
from diveprofile.series import Series

from .tools import _dive_a

import unittest
from unittest import mock


class CSVWriterTestCase(unittest.TestCase):
    """
    Tests for saving dive profile series in a CSV file.
    """
    def setUp(self):
        self.series = Engine().calculate(_dive_a())


    def test_write_csv(self):
        """
        Test saving dive profile series in CSV file
        """
        f = io.StringIO()
        write_csv(f, self.series)

        st = f.getvalue().split('\n')

        self.assertEqual(7, len(st))
        self.assertEqual(11, len(st[0].split(',')))
        self.assertEqual(11, len(st[1].split(',')))
        self.assertEqual('', st[-1])
        self.assertTrue(st[0].startswith('time,depth,smoothed,'))
        self.assertTrue(
            st[3].startswith('60,18000,12222,,177272,,0,moderate,'), st[3]
        )
        self.assertTrue(st[5].startswith('120,0,,160000,,,0,crazy,'), st[5])


    def test_write_csv_samples(self):
        """
        Test saving dive profile series reads series samples once
        """
        points = self.series.samples
        f = io.StringIO()
        with mock.patch.object(Series, 'samples',
                new_callable=mock.PropertyMock) as samples:
            samples.return_value = points
            write_csv(f, self.series)
            self.assertEqual(1, samples.call_count)

        self.assertEqual(7, len(f.getvalue().split('\n')))


    def test_forward(self):
        """
        Test forwarding of points by CSV writer
        """
        data = []
        @coroutine
        def sink():
            while True:
                v = (yield)
                data.append(v)

        f = io.StringIO()
        writer = csv_writer(f, self.series, sink())
        for p in self.series.samples:
            writer.send(p)

        self.assertEqual(5, len(data))
        self.assertIs(self.series[2], data[0])


# vim: sw=4:et:ai
