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
Test for DiveProfile data flow processing functions and coroutines.
"""

from diveprofile.flow import sender, split, coroutine

import unittest

class SenderTestCase(unittest.TestCase):
    """
    Sender decorator tests.
    """
    def test_sender(self):
        """
        Test sender decorator
        """
        def f(n):
            return range(n)

        data = []
        @coroutine
        def printer():
            while True:
                v = yield
                data.append(v)

        fd = sender(f, printer)
        result = list(fd(3))
        self.assertEqual([0, 1, 2], result)
        self.assertEqual([0, 1, 2], data)


    def test_sender_restart(self):
        """
        Test sender decorator creating new pipeline on each start
        """
        def f(n):
            return range(n)

        started = []
        @coroutine
        def counter():
            started.append(1)
            while True:
                yield

        fd = sender(f, counter)
        list(fd(2))
        list(fd(2))
        self.assertEqual(2, len(started))


    def test_sender_close(self):
        """
        Test sender decorator closing pipeline at the end of stream
        """
        def f(n):
            return range(n)

        events = []
        @coroutine
        def sink():
            try:
                while True:
                    v = yield
                    events.append(v)
            except GeneratorExit:
                events.append('closed')
                raise

        fd = sender(f, sink)
        result = fd(2)
        self.assertEqual(0, next(result))
        self.assertEqual([0], events)

        self.assertEqual([1], list(result))
        self.assertEqual([0, 1, 'closed'], events)


    def test_sender_abandoned(self):
        """
        Test sender decorator closing pipeline of abandoned stream
        """
        def f(n):
            return range(n)

        events = []
        @coroutine
        def sink():
            try:
                while True:
                    yield
            except GeneratorExit:
                events.append('closed')
                raise

        result = sender(f, sink)(10)
        next(result)
        result.close()
        self.assertEqual(['closed'], events)



class SplitTestCase(unittest.TestCase):
    """
    Split coroutine tests.
    """
    def test_split(self):
        """
        Test split coroutine
        """
        d1 = []
        d2 = []
        @coroutine
        def collect(data):
            while True:
                v = yield
                data.append(v)

        t = split(collect(d1), collect(d2))
        t.send(1)
        t.send(2)
        self.assertEqual([1, 2], d1)
        self.assertEqual([1, 2], d2)


    def test_split_close(self):
        """
        Test split coroutine closing its targets
        """
        closed = []
        @coroutine
        def target(name):
            try:
                while True:
                    yield
            except GeneratorExit:
                closed.append(name)
                raise

        t = split(target('a'), target('b'))
        t.send(1)
        t.close()
        self.assertEqual(['a', 'b'], closed)


# vim: sw=4:et:ai
