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
DiveProfile mods.

The mods are coroutines plugged into the stream of dive samples processed
by DiveProfile engine. Currently supported mods are

- dive sample validator

More mods can be implemented, i.e. to detect dive computer clock jumps.
"""

import logging

from .const import MAX_CYLINDERS
from .error import DataError
from .flow import coroutine

logger = logging.getLogger(__name__)


class SampleValidator(object):
    """
    Dive sample validator (coroutine class).

    The validator verifies that

    - samples are ordered by time
    - depth, pressure and temperature are not negative
    - active cylinder index is within cylinder table

    Create coroutine object, then call it to start the coroutine.

    :var max_cylinders: Size of cylinder table.
    :var validated: Amount of samples validated since the coroutine start.
    """
    def __init__(self, max_cylinders=MAX_CYLINDERS):
        """
        Create coroutine object.

        :param max_cylinders: Size of cylinder table.
        """
        self.max_cylinders = max_cylinders
        self.validated = 0


    @coroutine
    def __call__(self):
        """
        Start the coroutine.
        """
        logger.debug('started sample validator')
        self.validated = 0
        prev = None
        try:
            while True:
                sample = yield

                if prev is not None and sample.time < prev.time:
                    raise DataError('Sample time goes backwards at {}' \
                        ' (previous {})'.format(sample, prev))
                if sample.depth < 0:
                    raise DataError('Negative depth at {}'.format(sample))
                if sample.pressure < 0 or sample.temperature < 0:
                    raise DataError('Negative pressure or temperature' \
                        ' at {}'.format(sample))
                if not 0 <= sample.cylinder < self.max_cylinders:
                    raise DataError('Cylinder index out of range at {}' \
                        .format(sample))
                prev = sample
                self.validated += 1
        except GeneratorExit:
            logger.debug('sample validator closed after {} samples'.format(
                self.validated
            ))
            raise


# vim: sw=4:et:ai
