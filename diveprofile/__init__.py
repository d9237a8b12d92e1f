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
Basic Usage
-----------

The DiveProfile library exports its main API via ``diveprofile`` module.

Dive profile series is calculated from dive computer samples with
:func:`~diveprofile.build_series` function. The samples below come from a
dive computer, which lost connection with pressure transmitter for one
minute::

    >>> import diveprofile
    >>> from diveprofile.dive import Dive, Sample, Cylinder
    >>> samples = [
    ...     Sample(0, 0, pressure=200000),
    ...     Sample(30, 10000, pressure=190000),
    ...     Sample(60, 18000),
    ...     Sample(90, 18000),
    ...     Sample(120, 0, pressure=160000),
    ... ]
    >>> cylinder = Cylinder(12000, 232000, 'D12', 200000, 160000)
    >>> dive = Dive(samples, [cylinder])
    >>> series = diveprofile.build_series(dive)

The series contains four padding points around dive samples::

    >>> len(series)
    9
    >>> series.maxtime, series.maxdepth
    (120, 18000)

Sensor pressure is never changed, the missing cylinder pressure is
estimated using pressure drop and depth of the samples::

    >>> [p.pressure for p in series.samples]
    [200000, 190000, 0, 0, 160000]
    >>> [p.interpolated for p in series.samples]
    [None, None, 177272, 164544, None]

Vertical velocity of each sample is classified::

    >>> from diveprofile.series import Velocity
    >>> [Velocity.NAMES[p.velocity] for p in series.samples]
    ['stable', 'fast', 'moderate', 'stable', 'crazy']

Configuring Engine
------------------
The :func:`~diveprofile.create` function creates DiveProfile engine, which
can be configured before calculating a series::

    >>> engine = diveprofile.create()
    >>> engine.windows
    (90, 180, 270)
    >>> engine.windows = (60, 120, 180)
    >>> series = engine.calculate(dive)
    >>> len(series.samples[0].avg)
    3

"""

from .engine import Engine
from .flow import sender
from .mod import SampleValidator

__version__ = '0.1.0'


def create(validate=True):
    """
    Create dive profile analysis engine.

    The dive sample validation is enabled by default.

    :param validate: Validate dive samples.
    """
    engine = Engine()

    pipeline = []
    if validate:
        pipeline.append(SampleValidator())

    engine.samples = sender(engine.samples, *pipeline)
    return engine


def build_series(dive):
    """
    Calculate dive profile series of a dive using default engine
    configuration.

    :param dive: Dive record.
    """
    return create().calculate(dive)


__all__ = ['create', 'build_series', 'Engine']

# vim: sw=4:et:ai
