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
Data flow processing functions and coroutines.

Dive samples can be streamed through a pipeline of coroutines, i.e. to
validate them before a series is built. The pipeline lives as long as the
stream of samples, it is closed when the stream is exhausted or abandoned,
so the coroutines can finish their work.
"""

from functools import wraps


def coroutine(func):
    """
    Decorator for a coroutine function.

    The decorated function returns coroutine advanced to its first
    ``(yield)`` expression, so it is ready to receive values.
    """
    @wraps(func)
    def primed(*args, **kwargs):
        cr = func(*args, **kwargs)
        next(cr)
        return cr
    return primed


@coroutine
def split(*targets):
    """
    Coroutine forwarding each received value to all target coroutines.

    The target coroutines are closed when the coroutine is closed.

    :param targets: Target coroutines.
    """
    try:
        while True:
            value = yield
            for target in targets:
                target.send(value)
    finally:
        for target in targets:
            target.close()


def sender(gen, *factories):
    """
    Decorate generator function `gen`, so each value it produces is sent
    to pipeline coroutines before it is yielded.

    The pipeline coroutines are created by calling functions from the
    `factories` list each time the generator is started and closed when
    the generator finishes.

    :param gen: Generator function.
    :param factories: Functions creating pipeline coroutines.
    """
    @wraps(gen)
    def stream(*args, **kwargs):
        pipeline = split(*[f() for f in factories])
        try:
            for value in gen(*args, **kwargs):
                pipeline.send(value)
                yield value
        finally:
            pipeline.close()
    return stream


# vim: sw=4:et:ai
