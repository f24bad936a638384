"""
Level-gated tracing of the zero counting computation.

Any function which should report when it is entered and left is
decorated with "@traced(level)".  Nothing is printed unless the level of
the current tracer is at least that level.  The levels are:

  1  progress of the Bistritz procedure itself;
  2  initialization, recurrence and singular steps;
  3  the symmetric polynomial primitives.

The default tracer takes its level from the environment variable
ZEROCOUNT_TRACE, and is silent when that is unset.

>>> import io
>>> out = io.StringIO()
>>> T = Tracer(2, file=out)
>>> T.message(1, 'seen at level %d', 1)
>>> T.message(3, 'not seen')
>>> print(out.getvalue(), end='')
# seen at level 1
"""
from contextlib import contextmanager
import decorator
import os, sys

class Tracer(object):
    """
    Writes trace lines, each starting with '# ', to a file-like object.
    When file is None the lines go to whatever sys.stdout is at the time.
    """
    def __init__(self, level=0, file=None):
        self.level = level
        self.file = file

    def __repr__(self):
        return '<Tracer level=%d>'%self.level

    def enabled(self, level):
        return self.level >= level

    def _write(self, text):
        out = self.file if self.file is not None else sys.stdout
        out.write('# ' + text + '\n')

    def message(self, level, fmt, *args):
        if self.level >= level:
            self._write(fmt%args if args else fmt)

    def enter(self, name):
        self._write('%s(): entering...>'%name)

    def leave(self, name):
        self._write('%s(): ...leaving <'%name)

    def show_T(self, level, n, T, sigma):
        """Print the n-th polynomial of the recursion, its lambda and sigma."""
        if self.level >= level:
            from .polyio import format_flint
            from .symmetric import lambda_index
            self._write('T_%d = %s'%(n, format_flint(T)))
            self._write('lambda_%d = %d, sigma_%d = %s'%(
                n, lambda_index(T), n, sigma))

def _level_from_environment(name='ZEROCOUNT_TRACE'):
    value = os.environ.get(name, '0').strip() or '0'
    try:
        return int(value)
    except ValueError:
        raise ValueError('%s must be an integer, not %r.'%(name, value))

_current = Tracer(_level_from_environment())

def current_tracer():
    return _current

def set_tracer(tracer):
    """Install tracer as the current tracer and return the previous one."""
    global _current
    previous, _current = _current, tracer
    return previous

@contextmanager
def use_tracer(tracer):
    """
    Make tracer current for the duration of a with block.

    >>> import io
    >>> with use_tracer(Tracer(5, file=io.StringIO())) as T:
    ...     current_tracer() is T
    True
    >>> current_tracer() is T
    False
    """
    previous = set_tracer(tracer)
    try:
        yield tracer
    finally:
        set_tracer(previous)

def _traced(function, level, *args, **kwargs):
    tracer = _current
    if tracer.level < level:
        return function(*args, **kwargs)
    tracer.enter(function.__name__)
    try:
        return function(*args, **kwargs)
    finally:
        tracer.leave(function.__name__)

def traced(level):
    """
    Decorator reporting entry and exit of a function at the given level.
    The exit is reported even when the function raises.

    >>> import io
    >>> @traced(1)
    ... def fail():
    ...     raise ValueError('failed')
    >>> out = io.StringIO()
    >>> with use_tracer(Tracer(1, file=out)):
    ...     fail()
    Traceback (most recent call last):
    ...
    ValueError: failed
    >>> print(out.getvalue(), end='')
    # fail(): entering...>
    # fail(): ...leaving <
    """
    def decorate(function):
        wrapper = decorator.decorate(
            function, lambda f, *args, **kwargs: _traced(f, level, *args, **kwargs))
        wrapper.__module__ = function.__module__
        return wrapper
    return decorate
