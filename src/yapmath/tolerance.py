## tolerance-aware scalar comparisons for yapMath

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""tolerance constants and comparison predicates for **yapMath**

Every floating point decision in yapMath goes through the predicates
in this module.  Each one takes an absolute ``tolerance`` keyword that
defaults to :data:`ZERO_TOLERANCE`, the library-wide "exact" value.
Geometry code usually works at :data:`DEFAULT_TOLERANCE` instead, and
value types carry their own ``tolerance`` field that
:func:`get_tolerance` consults when two objects meet.
"""

from math import inf, isinf, pi

## constants
ZERO_TOLERANCE = 1e-20
DEFAULT_TOLERANCE = 10e-6
pi2 = 2.0*pi
half_pi = pi/2.0

## operations on scalars
## -----------------------

def get_tolerance(*items, tolerance=ZERO_TOLERANCE):
    """Return the tolerance to use when comparing ``items``.

    An explicit tolerance wins.  When the caller leaves it at
    ``ZERO_TOLERANCE``, the loosest ``tolerance`` attribute carried by
    the items is used instead.
    """
    if tolerance != ZERO_TOLERANCE:
        return tolerance
    result = ZERO_TOLERANCE
    for item in items:
        value = getattr(item, 'tolerance', None)
        if value is not None and value > result:
            result = value
    return result

## zero and sign
def is_zero(value, tolerance=ZERO_TOLERANCE):
    """ is the value zero within tolerance
    """
    return abs(value) < tolerance or value == 0

def is_positive(value, tolerance=ZERO_TOLERANCE):
    return value > 0 and not is_zero(value, tolerance)

def is_negative(value, tolerance=ZERO_TOLERANCE):
    return value < 0 and not is_zero(value, tolerance)

def sign(value, tolerance=ZERO_TOLERANCE):
    """ -1, 0 or 1, treating anything within tolerance of zero as zero
    """
    if is_zero(value, tolerance):
        return 0
    return 1 if value > 0 else -1

## comparisons; infinities of the same sign are equal to each other
def is_equal(a, b, tolerance=ZERO_TOLERANCE):
    """ are two scalars the same within tolerance
    """
    if a == b:
        return True
    if isinf(a) or isinf(b):
        return False
    return abs(a-b) < tolerance

def is_greater(a, b, tolerance=ZERO_TOLERANCE):
    return a > b and not is_equal(a, b, tolerance)

def is_greater_or_equal(a, b, tolerance=ZERO_TOLERANCE):
    return a > b or is_equal(a, b, tolerance)

def is_less(a, b, tolerance=ZERO_TOLERANCE):
    return a < b and not is_equal(a, b, tolerance)

def is_less_or_equal(a, b, tolerance=ZERO_TOLERANCE):
    return a < b or is_equal(a, b, tolerance)

def is_within_inclusive(value, lo, hi, tolerance=ZERO_TOLERANCE):
    """ is ``lo <= value <= hi``, with tolerant bounds
    """
    return (is_greater_or_equal(value, lo, tolerance) and
            is_less_or_equal(value, hi, tolerance))

def is_within_exclusive(value, lo, hi, tolerance=ZERO_TOLERANCE):
    return is_greater(value, lo, tolerance) and is_less(value, hi, tolerance)

## misc scalar helpers
def plus_minus(center, delta):
    """ return ``(center + delta, center - delta)``
    """
    return (center + delta, center - delta)

def clamp(value, lo, hi):
    if lo > hi:
        raise ValueError(f'bad bounds passed to clamp: {lo} > {hi}')
    return max(lo, min(hi, value))

def infinity_signed(value):
    """ infinity carrying the sign of ``value``
    """
    return inf if value >= 0 else -inf
