"""
Unimodular roots of Alexander polynomials of small knots.

The Alexander polynomial of a knot is palindromic, so its roots come in
pairs z, 1/z and the number of roots inside the unit circle equals the
number outside.  Knots whose Alexander polynomial has no unimodular roots
are the interesting ones here; the counts below are exact, so a root very
close to the circle is never mistaken for one on it.

    python examples/alexander.py
"""

from zerocount import parse_expression, count_zeros

alexander_polynomials = [
    ('3_1', 't^2 - t + 1'),
    ('4_1', '-t^2 + 3t - 1'),
    ('5_1', 't^4 - t^3 + t^2 - t + 1'),
    ('5_2', '2t^2 - 3t + 2'),
    ('6_1', '-2t^2 + 5t - 2'),
    ('6_2', '-t^4 + 3t^3 - 3t^2 + 3t - 1'),
    ('6_3', 't^4 - 3t^3 + 5t^2 - 3t + 1'),
    ('7_4', '4t^2 - 7t + 4'),
    ('8_20', 't^4 - 2t^3 + 3t^2 - 2t + 1'),
]

def num_unimodular_roots(poly):
    """
    Count roots on the unit circle, with multiplicity.

    >>> num_unimodular_roots([1, -1, 1])
    2
    >>> num_unimodular_roots([1, -3, 2])
    Traceback (most recent call last):
    ...
    ValueError: Not a palindromic polynomial.
    """
    inside, on, outside = count_zeros(poly)
    if inside != outside:
        raise ValueError('Not a palindromic polynomial.')
    return on

if __name__ == '__main__':
    print('%-6s %-30s %s'%('knot', 'Alexander polynomial', 'unimodular roots'))
    for name, text in alexander_polynomials:
        poly = parse_expression(text, var='t')
        print('%-6s %-30s %d'%(name, text, num_unimodular_roots(poly)))
