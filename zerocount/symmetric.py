# -*- coding: utf-8 -*-
"""
Primitives for formally symmetric and antisymmetric polynomials.

A polynomial P of formal length n is formally symmetric if the
coefficient of x^k equals the coefficient of x^(n-1-k) for every k, and
formally antisymmetric if they differ by a sign.  The formal length may
exceed len(P) when P has vanishing low order coefficients; the top ones
then vanish too, so the nonzero coefficients from lambda(P) to deg(P)
form a (anti)symmetric block on their own.  The functions below use this
to do only half of the arithmetic that the generic operations need.

All of them work directly on the integer numerators of a
RationalPolynomial, whose common denominator is carried along.
"""

from fractions import Fraction
from .polynomial import RationalPolynomial
from .trace import traced

@traced(3)
def lambda_index(poly):
    """
    Return the smallest degree with a nonzero coefficient, or 0 for the
    zero polynomial.

    >>> lambda_index(RationalPolynomial([0, 0, 5, 1]))
    2
    >>> lambda_index(RationalPolynomial([]))
    0
    """
    for i, c in enumerate(poly.coeffs):
        if c:
            return i
    return 0

def coefficient_at(poly, n):
    """
    The coefficient of x^n, which is zero whenever n < 0 or n >= len(poly).
    """
    return poly[n]

@traced(3)
def divide_by_x_minus_1_antisymmetric(poly):
    """
    Divide a formally antisymmetric polynomial by (x - 1).

    The quotient is formally symmetric, so only its upper half is
    computed, by Horner's rule at 1, and the lower half is copied from
    it.  The remainder vanishes and is discarded.  The antisymmetry of
    poly is not checked.

    >>> divide_by_x_minus_1_antisymmetric(RationalPolynomial([-1, 0, 0, 1]))
    RationalPolynomial([1, 1, 1])
    >>> divide_by_x_minus_1_antisymmetric(RationalPolynomial([0, 1, 0, -1]))
    RationalPolynomial([0, -1, -1])
    """
    if poly.is_zero():
        return RationalPolynomial.zero()
    deg = poly.degree()
    start = lambda_index(poly)
    length = len(poly) - start
    mid = start + length//2
    # After the running sum, work[i] is the quotient coefficient of x^(i-1).
    work = list(poly.coeffs)
    for i in range(deg - 1, mid - 1, -1):
        work[i] += work[i + 1]
    for i in range(1, length//2):
        work[start + i] = work[deg + 1 - i]
    if start >= 1:
        work[start] = 0
    return RationalPolynomial.from_numerators(work[1:], poly.den)

@traced(3)
def evaluate_symmetric_at_1(poly):
    """
    Return P(1) for a formally symmetric polynomial P, summing only the
    lower half of its nonzero block.

    >>> evaluate_symmetric_at_1(RationalPolynomial([7, -10, 7]))
    Fraction(4, 1)
    >>> evaluate_symmetric_at_1(RationalPolynomial([0, '1/2', '1/2']))
    Fraction(1, 1)
    """
    if poly.is_zero():
        return Fraction(0)
    nums = poly.coeffs
    start = lambda_index(poly)
    length = len(nums) - start
    mid = start + length//2
    total = 2*sum(nums[start:mid])
    if length%2:
        total += nums[mid]
    return Fraction(total, poly.den)

@traced(3)
def deflate_root_at_1(poly):
    """
    Remove every factor (x - 1) from poly.  Returns the pair
    (multiplicity, quotient).  The zero polynomial has multiplicity 0.

    >>> deflate_root_at_1(RationalPolynomial([1, -3, 3, -1]))
    (3, RationalPolynomial([-1]))
    >>> deflate_root_at_1(RationalPolynomial([1, 0, 1]))
    (0, RationalPolynomial([1, 0, 1]))
    """
    count = 0
    if poly.is_zero():
        return count, poly
    while True:
        # Horner at 1: work[i] becomes the quotient coefficient of x^(i-1)
        # and work[0] the remainder P(1).
        work = list(poly.coeffs)
        for i in range(len(work) - 2, -1, -1):
            work[i] += work[i + 1]
        if work[0]:
            return count, poly
        count += 1
        poly = RationalPolynomial.from_numerators(work[1:], poly.den)
