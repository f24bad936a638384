# -*- coding: utf-8 -*-
"""
Define the RationalPolynomial class, an exact polynomial with rational
coefficients.

The coefficients are stored the way FLINT stores an fmpq_poly: a list of
integer numerators, indexed by ascending degree, over one positive common
denominator.  Every polynomial is kept in canonical form: there is no zero
numerator at the top, the denominator is coprime to the content of the
numerators, and the zero polynomial is the empty list over 1.

>>> P = RationalPolynomial(['1/2', 0, '3/4'])
>>> P
RationalPolynomial([2, 0, 3], 4)
>>> P[0], P[1], P[7]
(Fraction(1, 2), Fraction(0, 1), Fraction(0, 1))
>>> P.degree(), len(P)
(2, 3)
>>> (P - P).is_zero()
True
"""

from fractions import Fraction
from math import gcd
from numbers import Integral, Rational

def sgn(x):
    """Return -1, 0 or 1 according to the sign of the rational x."""
    return (x > 0) - (x < 0)

def as_rational(value):
    """
    Convert an integer, a Fraction or a string such as '3/4' to a
    Fraction.  Floats are refused: their binary value is rarely what was
    meant, and approximate coefficients are not supported.

    >>> as_rational('-6/4')
    Fraction(-3, 2)
    >>> as_rational(0.5)
    Traceback (most recent call last):
    ...
    TypeError: Coefficients must be exact rationals, not float.
    """
    if isinstance(value, (Rational, str)):
        return Fraction(value)
    raise TypeError('Coefficients must be exact rationals, not %s.'%
                    type(value).__name__)

class RationalPolynomial(object):
    """
    A polynomial in Q[x].

    Instantiate with a sequence of rational coefficients, lowest degree
    first.  Use RationalPolynomial.from_numerators to build one directly
    from integer numerators and a common denominator.

    Instances are treated as values: no method modifies its polynomial,
    and every arithmetic operation returns a new canonical polynomial.
    """
    __slots__ = ('coeffs', 'den')

    def __init__(self, coefficients=()):
        values = [as_rational(c) for c in coefficients]
        den = 1
        for v in values:
            den = den*v.denominator//gcd(den, v.denominator)
        self.coeffs = [v.numerator*(den//v.denominator) for v in values]
        self.den = den
        self._canonicalise()

    @classmethod
    def from_numerators(cls, numerators, den=1):
        """
        Return the polynomial sum(numerators[k]*x^k)/den.  The
        denominator may be any nonzero integer.
        """
        if den == 0:
            raise ZeroDivisionError('Polynomial with denominator 0.')
        poly = cls.__new__(cls)
        poly.coeffs = [int(c) for c in numerators]
        poly.den = int(den)
        return poly._canonicalise()

    @classmethod
    def zero(cls):
        return cls.from_numerators([], 1)

    def _canonicalise(self):
        nums = self.coeffs
        while nums and nums[-1] == 0:
            nums.pop()
        if not nums:
            self.den = 1
            return self
        if self.den < 0:
            self.den = -self.den
            nums[:] = [-c for c in nums]
        g = self.den
        for c in nums:
            g = gcd(g, c)
            if g == 1:
                break
        if g != 1:
            nums[:] = [c//g for c in nums]
            self.den //= g
        return self

    def __len__(self):
        return len(self.coeffs)

    def degree(self):
        """The degree, or -1 for the zero polynomial."""
        return len(self.coeffs) - 1

    def is_zero(self):
        return not self.coeffs

    def numerator(self, n):
        """
        The numerator, over self.den, of the coefficient of x^n.  This is 0
        when n is out of range, including negative n.
        """
        if 0 <= n < len(self.coeffs):
            return self.coeffs[n]
        return 0

    def __getitem__(self, n):
        return Fraction(self.numerator(n), self.den)

    def coefficients(self):
        """Return the coefficients as a list of Fractions."""
        return [Fraction(c, self.den) for c in self.coeffs]

    def __eq__(self, other):
        if not isinstance(other, RationalPolynomial):
            return NotImplemented
        return self.coeffs == other.coeffs and self.den == other.den

    def __hash__(self):
        return hash((tuple(self.coeffs), self.den))

    def __repr__(self):
        if self.den == 1:
            return 'RationalPolynomial(%s)'%self.coeffs
        return 'RationalPolynomial(%s, %d)'%(self.coeffs, self.den)

    def __str__(self):
        from .polyio import format_pretty
        return format_pretty(self)

    def __neg__(self):
        return RationalPolynomial.from_numerators([-c for c in self.coeffs],
                                                  self.den)

    def _combine(self, other, sign):
        g = gcd(self.den, other.den)
        a, b = other.den//g, self.den//g
        length = max(len(self), len(other))
        nums = [a*self.numerator(k) + sign*b*other.numerator(k)
                for k in range(length)]
        return RationalPolynomial.from_numerators(nums, a*self.den)

    def __add__(self, other):
        if not isinstance(other, RationalPolynomial):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other):
        if not isinstance(other, RationalPolynomial):
            return NotImplemented
        return self._combine(other, -1)

    def __mul__(self, other):
        """
        Multiply by another polynomial or by a rational scalar.

        >>> x_minus_1 = RationalPolynomial([-1, 1])
        >>> x_minus_1*RationalPolynomial([1, 1])
        RationalPolynomial([-1, 0, 1])
        >>> RationalPolynomial([2, 4])*Fraction(1, 6)
        RationalPolynomial([1, 2], 3)
        """
        if isinstance(other, RationalPolynomial):
            if self.is_zero() or other.is_zero():
                return RationalPolynomial.zero()
            nums = [0]*(len(self) + len(other) - 1)
            for i, a in enumerate(self.coeffs):
                if a:
                    for j, b in enumerate(other.coeffs):
                        nums[i + j] += a*b
            return RationalPolynomial.from_numerators(nums,
                                                      self.den*other.den)
        if isinstance(other, (Integral, Rational, str)):
            c = as_rational(other)
            return RationalPolynomial.from_numerators(
                [c.numerator*a for a in self.coeffs],
                c.denominator*self.den)
        return NotImplemented

    __rmul__ = __mul__

    def __call__(self, x):
        """
        Evaluate at x by Horner's rule.

        >>> RationalPolynomial([1, -3, 2])(Fraction(1, 2))
        Fraction(0, 1)
        """
        result = 0
        for c in reversed(self.coeffs):
            result = result*x + c
        return Fraction(result)/self.den

    def reverse(self, length=None):
        """
        Return x^(length-1)*P(1/x), reversing the first length coefficients.
        The default length is len(self).

        >>> RationalPolynomial([0, 1, 2]).reverse()
        RationalPolynomial([2, 1])
        >>> RationalPolynomial([1, 2]).reverse(4)
        RationalPolynomial([0, 0, 2, 1])
        """
        if length is None:
            length = len(self)
        nums = [self.numerator(length - 1 - k) for k in range(length)]
        return RationalPolynomial.from_numerators(nums, self.den)

    def derivative(self):
        """
        >>> RationalPolynomial([5, 1, 0, '1/3']).derivative()
        RationalPolynomial([1, 0, 1])
        """
        nums = [k*c for k, c in enumerate(self.coeffs)][1:]
        return RationalPolynomial.from_numerators(nums, self.den)

    def shift_right(self, n=1):
        """Drop the n lowest coefficients, i.e. return P // x^n."""
        return RationalPolynomial.from_numerators(self.coeffs[n:], self.den)

    def divide_by_linear(self, root):
        """
        Generic synthetic division by (x - root).  Returns the pair
        (quotient, remainder), the remainder being P(root).

        >>> RationalPolynomial([-1, 0, 0, 1]).divide_by_linear(1)
        (RationalPolynomial([1, 1, 1]), Fraction(0, 1))
        """
        root = as_rational(root)
        if self.is_zero():
            return RationalPolynomial.zero(), Fraction(0)
        quotient, carry = [], Fraction(0)
        for c in reversed(self.coefficients()):
            carry = carry*root + c
            quotient.append(carry)
        remainder = quotient.pop()
        return RationalPolynomial(reversed(quotient)), remainder

    def is_formally_symmetric(self, length=None):
        """
        True if the coefficient of x^k equals that of x^(length-1-k) for
        all k, where length defaults to len(self).
        """
        return self.reverse(length) == self

    def is_formally_antisymmetric(self, length=None):
        return self.reverse(length) == -self
