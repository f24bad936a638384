# -*- coding: utf-8 -*-
"""
Count the zeros of a rational polynomial inside and on the unit circle.

The method is Bistritz's recursive stability test, a division-free
relative of the Routh and Jury tests.  Starting from D, with reversal D*,
it builds the formally symmetric polynomials

    T_n = D + D*,    T_(n-1) = (D - D*)/(x - 1)

and then descends with the three term recursion

    T_(k-1) = (delta_k*(x^(2*lambda+1) + 1)*x^(-lambda)*T_k - T_(k+1))/x

where lambda is the order of vanishing of T_k at 0 and delta_k is the
ratio of T_(k+1)(0) to the coefficient of x^lambda in T_k.  Since every T_k is
formally symmetric only the lower half of each one is computed.  The
number of sign variations in the sequence sigma_k = T_k(1) determines the
number of zeros inside the circle.  When some T_k vanishes identically
the recursion is restarted from the derivative of T_(k+1); the position
of the first such restart determines the number of zeros on the circle.

>>> bistritz_rule(RationalPolynomial([1, -3, 2]))
ZeroCount(inside=1, on=1)
>>> count_zeros([6, -5, 1])
(0, 0, 2)
"""

from collections import namedtuple
from fractions import Fraction
from .polynomial import RationalPolynomial, sgn
from .symmetric import (lambda_index, coefficient_at, evaluate_symmetric_at_1,
                        divide_by_x_minus_1_antisymmetric, deflate_root_at_1)
from .trace import traced, current_tracer, use_tracer

class InvalidInput(ValueError):
    """Exception raised when asked to count the zeros of 0."""
    pass

ZeroCount = namedtuple('ZeroCount', ['inside', 'on'])

@traced(2)
def rule_init(D):
    """
    Return (T1, T2, sigma1, sigma2), where T1 = D + D*, T2 = (D - D*)/(x - 1)
    and sigma1, sigma2 are their values at 1.

    >>> rule_init(RationalPolynomial([1, -5, 6]))
    (RationalPolynomial([7, -10, 7]), RationalPolynomial([5, 5]), Fraction(4, 1), Fraction(10, 1))
    """
    D_star = D.reverse(len(D))
    T2 = divide_by_x_minus_1_antisymmetric(D - D_star)
    T1 = D_star + D
    return T1, T2, evaluate_symmetric_at_1(T1), evaluate_symmetric_at_1(T2)

def recursion_delta(T1, T2):
    """
    The ratio of the constant coefficient of T1 to the lowest nonzero
    coefficient of T2, or 0 if either polynomial vanishes.

    >>> recursion_delta(RationalPolynomial([2, 0, 0, 2]), RationalPolynomial([0, 4]))
    Fraction(1, 2)
    >>> recursion_delta(RationalPolynomial([0, 4]), RationalPolynomial([]))
    Fraction(0, 1)
    """
    if T1.is_zero() or T2.is_zero():
        return Fraction(0)
    return coefficient_at(T1, 0)/coefficient_at(T2, lambda_index(T2))

@traced(2)
def do_recurrence(T1, T2, sigma1, sigma2, formal_length):
    """
    Return the next polynomial T3 of the recursion, of formal length
    formal_length, together with sigma3 = T3(1).

    >>> do_recurrence(RationalPolynomial([7, -10, 7]), RationalPolynomial([5, 5]),
    ...               Fraction(4), Fraction(10), 1)
    (RationalPolynomial([24]), Fraction(24, 1))

    When T2 vanishes and so does T1(0), delta is 0 and the step just
    divides -T1 by x:

    >>> do_recurrence(RationalPolynomial([0, 4]), RationalPolynomial([]),
    ...               Fraction(4), Fraction(0), 1)
    (RationalPolynomial([-4]), Fraction(-4, 1))
    """
    if formal_length <= 0:
        return RationalPolynomial.zero(), Fraction(0)
    lam = lambda_index(T2)
    delta = recursion_delta(T1, T2)
    tracer = current_tracer()
    tracer.message(2, 'regular case: flength=%d, lambda=%d, delta=%s',
                   formal_length, lam, delta)
    sigma3 = 2*delta*sigma2 - sigma1
    # Over the denominator delta.den*T2.den*T1.den the coefficients are
    #   t3[i] = (t2[i-lam] + t2[i+lam+1])*delta.num*T1.den
    #           - t1[i+1]*delta.den*T2.den
    # with t1, t2 the numerators of T1, T2.
    a = delta.numerator*T1.den
    b = delta.denominator*T2.den
    mid = (formal_length - 1)//2
    nums = [0]*formal_length
    for i in range(mid + 1):
        nums[i] = (a*(T2.numerator(i - lam) + T2.numerator(i + lam + 1))
                   - b*T1.numerator(i + 1))
    for i in range(mid + 1, formal_length):
        nums[i] = nums[formal_length - 1 - i]
    T3 = RationalPolynomial.from_numerators(nums, b*T1.den)
    return T3, sigma3

@traced(2)
def do_singular(T1, T2, sigma1=Fraction(0)):
    """
    Restart the recursion when T2 vanishes but T1(0) does not.  With
    D = T1', returns (D, -T2', T3', sigma1, -sigma2', sigma3') where
    (T2', T3', sigma2', sigma3') = rule_init(D).  The reversal D* is not
    the reciprocal operation of the recursion, hence the signs of T2' and
    sigma2'.  T2 itself must be zero, and sigma1 is returned unchanged.

    >>> T1, T2, T3, s1, s2, s3 = do_singular(RationalPolynomial([2, 0, 2]),
    ...                                      RationalPolynomial([]))
    >>> T1, T2, T3
    (RationalPolynomial([0, 4]), RationalPolynomial([-4, -4]), RationalPolynomial([4]))
    >>> s2, s3
    (Fraction(-8, 1), Fraction(4, 1))
    """
    D = T1.derivative()
    T2, T3, sigma2, sigma3 = rule_init(D)
    return D, -T2, T3, sigma1, -sigma2, sigma3

def bistritz_rule(poly, tracer=None):
    """
    Return ZeroCount(inside, on): the number of complex zeros of poly,
    counted with multiplicity, with |z| < 1 and with |z| = 1.  The
    remaining poly.degree() - inside - on zeros lie outside the circle.

    If a Tracer is given, it is used for the duration of the call.

    >>> bistritz_rule(RationalPolynomial([-1, 0, 1]))
    ZeroCount(inside=0, on=2)
    >>> bistritz_rule(RationalPolynomial([1, 0, 1]))
    ZeroCount(inside=0, on=2)
    >>> bistritz_rule(RationalPolynomial([0, 1]))
    ZeroCount(inside=1, on=0)
    >>> bistritz_rule(RationalPolynomial([]))
    Traceback (most recent call last):
    ...
    zerocount.bistritz.InvalidInput: The zero polynomial has no well defined zero count.
    """
    if poly.is_zero():
        raise InvalidInput('The zero polynomial has no well defined zero count.')
    if tracer is not None:
        with use_tracer(tracer):
            return _bistritz_rule(poly)
    return _bistritz_rule(poly)

@traced(1)
def _bistritz_rule(poly):
    tracer = current_tracer()
    tracer.message(1, 'received: poly = %s', poly)
    on_uc, D = deflate_root_at_1(poly)
    deg = D.degree()
    tracer.message(1, '(x-1) factors cleared, degree deg=%d', deg)
    T_prev, T_curr, sigma_prev, sigma_curr = rule_init(D)
    tracer.show_T(1, deg, T_prev, sigma_prev)
    last_sgn = sgn(sigma_prev)
    variations, variations_regular, singular = 0, 0, -1
    for i in range(deg - 1, -1, -1):
        tracer.message(1, '* loop i = %d *', i)
        tracer.show_T(1, i, T_curr, sigma_curr)
        # Unreachable once D(1) != 0: T_n = D + D* is then nonzero, and
        # neither kind of step below follows a zero T with another zero.
        if T_curr.is_zero() and T_prev.is_zero():
            break
        if T_curr.is_zero() and T_prev.numerator(0) != 0:
            (T_prev, T_curr, T_next,
             sigma_prev, sigma_curr, sigma_next) = do_singular(
                 T_prev, T_curr, sigma_prev)
            tracer.message(1, 'singularity after s=%d:', i + 1)
            tracer.show_T(1, i, T_curr, sigma_curr)
            if singular == -1:
                singular, variations_regular = i, variations
                tracer.message(1, 'vars_reg = %d sign variations occurred '
                               'before singularity.', variations_regular)
        else:
            T_next, sigma_next = do_recurrence(T_prev, T_curr, sigma_prev,
                                               sigma_curr, i)
        # A sign variation is a change of sign between consecutive
        # nonzero values; a zero value neither counts nor resets last_sgn.
        curr_sgn = sgn(sigma_curr)
        if last_sgn*curr_sgn == -1:
            variations += 1
        if curr_sgn != 0:
            last_sgn = curr_sgn
        T_prev, T_curr = T_curr, T_next
        sigma_prev, sigma_curr = sigma_curr, sigma_next
    tracer.message(1, '* end loop *')
    tracer.show_T(1, -1, T_curr, sigma_curr)
    if singular == -1:
        variations_regular = variations
    inside = deg - variations
    on = on_uc + 2*(variations - variations_regular) - singular - 1
    tracer.message(1, 'singular=%d/vars_reg=%d/vars=%d',
                   singular, variations_regular, variations)
    tracer.message(1, 'roots IUC/UC: %d/%d', inside, on)
    return ZeroCount(inside, on)

def count_zeros(poly):
    """
    Return (inside, on, outside) for a RationalPolynomial or a sequence of
    coefficients, lowest degree first.

    >>> count_zeros(['1/4', 0, 1])
    (2, 0, 0)
    >>> count_zeros([4, 0, 1, 0, 0])
    (0, 0, 2)
    >>> count_zeros([1, 1, 1])
    (0, 2, 0)
    >>> count_zeros([1, 3, 1])
    (1, 0, 1)
    >>> count_zeros([1, 0, 2, 0, 1])
    (0, 4, 0)
    >>> count_zeros([-3, 1, -3, 1])
    (0, 2, 1)
    >>> count_zeros([-1, 2, -1, 2])
    (1, 2, 0)

    Here T_1 vanishes while T_2(0) = 0, so the recursion carries on
    with delta = 0:

    >>> count_zeros([1, -2, 2, 1])
    (2, 0, 1)
    >>> count_zeros([1, -1, 1, 1])
    (2, 0, 1)
    """
    if not isinstance(poly, RationalPolynomial):
        poly = RationalPolynomial(poly)
    inside, on = bistritz_rule(poly)
    return inside, on, poly.degree() - inside - on
