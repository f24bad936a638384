# -*- coding: utf-8 -*-
"""
Checks of the zero counting code against independent computations, and a
runner for all of the doctests in the package.

    python -m zerocount.test [-v]

The literal examples:

>>> [tuple(bistritz_rule(RationalPolynomial(c))) for c in
...  ([-1, 1], [-1, 0, 1], [-2, 1], [0, 1], [1, -3, 2], [1, 0, 1])]
[(0, 1), (0, 2), (0, 0), (1, 0), (1, 1), (0, 2)]

Tracing goes to the tracer passed in:

>>> import io
>>> out = io.StringIO()
>>> bistritz_rule(RationalPolynomial([-1, 1]), tracer=Tracer(1, file=out))
ZeroCount(inside=0, on=1)
>>> '# roots IUC/UC: 0/1' in out.getvalue().splitlines()
True
>>> current_tracer().level
0
"""
from fractions import Fraction
from math import gcd
import doctest, getopt, random, sys
import numpy
from . import polynomial, symmetric, bistritz, polyio, trace, cli
from .polynomial import RationalPolynomial
from .symmetric import (evaluate_symmetric_at_1, deflate_root_at_1,
                        divide_by_x_minus_1_antisymmetric)
from .bistritz import (bistritz_rule, count_zeros, rule_init, do_recurrence,
                       recursion_delta)
from .trace import Tracer, current_tracer

modules = [polynomial, symmetric, bistritz, polyio, trace, cli]

def random_rational(rng, height=20, max_den=6):
    return Fraction(rng.randint(-height, height), rng.randint(1, max_den))

def random_formal(rng, sign):
    """
    A random polynomial of random formal length whose coefficient of x^k
    is sign times that of x^(n-1-k).  About a third of the time a few low
    (and hence high) coefficients vanish.
    """
    n = rng.randint(1, 12)
    half = [random_rational(rng) for _ in range((n + 1)//2)]
    if rng.random() < 0.3:
        zeros = rng.randint(1, (n + 1)//2)
        half[:zeros] = [0]*zeros
    coeffs = half + [0]*(n - len(half))
    for k in range(n//2):
        coeffs[n - 1 - k] = sign*coeffs[k]
    if n%2 and sign == -1:
        coeffs[n//2] = 0
    return RationalPolynomial(coeffs)

def check_canonical(P):
    """True if P is in canonical form."""
    if P.is_zero():
        return P.den == 1
    content = P.den
    for c in P.coeffs:
        content = gcd(content, c)
    return P.coeffs[-1] != 0 and P.den > 0 and content == 1

def check_symmetric_evaluation(trials=200, seed=1):
    """
    Compare evaluate_symmetric_at_1 with Horner's rule.

    >>> check_symmetric_evaluation()
    True
    """
    rng = random.Random(seed)
    for _ in range(trials):
        P = random_formal(rng, 1)
        if evaluate_symmetric_at_1(P) != P(1):
            print('Evaluation failed for %r'%P)
            return False
    return True

def check_antisymmetric_division(trials=200, seed=2):
    """
    Compare divide_by_x_minus_1_antisymmetric with synthetic division, and
    check that the quotient has the symmetry it should.

    >>> check_antisymmetric_division()
    True
    """
    rng = random.Random(seed)
    for _ in range(trials):
        P = random_formal(rng, -1)
        Q = divide_by_x_minus_1_antisymmetric(P)
        quotient, remainder = P.divide_by_linear(1)
        if remainder != 0 or Q != quotient:
            print('Division failed for %r'%P)
            return False
        if not check_canonical(Q):
            print('Non canonical quotient for %r'%P)
            return False
        block = Q.shift_right(symmetric.lambda_index(Q))
        if not block.is_formally_symmetric():
            print('Asymmetric quotient for %r'%P)
            return False
    return True

def check_deflation(trials=100, seed=3):
    """
    Deflation removes exactly the factors (x - 1) which were multiplied
    in, and deflating again changes nothing.

    >>> check_deflation()
    True
    """
    rng = random.Random(seed)
    x_minus_1 = RationalPolynomial([-1, 1])
    for _ in range(trials):
        P = RationalPolynomial([random_rational(rng)
                                for _ in range(rng.randint(1, 8))])
        if P.is_zero() or P(1) == 0:
            continue
        m = rng.randint(0, 4)
        Q = P
        for _ in range(m):
            Q = Q*x_minus_1
        count, R = deflate_root_at_1(Q)
        if (count, R) != (m, P) or deflate_root_at_1(R) != (0, R):
            print('Deflation failed for %r'%Q)
            return False
        if not check_canonical(R):
            return False
    return True

def check_recursion(trials=200, seed=6):
    """
    The polynomials made by rule_init and do_recurrence are canonical, and
    do_recurrence agrees with the three term recursion
    T3 = (delta*(x^(2*lambda+1) + 1)*x^(-lambda)*T2 - T1)/x
    carried out with the generic operations.

    >>> check_recursion()
    True
    """
    rng = random.Random(seed)
    for _ in range(trials):
        D = RationalPolynomial([random_rational(rng)
                                for _ in range(rng.randint(2, 9))])
        if D.degree() < 1:
            continue
        T1, T2, sigma1, sigma2 = rule_init(D)
        T3, sigma3 = do_recurrence(T1, T2, sigma1, sigma2, D.degree() - 1)
        if not all(check_canonical(T) for T in (T1, T2, T3)):
            print('Non canonical recursion polynomial for %r'%D)
            return False
        if T2.is_zero():
            continue
        lam = symmetric.lambda_index(T2)
        factor = RationalPolynomial([1] + [0]*(2*lam) + [1])
        expected = (recursion_delta(T1, T2)*(factor*T2).shift_right(lam)
                    - T1).shift_right(1)
        if T3 != expected or sigma3 != T3(1):
            print('Recursion step failed for %r'%D)
            return False
    return True

# Factors with known zeros, as (coefficients, (inside, on, outside)).
known_factors = [
    ([Fraction(-1, 2), 1], (1, 0, 0)),
    ([Fraction(2, 3), 1], (1, 0, 0)),
    ([0, 1], (1, 0, 0)),
    ([-3, 1], (0, 0, 1)),
    ([Fraction(5, 4), 1], (0, 0, 1)),
    ([-1, 1], (0, 1, 0)),
    ([1, 1], (0, 1, 0)),
    ([1, 0, 1], (0, 2, 0)),
    ([1, 1, 1], (0, 2, 0)),
    ([1, -1, 1], (0, 2, 0)),
    ([Fraction(1, 4), 0, 1], (2, 0, 0)),
    ([Fraction(1, 2), 1, 1], (2, 0, 0)),
    ([9, 0, 1], (0, 0, 2)),
    ([2, -2, 1], (0, 0, 2)),
]

def check_known_products(trials=60, seed=4):
    """
    Count the zeros of random products of factors whose zeros are known.

    >>> check_known_products()
    True
    """
    rng = random.Random(seed)
    for _ in range(trials):
        P = RationalPolynomial([random_rational(rng, max_den=3) or 1])
        expected = [0, 0, 0]
        for _ in range(rng.randint(1, 4)):
            coeffs, counts = rng.choice(known_factors)
            P = P*RationalPolynomial(coeffs)
            expected = [a + b for a, b in zip(expected, counts)]
        if count_zeros(P) != tuple(expected):
            print('Expected %s for %r, got %s'%(expected, P, count_zeros(P)))
            return False
        if bistritz_rule(P) != bistritz_rule(RationalPolynomial(P.coefficients())):
            return False
    return True

def numerical_count(P, tolerance=1.0E-4):
    """
    Count the zeros of P inside and on the circle using numpy.roots.
    Returns None if some root is too close to the circle to be sure.
    """
    roots = numpy.roots([float(c) for c in reversed(P.coefficients())])
    moduli = numpy.abs(roots)
    if (numpy.abs(moduli - 1.0) < tolerance).any():
        return None
    return int((moduli < 1.0).sum()), 0

def check_numerically(trials=200, seed=5):
    """
    Compare with numpy.roots on random integer polynomials.

    >>> check_numerically()
    True
    """
    rng = random.Random(seed)
    for _ in range(trials):
        degree = rng.randint(1, 7)
        coeffs = [rng.randint(-9, 9) for _ in range(degree)] + [rng.randint(1, 9)]
        P = RationalPolynomial(coeffs)
        expected = numerical_count(P)
        if expected is None:
            continue
        if tuple(bistritz_rule(P)) != expected:
            print('numpy finds %s zeros inside/on for %r, got %s'%(
                expected, P, bistritz_rule(P)))
            return False
    return True

def doctest_modules(modules, verbose=False, print_info=True):
    finder = doctest.DocTestFinder()
    failed, attempted = 0, 0
    for module in modules:
        runner = doctest.DocTestRunner(verbose=verbose)
        for test in finder.find(module):
            runner.run(test)
        result = runner.summarize(verbose=False)
        failed += result.failed
        attempted += result.attempted
        if print_info:
            print(module.__name__ + ':')
            print('   %s failures out of %s tests.'%(result.failed,
                                                     result.attempted))
    if print_info:
        print('\nAll doctests:\n   %s failures out of %s tests.'%(failed,
                                                                attempted))
    return doctest.TestResults(failed, attempted)

if __name__ == '__main__':
    optlist, args = getopt.getopt(sys.argv[1:], 'v', ['verbose'])
    verbose = len(optlist) > 0
    results = doctest_modules(modules + [sys.modules[__name__]], verbose)
    sys.exit(1 if results.failed else 0)
