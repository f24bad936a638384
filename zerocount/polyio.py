# -*- coding: utf-8 -*-
"""
Reading and writing polynomials as text.

Two formats are supported.  The FLINT format, used by FLINT's
fmpq_poly_print and fmpq_poly_read, is the length of the polynomial, two
spaces, and then the coefficients by ascending degree:

>>> P = read_flint('3  1/2 0 1')
>>> format_flint(P)
'3  1/2 0 1'

The pretty format is an expression in one variable, highest degree first:

>>> format_pretty(P)
'x^2+1/2'
>>> parse_expression('x^2 + 1/2') == P
True
"""

from fractions import Fraction
import re
from .polynomial import RationalPolynomial, as_rational

class PolynomialSyntaxError(ValueError):
    """Exception raised for text which does not describe a polynomial."""
    pass

def _rational(token, text):
    try:
        return as_rational(token)
    except (ValueError, ZeroDivisionError):
        raise PolynomialSyntaxError('Bad coefficient %r in %r.'%(token, text))

def read_flint(text):
    """
    Read a polynomial in the FLINT format '<length>  c0 c1 ...'.

    >>> read_flint('2  -1 1')
    RationalPolynomial([-1, 1])
    >>> read_flint('0')
    RationalPolynomial([])
    >>> read_flint('3  1 2')
    Traceback (most recent call last):
    ...
    zerocount.polyio.PolynomialSyntaxError: Expected 3 coefficients in '3  1 2', found 2.
    """
    tokens = text.split()
    if not tokens or not tokens[0].isdigit():
        raise PolynomialSyntaxError('Missing length in %r.'%text)
    length, values = int(tokens[0]), tokens[1:]
    if len(values) != length:
        raise PolynomialSyntaxError('Expected %d coefficients in %r, found %d.'%(
            length, text, len(values)))
    return RationalPolynomial([_rational(v, text) for v in values])

def format_flint(poly):
    """
    >>> format_flint(RationalPolynomial(['-1/3', 0, 2]))
    '3  -1/3 0 2'
    >>> format_flint(RationalPolynomial([]))
    '0'
    """
    if poly.is_zero():
        return '0'
    return '%d  %s'%(len(poly), ' '.join(str(c) for c in poly.coefficients()))

def parse_coefficients(text):
    """
    Read coefficients, lowest degree first, separated by commas or spaces.

    >>> parse_coefficients('[1, -3/2, 0, 2]')
    RationalPolynomial([2, -3, 0, 4], 2)
    """
    body = text.strip().lstrip('[(').rstrip(')]')
    tokens = [t for t in re.split(r'[\s,]+', body) if t]
    return RationalPolynomial([_rational(t, text) for t in tokens])

def parse_expression(text, var='x'):
    """
    Read an expression such as '2*x^2 - 3*x + 1' or 'x**3 - 1/2'.  Every
    term is an optional sign, an optional coefficient, and an optional
    power of the variable.  Repeated powers are added up.

    >>> parse_expression('2*x^2 - 3x + 1')
    RationalPolynomial([1, -3, 2])
    >>> parse_expression('t**3 - t**3 + 1/2*t', var='t')
    RationalPolynomial([0, 1], 2)
    >>> parse_expression('2*x^^2')
    Traceback (most recent call last):
    ...
    zerocount.polyio.PolynomialSyntaxError: Cannot parse '2*x^^2' at position 3.
    """
    s = re.sub(r'\s+', '', text).replace('**', '^')
    v = re.escape(var)
    term = re.compile(r'([+-]?)(?:(\d+(?:/\d+)?)(?:\*?(%s)(?:\^(\d+))?)?'
                      r'|(%s)(?:\^(\d+))?)'%(v, v))
    if not s:
        raise PolynomialSyntaxError('Empty polynomial expression.')
    coefficients, pos = {}, 0
    while pos < len(s):
        m = term.match(s, pos)
        if m is None or (pos > 0 and not m.group(1)):
            raise PolynomialSyntaxError('Cannot parse %r at position %d.'%(s, pos))
        sign, coeff, cvar, cexp, bare, bexp = m.groups()
        if coeff is not None:
            c = _rational(coeff, text)
            exponent = int(cexp or 1) if cvar else 0
        else:
            c = Fraction(1)
            exponent = int(bexp or 1)
        if sign == '-':
            c = -c
        coefficients[exponent] = coefficients.get(exponent, 0) + c
        pos = m.end()
    top = max(coefficients)
    return RationalPolynomial([coefficients.get(k, 0) for k in range(top + 1)])

def parse_polynomial(text, var=None):
    """
    Read a polynomial given either as an expression or as a list of
    coefficients, lowest degree first.  The variable of an expression is
    found automatically unless var is specified.

    >>> parse_polynomial('z^2 - 1') == parse_polynomial('-1 0 1')
    True
    """
    if var is None:
        names = set(re.findall(r'[A-Za-z_]\w*', text))
        if len(names) > 1:
            raise PolynomialSyntaxError('More than one variable in %r: %s.'%(
                text, ', '.join(sorted(names))))
        var = names.pop() if names else None
    if var is not None and var in text:
        return parse_expression(text, var)
    return parse_coefficients(text)

def format_pretty(poly, var='x'):
    """
    Return an expression for poly, highest degree first.

    >>> format_pretty(RationalPolynomial([-1, 0, '-1/2', 1]))
    'x^3-1/2*x^2-1'
    >>> format_pretty(RationalPolynomial([0, -1]), var='z')
    '-z'
    """
    if poly.is_zero():
        return '0'
    terms = []
    for k in range(poly.degree(), -1, -1):
        c = poly[k]
        if c == 0:
            continue
        power = var if k == 1 else '%s^%d'%(var, k)
        if k == 0:
            term = str(c)
        elif c == 1:
            term = power
        elif c == -1:
            term = '-' + power
        else:
            term = '%s*%s'%(c, power)
        if terms and not term.startswith('-'):
            term = '+' + term
        terms.append(term)
    return ''.join(terms)
