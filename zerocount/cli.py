"""
Command line driver: count the zeros of one polynomial.

Usage: python -m zerocount [-v ...] [-F] [-q] [polynomial]

The polynomial is an expression such as '2*x^2 - 3*x + 1' or a list of
coefficients, lowest degree first.  With -F (--flint) it is read in FLINT's
format '<length>  c0 c1 ...'.  If no polynomial is given on the command
line it is read from standard input.  Each -v raises the trace level by
one.  With -q (--quiet) only the two counts are printed.
"""
import getopt, sys
from .bistritz import bistritz_rule
from .polyio import parse_polynomial, read_flint, format_pretty
from .trace import Tracer

usage = __doc__.strip().split('\n')[2]

def main(argv=None):
    """
    Run the driver and return the exit status.

    >>> main(['-q', '1 -3 2'])
    1 1
    0
    >>> main(['x^2 + 1'])
    # P(x) = x^2+1
    # Zeros inside/on the unit circle:
    0 2
    0
    >>> main(['--flint', '2  -1 1'])
    # P(x) = x-1
    # Zeros inside/on the unit circle:
    0 1
    0

    Bad input gives status 1 and a message on stderr:

    >>> main(['-q', '0'])
    1
    >>> main(['-q', 'x^^2'])
    1
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        optlist, args = getopt.getopt(argv, 'vFqh',
                                      ['verbose', 'flint', 'quiet', 'help'])
    except getopt.GetoptError as e:
        sys.stderr.write('zerocount: %s\n%s\n'%(e, usage))
        return 2
    options = [opt for opt, _ in optlist]
    if '-h' in options or '--help' in options:
        print(__doc__.strip())
        return 0
    level = sum(1 for opt in options if opt in ('-v', '--verbose'))
    flint = '-F' in options or '--flint' in options
    quiet = '-q' in options or '--quiet' in options
    if args:
        text = ' '.join(args)
    else:
        if sys.stdin.isatty():
            print('# P(x):', end=' ')
            sys.stdout.flush()
        text = sys.stdin.read()
    try:
        P = read_flint(text) if flint else parse_polynomial(text)
        inside, on = bistritz_rule(P, tracer=Tracer(level))
    except ValueError as e:
        sys.stderr.write('zerocount: error: %s\n'%e)
        return 1
    if not quiet:
        print('# P(x) = %s'%format_pretty(P))
        print('# Zeros inside/on the unit circle:')
    print('%d %d'%(inside, on))
    return 0
