"""Count the zeros of rational polynomials inside and on the unit circle."""
from .polynomial import RationalPolynomial, sgn
from .bistritz import (bistritz_rule, count_zeros, ZeroCount, InvalidInput,
                       rule_init, do_recurrence, do_singular)
from .symmetric import (lambda_index, coefficient_at, evaluate_symmetric_at_1,
                        divide_by_x_minus_1_antisymmetric, deflate_root_at_1)
from .polyio import (PolynomialSyntaxError, read_flint, format_flint,
                     parse_coefficients, parse_expression, parse_polynomial,
                     format_pretty)
from .trace import Tracer, traced, current_tracer, set_tracer, use_tracer
