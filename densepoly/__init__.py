"""densepoly is a Python package for dense univariate polynomial arithmetic.

Polynomials are kept in a canonical form: a list of coefficients, constant
term first, with no zero coefficient in the highest position. Coefficients
can be of any numeric type supporting +,-,* (and / for division-based
operations), such as int, fractions.Fraction, gmpy2.mpq, float, or
elements of the prime fields provided by module gfp.

The core module polynomial provides construction, arithmetic (add, multiply,
power, compose), division with remainder, evaluation of values and
derivatives, differentiation and integration, GCDs, and squarefree
decomposition (root separation).

Named polynomial families build on the core: Bernstein, Chebyshev, Hermite,
Legendre, and Lagrange polynomials (including interpolation).
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import logging


def _log_level(ll):
    """Decode logging level ll=debug/info/warning/error/critical (or digit 0-5)."""
    ch = ll[0].upper() if ll else '0'
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
    return (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
            logging.CRITICAL)[int(ch)]


env_log_level = os.getenv('DENSEPOLY_LOG_LEVEL')  # check if variable DENSEPOLY_LOG_LEVEL is set
if env_log_level is not None or sys.flags.dev_mode:
    level = _log_level(env_log_level)
    if sys.flags.dev_mode:
        # Switch to debug mode, just like asyncio does in development mode.
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
    del level
del env_log_level
