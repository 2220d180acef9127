"""
Math backend selection.

The distribution kernels take ``erf``, ``erfc`` and ``lgamma`` from this
module. By default they are the platform C library versions exposed by
:mod:`math`; setting ``DISTRS_MATH_BACKEND=portable`` before import swaps
in the self-contained routines of :mod:`distrs.core.special`. Only the
backing implementation changes, the numerical contracts do not.

Elementary functions (exp, log, sqrt, ...) always come from :mod:`math`.
"""

import logging
import math
import os
from typing import Optional

from distrs.core import special
from distrs.utils.constants import DEFAULT_MATH_BACKEND, MATH_BACKEND_ENV, MATH_BACKENDS

logger = logging.getLogger(__name__)


def resolve_backend(value: Optional[str]) -> str:
    """
    Normalize a backend name.

    Args:
        value: Raw setting, typically the environment variable (None or blank
            selects the default)

    Returns:
        One of MATH_BACKENDS

    Raises:
        ValueError: If the name is not a known backend
    """
    if value is None or not value.strip():
        return DEFAULT_MATH_BACKEND

    name = value.strip().lower()
    if name not in MATH_BACKENDS:
        raise ValueError(
            f"Unknown math backend {value!r} in {MATH_BACKEND_ENV}, "
            f"expected one of {', '.join(MATH_BACKENDS)}"
        )
    return name


BACKEND = resolve_backend(os.environ.get(MATH_BACKEND_ENV))

if BACKEND == "portable":
    erf = special.erf
    erfc = special.erfc
    lgamma = special.lgamma
else:
    erf = math.erf
    erfc = math.erfc
    lgamma = math.lgamma

logger.debug("Using %s math backend", BACKEND)
