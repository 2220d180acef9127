"""
Normal and Student's t distribution functions.

Probability density, cumulative distribution and percent point functions
implemented with pure numeric kernels: invalid inputs produce NaN, never
an exception.
"""

from distrs.core.normal import Normal
from distrs.core.students_t import StudentsT

__version__ = "1.0.0"

__all__ = ["Normal", "StudentsT", "__version__"]
