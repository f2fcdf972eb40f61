"""
PySATL Statslib
===============

Closed-form statistical functions: density, distribution and quantile
functions of parametric families, evaluated on scalars and broadcast over
numeric containers, with a uniform NaN policy for invalid parameters.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .containers import *
from .containers import __all__ as _containers_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .promotion import *
from .promotion import __all__ as _promotion_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-statslib")
__all__ = [
    "__version__",
    *_containers_all,
    *_distr_all,
    *_family_all,
    *_promotion_all,
    *_stats_all,
    *_types_all,
]

del _containers_all
del _distr_all
del _family_all
del _promotion_all
del _stats_all
del _types_all
