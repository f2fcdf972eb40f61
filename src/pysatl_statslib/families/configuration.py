"""
Distribution Families Configuration
====================================

This module registers the built-in parametric distribution families of the
library:

- continuous: Beta, Cauchy, Chi-squared, Exponential, F, Gamma,
  Inverse-gamma, Laplace, Logistic, Log-normal, Normal, Student-t, Uniform,
  Weibull;
- discrete: Bernoulli.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family supports one or more parameterizations with automatic
  conversion to its base parameterization.
- All characteristics are closed-form; special functions come from
  :mod:`scipy.special`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_statslib.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_student_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_statslib.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It is called
    lazily by the evaluation functions, and is safe to call repeatedly.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_beta_family()
    configure_cauchy_family()
    configure_chi_squared_family()
    configure_exponential_family()
    configure_f_family()
    configure_gamma_family()
    configure_inverse_gamma_family()
    configure_laplace_family()
    configure_logistic_family()
    configure_lognormal_family()
    configure_normal_family()
    configure_student_t_family()
    configure_uniform_family()
    configure_weibull_family()
    registry = ParametricFamilyRegister()
    logger.debug("Configured %d families", len(registry.list_registered_families()))
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
