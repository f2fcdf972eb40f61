"""
Output form helpers shared by the evaluators.

Formulas are computed either directly (and logged on request) or in log space
(and exponentiated unless the log form is requested). The log form is always
the last transform applied.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_statslib.types import Real


def log_if(value: Real, log_form: bool) -> Real:
    """Return ``log(value)`` if requested, ``value`` otherwise (``log(0) = -inf``)."""
    if not log_form:
        return value
    with np.errstate(divide="ignore"):
        return np.log(value)


def exp_unless(log_value: Real, log_form: bool) -> Real:
    """Return ``log_value`` if the log form is requested, ``exp(log_value)`` otherwise."""
    if log_form:
        return log_value
    return np.exp(log_value)


__all__ = ["exp_unless", "log_if"]
