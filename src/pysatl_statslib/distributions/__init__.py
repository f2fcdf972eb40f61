"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL StatsLib:

- distribution protocol (:mod:`.distribution`);
- analytical computation wrappers (:mod:`.computation`);
- supports (:mod:`.support`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, ExplicitTableDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "ExplicitTableDiscreteSupport",
]
