"""
Statistical Functions
=====================

R-style density (``d*``), distribution (``p*``) and quantile (``q*``)
functions of the built-in families.

Every function accepts either a real scalar or a numeric container
(``numpy.ndarray``, ``array.array``, rectangular nested ``list``/``tuple``)
as its first argument. A scalar call returns a numpy scalar of the working
type; a container call returns a container of the same backend and shape.
Parameters that violate the family constraints yield NaN, they never raise.

Examples
--------
>>> from pysatl_statslib.stats import dgamma, pnorm, qt
>>> float(pnorm(0.0, 0.0, 1.0))
0.5
>>> dgamma([[0.5, 1.0], [2.0, 4.0]], 2.0, 3.0)  # doctest: +SKIP
[[...], [...]]
>>> float(qt(0.5, 7.0))
0.0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any


def _evaluate(
    family_name: FamilyName,
    characteristic: CharacteristicName,
    data: Any,
    /,
    log_form: bool | None = None,
    **parameters: Any,
) -> Any:
    """Evaluate a characteristic of a family in its base parametrization."""
    family = configure_families_register().get(family_name)
    base_parameters = family.base(**parameters)
    if log_form is None:
        return family.evaluate(characteristic, data, base_parameters)
    return family.evaluate(characteristic, data, base_parameters, log_form=log_form)


# Bernoulli


def dbern(x: Any, prob: Any, log_form: bool = False) -> Any:
    """Bernoulli probability mass function."""
    return _evaluate(FamilyName.BERNOULLI, CharacteristicName.PDF, x, log_form, prob=prob)


def pbern(x: Any, prob: Any, log_form: bool = False) -> Any:
    """Bernoulli distribution function."""
    return _evaluate(FamilyName.BERNOULLI, CharacteristicName.CDF, x, log_form, prob=prob)


def qbern(p: Any, prob: Any) -> Any:
    """
    Bernoulli quantile function.

    Returns 1 for ``p > 1 - prob`` and 0 otherwise.
    """
    return _evaluate(FamilyName.BERNOULLI, CharacteristicName.PPF, p, prob=prob)


# Beta


def dbeta(x: Any, a: Any, b: Any, log_form: bool = False) -> Any:
    """Beta density."""
    return _evaluate(FamilyName.BETA, CharacteristicName.PDF, x, log_form, a=a, b=b)


def pbeta(x: Any, a: Any, b: Any, log_form: bool = False) -> Any:
    """Beta distribution function."""
    return _evaluate(FamilyName.BETA, CharacteristicName.CDF, x, log_form, a=a, b=b)


def qbeta(p: Any, a: Any, b: Any) -> Any:
    """Beta quantile function."""
    return _evaluate(FamilyName.BETA, CharacteristicName.PPF, p, a=a, b=b)


# Cauchy


def dcauchy(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Cauchy density with location ``mu`` and scale ``sigma``."""
    return _evaluate(FamilyName.CAUCHY, CharacteristicName.PDF, x, log_form, mu=mu, sigma=sigma)


def pcauchy(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Cauchy distribution function."""
    return _evaluate(FamilyName.CAUCHY, CharacteristicName.CDF, x, log_form, mu=mu, sigma=sigma)


def qcauchy(p: Any, mu: Any, sigma: Any) -> Any:
    """Cauchy quantile function."""
    return _evaluate(FamilyName.CAUCHY, CharacteristicName.PPF, p, mu=mu, sigma=sigma)


# Chi-squared


def dchisq(x: Any, df: Any, log_form: bool = False) -> Any:
    """Chi-squared density with ``df`` degrees of freedom."""
    return _evaluate(FamilyName.CHI_SQUARED, CharacteristicName.PDF, x, log_form, df=df)


def pchisq(x: Any, df: Any, log_form: bool = False) -> Any:
    """Chi-squared distribution function."""
    return _evaluate(FamilyName.CHI_SQUARED, CharacteristicName.CDF, x, log_form, df=df)


def qchisq(p: Any, df: Any) -> Any:
    """Chi-squared quantile function."""
    return _evaluate(FamilyName.CHI_SQUARED, CharacteristicName.PPF, p, df=df)


# Exponential


def dexp(x: Any, rate: Any, log_form: bool = False) -> Any:
    """Exponential density with rate ``rate``."""
    return _evaluate(FamilyName.EXPONENTIAL, CharacteristicName.PDF, x, log_form, rate=rate)


def pexp(x: Any, rate: Any, log_form: bool = False) -> Any:
    """Exponential distribution function."""
    return _evaluate(FamilyName.EXPONENTIAL, CharacteristicName.CDF, x, log_form, rate=rate)


def qexp(p: Any, rate: Any) -> Any:
    """Exponential quantile function."""
    return _evaluate(FamilyName.EXPONENTIAL, CharacteristicName.PPF, p, rate=rate)


# F


def df(x: Any, df1: Any, df2: Any, log_form: bool = False) -> Any:
    """F density with ``df1`` and ``df2`` degrees of freedom."""
    return _evaluate(FamilyName.FISHER, CharacteristicName.PDF, x, log_form, df1=df1, df2=df2)


def pf(x: Any, df1: Any, df2: Any, log_form: bool = False) -> Any:
    """F distribution function."""
    return _evaluate(FamilyName.FISHER, CharacteristicName.CDF, x, log_form, df1=df1, df2=df2)


def qf(p: Any, df1: Any, df2: Any) -> Any:
    """F quantile function."""
    return _evaluate(FamilyName.FISHER, CharacteristicName.PPF, p, df1=df1, df2=df2)


# Gamma


def dgamma(x: Any, shape: Any, scale: Any, log_form: bool = False) -> Any:
    """
    Gamma density with shape ``shape`` and scale ``scale``.

    Shape zero is the point mass at zero.
    """
    return _evaluate(
        FamilyName.GAMMA, CharacteristicName.PDF, x, log_form, shape=shape, scale=scale
    )


def pgamma(x: Any, shape: Any, scale: Any, log_form: bool = False) -> Any:
    """Gamma distribution function."""
    return _evaluate(
        FamilyName.GAMMA, CharacteristicName.CDF, x, log_form, shape=shape, scale=scale
    )


def qgamma(p: Any, shape: Any, scale: Any) -> Any:
    """Gamma quantile function."""
    return _evaluate(FamilyName.GAMMA, CharacteristicName.PPF, p, shape=shape, scale=scale)


# Inverse-gamma


def dinvgamma(x: Any, shape: Any, rate: Any, log_form: bool = False) -> Any:
    """Inverse-gamma density with shape ``shape`` and rate ``rate``."""
    return _evaluate(
        FamilyName.INVERSE_GAMMA, CharacteristicName.PDF, x, log_form, shape=shape, rate=rate
    )


def pinvgamma(x: Any, shape: Any, rate: Any, log_form: bool = False) -> Any:
    """Inverse-gamma distribution function."""
    return _evaluate(
        FamilyName.INVERSE_GAMMA, CharacteristicName.CDF, x, log_form, shape=shape, rate=rate
    )


def qinvgamma(p: Any, shape: Any, rate: Any) -> Any:
    """Inverse-gamma quantile function."""
    return _evaluate(FamilyName.INVERSE_GAMMA, CharacteristicName.PPF, p, shape=shape, rate=rate)


# Laplace


def dlaplace(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Laplace density with location ``mu`` and scale ``sigma``."""
    return _evaluate(FamilyName.LAPLACE, CharacteristicName.PDF, x, log_form, mu=mu, sigma=sigma)


def plaplace(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Laplace distribution function."""
    return _evaluate(FamilyName.LAPLACE, CharacteristicName.CDF, x, log_form, mu=mu, sigma=sigma)


def qlaplace(p: Any, mu: Any, sigma: Any) -> Any:
    """Laplace quantile function."""
    return _evaluate(FamilyName.LAPLACE, CharacteristicName.PPF, p, mu=mu, sigma=sigma)


# Logistic


def dlogis(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Logistic density with location ``mu`` and scale ``sigma``."""
    return _evaluate(FamilyName.LOGISTIC, CharacteristicName.PDF, x, log_form, mu=mu, sigma=sigma)


def plogis(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Logistic distribution function."""
    return _evaluate(FamilyName.LOGISTIC, CharacteristicName.CDF, x, log_form, mu=mu, sigma=sigma)


def qlogis(p: Any, mu: Any, sigma: Any) -> Any:
    """Logistic quantile function."""
    return _evaluate(FamilyName.LOGISTIC, CharacteristicName.PPF, p, mu=mu, sigma=sigma)


# Log-normal


def dlnorm(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Log-normal density; ``mu`` and ``sigma`` describe ``log(X)``."""
    return _evaluate(
        FamilyName.LOGNORMAL, CharacteristicName.PDF, x, log_form, mu=mu, sigma=sigma
    )


def plnorm(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Log-normal distribution function."""
    return _evaluate(
        FamilyName.LOGNORMAL, CharacteristicName.CDF, x, log_form, mu=mu, sigma=sigma
    )


def qlnorm(p: Any, mu: Any, sigma: Any) -> Any:
    """Log-normal quantile function."""
    return _evaluate(FamilyName.LOGNORMAL, CharacteristicName.PPF, p, mu=mu, sigma=sigma)


# Normal


def dnorm(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Normal density with mean ``mu`` and standard deviation ``sigma``."""
    return _evaluate(FamilyName.NORMAL, CharacteristicName.PDF, x, log_form, mu=mu, sigma=sigma)


def pnorm(x: Any, mu: Any, sigma: Any, log_form: bool = False) -> Any:
    """Normal distribution function."""
    return _evaluate(FamilyName.NORMAL, CharacteristicName.CDF, x, log_form, mu=mu, sigma=sigma)


def qnorm(p: Any, mu: Any, sigma: Any) -> Any:
    """Normal quantile function."""
    return _evaluate(FamilyName.NORMAL, CharacteristicName.PPF, p, mu=mu, sigma=sigma)


# Student-t


def dt(x: Any, df: Any, log_form: bool = False) -> Any:
    """
    Student's t density with ``df`` degrees of freedom.

    ``df = inf`` gives exactly the standard normal density.
    """
    return _evaluate(FamilyName.STUDENT_T, CharacteristicName.PDF, x, log_form, df=df)


def pt(x: Any, df: Any, log_form: bool = False) -> Any:
    """Student's t distribution function."""
    return _evaluate(FamilyName.STUDENT_T, CharacteristicName.CDF, x, log_form, df=df)


def qt(p: Any, df: Any) -> Any:
    """Student's t quantile function."""
    return _evaluate(FamilyName.STUDENT_T, CharacteristicName.PPF, p, df=df)


# Uniform


def dunif(x: Any, a: Any, b: Any, log_form: bool = False) -> Any:
    """Uniform density on ``[a, b]``."""
    return _evaluate(
        FamilyName.CONTINUOUS_UNIFORM, CharacteristicName.PDF, x, log_form, a=a, b=b
    )


def punif(x: Any, a: Any, b: Any, log_form: bool = False) -> Any:
    """Uniform distribution function."""
    return _evaluate(
        FamilyName.CONTINUOUS_UNIFORM, CharacteristicName.CDF, x, log_form, a=a, b=b
    )


def qunif(p: Any, a: Any, b: Any) -> Any:
    """Uniform quantile function."""
    return _evaluate(FamilyName.CONTINUOUS_UNIFORM, CharacteristicName.PPF, p, a=a, b=b)


# Weibull


def dweibull(x: Any, shape: Any, scale: Any, log_form: bool = False) -> Any:
    """Weibull density with shape ``shape`` and scale ``scale``."""
    return _evaluate(
        FamilyName.WEIBULL, CharacteristicName.PDF, x, log_form, shape=shape, scale=scale
    )


def pweibull(x: Any, shape: Any, scale: Any, log_form: bool = False) -> Any:
    """Weibull distribution function."""
    return _evaluate(
        FamilyName.WEIBULL, CharacteristicName.CDF, x, log_form, shape=shape, scale=scale
    )


def qweibull(p: Any, shape: Any, scale: Any) -> Any:
    """Weibull quantile function."""
    return _evaluate(FamilyName.WEIBULL, CharacteristicName.PPF, p, shape=shape, scale=scale)


__all__ = [
    "dbern",
    "dbeta",
    "dcauchy",
    "dchisq",
    "dexp",
    "df",
    "dgamma",
    "dinvgamma",
    "dlaplace",
    "dlnorm",
    "dlogis",
    "dnorm",
    "dt",
    "dunif",
    "dweibull",
    "pbern",
    "pbeta",
    "pcauchy",
    "pchisq",
    "pexp",
    "pf",
    "pgamma",
    "pinvgamma",
    "plaplace",
    "plnorm",
    "plogis",
    "pnorm",
    "pt",
    "punif",
    "pweibull",
    "qbern",
    "qbeta",
    "qcauchy",
    "qchisq",
    "qexp",
    "qf",
    "qgamma",
    "qinvgamma",
    "qlaplace",
    "qlnorm",
    "qlogis",
    "qnorm",
    "qt",
    "qunif",
    "qweibull",
]
