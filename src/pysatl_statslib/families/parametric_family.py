"""
Parametric family definitions and evaluation infrastructure.

This module contains the main class for defining parametric families of
distributions: multiple parameterizations, the closed-form characteristics
(pdf, cdf, ppf) of the family, and the uniform evaluation policy applied
around them.

Evaluation policy
-----------------
Every call resolves one working type, casts the parameters to it, checks the
parameter constraints once and resolves the support once. Then, per element,
the first matching guard wins:

1. invalid parameters give NaN (the whole container is NaN);
2. a NaN primary input gives NaN;
3. pdf outside the support gives 0;
4. cdf below the support gives 0, at or above its upper end gives 1;
5. ppf outside ``[0, 1]`` gives NaN; for continuous families ``p == 0`` and
   ``p == 1`` give the support endpoints;
6. otherwise the family's own formula is evaluated.

Log forms of the guard values are taken last, ``log(0) = -inf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, dataclass_transform

import numpy as np

from pysatl_statslib.broadcasting import apply, fill
from pysatl_statslib.containers import is_container
from pysatl_statslib.distributions.strategies import DefaultSamplingUnivariateStrategy
from pysatl_statslib.families.distribution import ParametricFamilyDistribution
from pysatl_statslib.families.forms import log_if
from pysatl_statslib.promotion import working_constants, working_dtype
from pysatl_statslib.types import CharacteristicName, DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_statslib.distributions.strategies import SamplingStrategy
    from pysatl_statslib.distributions.support import Support
    from pysatl_statslib.families.parametrizations import (
        Parametrization,
    )
    from pysatl_statslib.promotion import WorkingConstants
    from pysatl_statslib.types import (
        GenericCharacteristicName,
        ParametrizationName,
        Real,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportArg = Callable[[Parametrization], Support | None] | None
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., gamma, Student-t)
    that can be parameterized in different ways. Manages parametrizations,
    distribution characteristics, and provides both the evaluation entry
    point and factory methods for creating distribution instances.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to scalar formula evaluators.
        Single functions are treated as defined for the base parametrization.
        ``pdf`` and ``cdf`` evaluators are called as
        ``func(parameters, x, log_form=...)``, ``ppf`` as ``func(parameters, p)``,
        always with arguments already cast to the working type.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distributions.
    support_by_parametrization : Callable or None, optional
        Function that returns support for given parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_parametrization: SupportArg = None,
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        if support_by_parametrization is None:
            self._support_resolver: SupportResolver
            self._support_resolver = lambda _params: None
        else:
            self._support_resolver = support_by_parametrization

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.parametrization_names[0]: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # Precompute analytical plan
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    @property
    def characteristics(self) -> set[GenericCharacteristicName]:
        """Names of the characteristics the family evaluates."""
        return set(self.distr_characteristics)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def distribution_type(self, parameters: Parametrization) -> DistributionType:
        """Distribution type of the family member with the given parameters."""
        return self._distr_type(self.to_base(parameters))

    def _provider_name(
        self, characteristic: GenericCharacteristicName, parameters: Parametrization
    ) -> ParametrizationName:
        """
        Name of the parametrization whose formula evaluates ``characteristic``.

        Raises
        ------
        KeyError
            If the family does not provide the characteristic.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        if characteristic not in plan:
            raise KeyError(f"Family {self.name} does not provide characteristic '{characteristic}'")
        return plan[characteristic]

    def _scalar_evaluator(
        self,
        characteristic: GenericCharacteristicName,
        func: ParametrizedFunction,
        parameters: Parametrization,
        support: Support | None,
        constants: WorkingConstants,
        continuous: bool,
        **options: Any,
    ) -> Callable[[Any], Real]:
        """Bind parameters and the guard sequence into a scalar evaluator."""
        c = constants

        if characteristic == CharacteristicName.PDF:
            log_form = bool(options.get("log_form", False))

            def evaluate_pdf(x: Any) -> Real:
                x = c.cast(x)
                if np.isnan(x):
                    return c.nan
                if support is not None and not support.contains(x):
                    return log_if(c.zero, log_form)
                return c.cast(func(parameters, x, log_form=log_form))

            return evaluate_pdf

        if characteristic == CharacteristicName.CDF:
            log_form = bool(options.get("log_form", False))

            def evaluate_cdf(x: Any) -> Real:
                x = c.cast(x)
                if np.isnan(x):
                    return c.nan
                if support is not None:
                    if x < support.lower:
                        return log_if(c.zero, log_form)
                    if x >= support.upper:
                        return log_if(c.one, log_form)
                return c.cast(func(parameters, x, log_form=log_form))

            return evaluate_cdf

        if characteristic == CharacteristicName.PPF:

            def evaluate_ppf(p: Any) -> Real:
                p = c.cast(p)
                if np.isnan(p) or p < c.zero or p > c.one:
                    return c.nan
                if continuous and support is not None:
                    if p == c.zero:
                        return c.cast(support.lower)
                    if p == c.one:
                        return c.cast(support.upper)
                return c.cast(func(parameters, p))

            return evaluate_ppf

        def evaluate(x: Any) -> Real:
            return c.cast(func(parameters, c.cast(x), **options))

        return evaluate

    def evaluate(
        self,
        characteristic: GenericCharacteristicName,
        data: Any,
        parameters: Parametrization,
        **options: Any,
    ) -> Any:
        """
        Evaluate a characteristic at a scalar or over a container.

        Parameters
        ----------
        characteristic : str
            Characteristic name (``"pdf"``, ``"cdf"`` or ``"ppf"``).
        data : Any
            Primary input: a real scalar or a numeric container.
        parameters : Parametrization
            Parameters in any registered parametrization of this family.
            They do not need to satisfy the constraints.
        **options : Any
            ``log_form`` for ``pdf`` and ``cdf``.

        Returns
        -------
        Any
            A scalar of the working type, or a container of the input's
            backend and shape holding the working type. Invalid parameters
            are signalled by NaN, never by an exception.

        Raises
        ------
        KeyError
            If the family does not provide ``characteristic``.
        TypeError
            If ``data`` or a parameter value is not numeric.
        """
        provider_name = self._provider_name(characteristic, parameters)
        dtype = working_dtype(data, *parameters.parameters.values())
        c = working_constants(dtype)

        with np.errstate(all="ignore"):
            parameters = parameters.astype(dtype)
            base_params = self.to_base(parameters).astype(dtype) if parameters.is_valid() else None
            # a valid alternative may still map to base values out of range
            if base_params is None or not base_params.is_valid():
                return fill(data, c.nan, dtype) if is_container(data) else c.nan

            func = self.distr_characteristics[characteristic][provider_name]
            provider_params = parameters if provider_name == parameters.name else base_params
            working_params = provider_params.astype(dtype)
            support = self.support_resolver(base_params)
            continuous = self._distr_type(base_params).is_continuous

            evaluator = self._scalar_evaluator(
                characteristic, func, working_params, support, c, continuous, **options
            )
            return apply(evaluator, data, dtype)

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        distribution_type = self._distr_type(base_parameters)
        return ParametricFamilyDistribution(
            self.name, distribution_type, parameters, self.support_resolver(base_parameters)
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_statslib.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
