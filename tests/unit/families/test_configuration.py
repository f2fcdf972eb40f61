"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from pysatl_statslib.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_statslib.families.registry import ParametricFamilyRegister
from pysatl_statslib.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_all_families_registered(self):
        """Test that every built-in family is registered."""
        registered_families = set(self.registry.list_registered_families())
        assert registered_families == set(FamilyName)

    @pytest.mark.parametrize("family_name", list(FamilyName))
    def test_every_family_provides_pdf_cdf_ppf(self, family_name):
        """Test that each family evaluates the three characteristics."""
        family = self.registry.get(family_name)
        assert family.name == family_name
        assert family.characteristics == {"pdf", "cdf", "ppf"}

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert set(registry2.list_registered_families()) == set(FamilyName)

    def test_configuring_twice_after_reset_does_not_duplicate(self):
        """Test that configure functions skip families already registered."""
        reset_families_register()
        configure_families_register()
        configure_families_register.cache_clear()
        registry = configure_families_register()
        assert len(registry.list_registered_families()) == len(FamilyName)

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family is not None
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError, match="NonExistentFamily"):
            self.registry.get("NonExistentFamily")

    def test_registry_contains(self):
        """Test the contains method of ParametricFamilyRegister."""
        assert ParametricFamilyRegister.contains(FamilyName.GAMMA)
        assert not ParametricFamilyRegister.contains("NonExistentFamily")

    def test_registry_list_registered_families(self):
        """Test the list_registered_families method of ParametricFamilyRegister."""
        families_list = ParametricFamilyRegister.list_registered_families()

        assert isinstance(families_list, list)
        assert FamilyName.NORMAL in families_list
        assert FamilyName.CONTINUOUS_UNIFORM in families_list
        assert "NonExistentFamily" not in families_list

    def test_registration_is_logged(self, caplog):
        """Test that registering families emits debug records."""
        reset_families_register()
        with caplog.at_level(logging.DEBUG, logger="pysatl_statslib.families"):
            configure_families_register()

        messages = [record.getMessage() for record in caplog.records]
        assert "Registered family Normal" in messages
        assert f"Configured {len(FamilyName)} families" in messages
