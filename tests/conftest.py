"""Shared test fixtures and utilities for countryidentity tests."""

import pytest

from countryidentity.countries.countryapi import ISO3166


@pytest.fixture
def foo():
    """A minimal, fully-populated country record."""
    return {
        "alpha2": "FO",
        "alpha3": "FOO",
        "numeric": "001",
        "name": "FOO",
        "currency": ["EUR"],
    }


@pytest.fixture
def bar():
    return {
        "alpha2": "BA",
        "alpha3": "BAR",
        "numeric": "002",
        "name": "BAR",
        "currency": [],
    }


@pytest.fixture
def iso_small(foo, bar):
    """Facade over a two-record caller-supplied dataset."""
    return ISO3166([foo, bar])


@pytest.fixture(scope="session")
def iso():
    """Facade over the default dataset."""
    return ISO3166()


@pytest.fixture
def sample_countries():
    """Fixture providing sample country names/codes and their alpha2 codes."""
    return {
        "USA": "US",
        "United States": "US",
        "United Kingdom": "GB",
        "UK": "GB",
        "Australia": "AU",
        "Canada": "CA",
        "Germany": "DE",
        "France": "FR",
        "Holland": "NL",
        "Ivory Coast": "CI",
    }
