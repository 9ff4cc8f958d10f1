"""Tests for the ISO3166 lookup facade over the default and custom datasets."""

import unicodedata

import pandas as pd
import pytest

from countryidentity.countries.countryapi import ISO3166, ISO3166Objects, default_dataset
from countryidentity.countries.countryerrors import (
    CountryNotFoundError,
    EmptyNameError,
    InvalidInputError,
    InvalidKeyError,
    MalformedKeyError,
    MissingKeyError,
)
from countryidentity.countries.countryidentity import ArrayDataset
from countryidentity.countries.countryrecord import Country
from countryidentity.countries.countryvalidator import CountryValidator


DEFAULT_COUNT = 249


# ---- Round trips over the default dataset ----

def test_every_record_round_trips(iso):
    """Every record is found again by each of its own keys"""
    for record in iso.all():
        assert iso.alpha2(record["alpha2"]) == record
        assert iso.alpha3(record["alpha3"]) == record
        assert iso.numeric(record["numeric"]) == record
        assert iso.exact_name(record["name"]) == record
        assert iso.name(record["name"]) == record
        assert iso.alpha(record["alpha2"]) == record
        assert iso.alpha(record["alpha3"]) == record


def test_default_record_layout(iso):
    record = iso.alpha2("NA")
    assert record == {
        "name": "Namibia",
        "alpha2": "NA",
        "alpha3": "NAM",
        "numeric": "516",
        "currency": ["NAD", "ZAR"],
        "adjectival": record["adjectival"],
        "demonym": record["demonym"],
    }
    assert isinstance(record["adjectival"], list)


def test_leading_zeros_kept(iso):
    assert iso.numeric("004")["name"] == "Afghanistan"


# ---- Case and unicode handling ----

def test_alpha2_case_insensitive(iso):
    for record in iso.all():
        code = record["alpha2"]
        assert iso.alpha2(code.lower()) == iso.alpha2(code.upper())


@pytest.mark.parametrize("query", [
    "Côte d'Ivoire",
    "CÔTE D'IVOIRE",
    "côte d'ivoire",
    unicodedata.normalize("NFD", "CÔTE D'IVOIRE"),
])
def test_unicode_name(iso, query):
    assert iso.name(query)["alpha3"] == "CIV"


def test_non_ascii_prefix(iso):
    assert iso.name("åland")["alpha2"] == "AX"


# ---- Prefix behaviour ----

class TestPrefixMatching:
    """Prefix tolerance resolves ambiguity by dataset order"""

    def test_prefix(self, iso):
        assert iso.name("Franc")["alpha2"] == "FR"

    def test_ambiguous_prefix_takes_first_record(self, iso):
        assert iso.name("United")["name"] == "United Arab Emirates"

    def test_exact_match_wins_over_earlier_prefix(self, iso):
        assert iso.name("Niger")["alpha2"] == "NE"
        assert iso.name("Nigeria")["alpha2"] == "NG"
        assert iso.name("Dominican Republic")["alpha2"] == "DO"
        assert iso.name("Guinea")["alpha2"] == "GN"

    def test_exact_name_rejects_prefix(self, iso):
        with pytest.raises(CountryNotFoundError):
            iso.exact_name("Franc")

    def test_code_prefix(self, iso):
        """A well-formed code is never a proper prefix of another"""
        assert iso.alpha3("deu")["name"] == "Germany"


# ---- Rejection ----

@pytest.mark.parametrize("value", ["A", "ABC", "12"])
def test_alpha2_shape_rejected(iso, value):
    with pytest.raises(MalformedKeyError):
        iso.alpha2(value)


@pytest.mark.parametrize("value", ["AB", "12", "1234"])
def test_numeric_shape_rejected(iso, value):
    with pytest.raises(MalformedKeyError):
        iso.numeric(value)


@pytest.mark.parametrize("method", ["name", "exact_name", "alpha2", "alpha3", "alpha", "numeric"])
def test_non_string_rejected(iso, method):
    with pytest.raises(InvalidInputError):
        getattr(iso, method)(840)


def test_blank_name_rejected(iso):
    with pytest.raises(EmptyNameError):
        iso.name("   ")


def test_not_found_message(iso):
    with pytest.raises(CountryNotFoundError, match='"alpha2".*zz') as exc:
        iso.alpha2("zz")
    assert exc.value.key == "alpha2"
    assert exc.value.value == "zz"


# ---- Combined alpha ----

class TestAlpha:

    def test_alpha2_and_alpha3(self, iso):
        us = iso.alpha2("US")
        assert iso.alpha("US") == us
        assert iso.alpha("usa") == us
        assert us["name"] == "United States of America"

    def test_neither_shape(self, iso):
        with pytest.raises(MalformedKeyError, match="Not a valid alpha key: U"):
            iso.alpha("U")

    def test_not_found_lists_both_attempts(self, iso):
        with pytest.raises(CountryNotFoundError,
                           match='No "alpha2" or "alpha3" key found matching: ZZZ') as exc:
            iso.alpha("ZZZ")
        assert exc.value.attempts == (("alpha2", "ZZZ"), ("alpha3", "ZZZ"))

    def test_no_prefix_across_widths(self, iso):
        """UK is not a code; it must not prefix-match UKR"""
        with pytest.raises(CountryNotFoundError):
            iso.alpha("UK")


# ---- Enumeration ----

class TestEnumeration:

    def test_counts_agree(self, iso):
        assert iso.count() == len(iso) == len(iso.all()) == DEFAULT_COUNT
        assert sum(1 for _ in iso.iterator("alpha3")) == DEFAULT_COUNT
        assert sum(1 for _ in iso) == DEFAULT_COUNT

    def test_iterator_restartable(self, iso):
        first = list(iso.iterator(ISO3166.KEY_ALPHA3))
        second = list(iso.iterator(ISO3166.KEY_ALPHA3))
        assert len(first) == len(second) == DEFAULT_COUNT
        assert first == second

    def test_iterator_pairs(self, iso):
        by_alpha3 = dict(iso.iterator("alpha3"))
        assert by_alpha3["FRA"]["name"] == "France"

    def test_iterator_default_key(self, iso):
        key, record = next(iso.iterator())
        assert key == record["alpha2"] == "AF"

    def test_iterator_order(self, iso):
        names = [key for key, _ in iso.iterator("name")]
        assert names[:2] == ["Afghanistan", "Åland Islands"]

    def test_invalid_key_is_eager(self, iso):
        with pytest.raises(InvalidKeyError,
                           match='got "foo", expected one of: name, alpha2, alpha3, numeric'):
            iso.iterator("foo")

    def test_all_returns_copies(self, iso):
        iso.all()[0]["name"] = "changed"
        assert iso.all()[0]["name"] == "Afghanistan"


# ---- Construction ----

class TestConstruction:

    def test_custom_records(self, iso_small, foo):
        assert iso_small.count() == 2
        assert iso_small.alpha2("fo") == foo
        assert iso_small.name("ba")["alpha3"] == "BAR"
        with pytest.raises(CountryNotFoundError):
            iso_small.alpha2("US")

    def test_custom_records_validated(self):
        with pytest.raises(MissingKeyError):
            ISO3166([{"alpha3": "FOO", "numeric": "001", "name": "Foo"}])

    def test_empty_records(self):
        iso = ISO3166([])
        assert iso.count() == 0
        assert iso.all() == []

    def test_normalizing_validator(self):
        iso = ISO3166(
            [{"name": " Foo ", "alpha2": "fo", "alpha3": "foo", "numeric": "001", "currency": "eur"}],
            validator=CountryValidator(),
        )
        assert iso.alpha2("FO") == {
            "name": "Foo", "alpha2": "FO", "alpha3": "FOO", "numeric": "001", "currency": ["EUR"],
        }

    def test_dataframe(self):
        df = pd.DataFrame([
            {"name": "Foo", "alpha2": "FO", "alpha3": "FOO", "numeric": "001", "currency": "EUR|USD"},
        ])
        iso = ISO3166(df)
        assert iso.alpha3("foo")["currency"] == ["EUR", "USD"]

    def test_custom_dataset(self):
        class SingleCountry:
            """Minimal Dataset that ignores the query"""

            record = {"name": "Foo", "alpha2": "FO", "alpha3": "FOO", "numeric": "001"}

            def lookup(self, key, value, exact=False):
                return dict(self.record)

            def all(self):
                return [dict(self.record)]

            def __iter__(self):
                return iter(self.all())

            def __len__(self):
                return 1

        iso = ISO3166(SingleCountry())
        assert iso.numeric("999")["alpha2"] == "FO"
        assert iso.count() == 1
        # guards still run before the dataset is consulted
        with pytest.raises(MalformedKeyError):
            iso.numeric("9")

    def test_two_argument_dataset(self, foo, bar):
        """A dataset whose lookup takes only (key, value) serves every operation"""
        class PlainDataset:
            def __init__(self, records):
                self.records = records

            def lookup(self, key, value):
                for record in self.records:
                    if record[key].lower().startswith(value.lower()):
                        return dict(record)
                raise CountryNotFoundError(key, value)

            def all(self):
                return [dict(r) for r in self.records]

            def __iter__(self):
                return iter(self.all())

            def __len__(self):
                return len(self.records)

        iso = ISO3166(PlainDataset([foo, bar]))
        assert iso.alpha2("FO") == foo
        assert iso.alpha3("bar") == bar
        assert iso.numeric("002") == bar
        assert iso.name("fo") == foo
        assert iso.exact_name("bar") == bar
        assert iso.alpha("foo") == foo
        assert iso.alpha("BA") == bar

        with pytest.raises(CountryNotFoundError, match='No "name" key found matching: Fo'):
            iso.exact_name("Fo")
        with pytest.raises(CountryNotFoundError) as exc:
            iso.alpha("ZZ")
        assert exc.value.attempts == (("alpha2", "ZZ"), ("alpha3", "ZZ"))

    def test_validator_rejected_without_records(self, iso_small):
        with pytest.raises(ValueError, match="default dataset"):
            ISO3166(validator=CountryValidator())
        with pytest.raises(ValueError, match="a Dataset"):
            ISO3166(iso_small.dataset, validator=CountryValidator())

    def test_default_shares_dataset(self):
        assert ISO3166().dataset is default_dataset()
        assert isinstance(default_dataset(), ArrayDataset)


# ---- Object facade ----

class TestISO3166Objects:

    @pytest.fixture(scope="class")
    def iso_objects(self):
        return ISO3166Objects()

    def test_returns_country(self, iso_objects):
        france = iso_objects.alpha2("fr")
        assert isinstance(france, Country)
        assert france.alpha3 == "FRA"
        assert france.numeric == "250"
        assert france.currency == ("EUR",)

    def test_hashable_and_comparable(self, iso_objects):
        assert iso_objects.alpha("DEU") == iso_objects.numeric("276")
        assert len({iso_objects.alpha2("DE"), iso_objects.alpha3("DEU")}) == 1

    def test_enumeration(self, iso_objects):
        assert all(isinstance(c, Country) for c in iso_objects.all())
        assert all(isinstance(c, Country) for c in iso_objects)
        key, country = next(iso_objects.iterator("alpha3"))
        assert key == country.alpha3 == "AFG"

    def test_to_dict(self, iso_objects, iso):
        assert iso_objects.alpha2("NA").to_dict() == iso.alpha2("NA")
