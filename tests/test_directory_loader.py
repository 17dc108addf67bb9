import logging

import pytest

from country_codes.directory.config import DEFAULT_TABLE_PATH
from country_codes.directory.loader import CountryTableError, get_countries, load_countries
from country_codes.directory.lookup import find_by_dial_code, find_by_iso_code
from country_codes.directory.models import Country


def test_bundled_table_loads_once():
    first = load_countries(DEFAULT_TABLE_PATH)
    assert len(first) > 200
    assert load_countries(DEFAULT_TABLE_PATH) is first
    assert get_countries() is first


def test_table_path_from_environment(write_table):
    write_table(
        """
- name: "Atlantis"
  code: "AT"
  dial_code: "+999"
  national_significant_number: 7
"""
    )
    assert get_countries() == (Country("Atlantis", "AT", "+999", 7),)
    assert find_by_iso_code("at").name == "Atlantis"
    assert find_by_dial_code("999").name == "Atlantis"


def test_malformed_entry_falls_back_to_defaults(write_table, caplog):
    write_table(
        """
- name: "Nowhere"
- code: "XX"
  dial_code: "+998"
"""
    )
    with caplog.at_level(logging.WARNING):
        countries = get_countries()
    assert countries == (
        Country("Nowhere", "US", "+1", None),
        Country("United States", "XX", "+998", None),
    )
    messages = [record.getMessage() for record in caplog.records]
    assert any("entry 0" in m and "'code'" in m for m in messages)
    assert any("entry 1" in m and "'name'" in m for m in messages)


def test_missing_table_raises(tmp_path):
    with pytest.raises(CountryTableError, match="could not be read"):
        load_countries(tmp_path / "absent.yml")


def test_table_must_be_a_list(write_table):
    path = write_table("name: France\n")
    with pytest.raises(CountryTableError, match="must be a list"):
        load_countries(path)


def test_invalid_yaml_raises(write_table):
    path = write_table("- name: [unclosed\n")
    with pytest.raises(CountryTableError, match="not valid YAML"):
        load_countries(path)


def test_wrongly_typed_entry_raises_with_index(write_table):
    path = write_table(
        """
- name: "France"
  code: "FR"
  dial_code: "+33"
- name: "Norway"
  code: "NO"
  dial_code: "+47"
  national_significant_number: "eight"
"""
    )
    with pytest.raises(CountryTableError, match="entry 1"):
        load_countries(path)


def test_dial_code_without_plus_is_rejected(write_table):
    path = write_table(
        """
- name: "United Kingdom"
  code: "GB"
  dial_code: "44"
"""
    )
    with pytest.raises(CountryTableError, match="entry 0"):
        load_countries(path)
