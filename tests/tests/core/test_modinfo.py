#!/usr/bin/env python3
import os
from pathlib import Path

import pytest

from modinfo.core.errors import (
    FsNotFound,
    InvalidVersion,
    MissingRequiredField,
    ModinfoIOError,
    NoModinfoAuthor,
    NoModinfoDescription,
    NoModinfoName,
    NoModinfoVersion,
    WriteError,
    XmlError,
)
from modinfo.core.fields import FieldKey, ModinfoFormat
from modinfo.core.modinfo import Modinfo, parse_validated
from modinfo.core.version import Version

COMPLETE = (
    '<xml><Name value="N" /><Version value="{version}" />'
    '<Description value="D" /><Author value="A" /></xml>'
)


# --- Defaults --- #

def test_new_has_defaults():
    m = Modinfo.new()
    assert m.get_modinfo_version() is ModinfoFormat.CURRENT
    assert m.get_version() == Version.new(0, 1, 0)
    assert m.get_file_path() is None
    for field in ("author", "description", "display_name", "name", "website", "compat"):
        assert m.get_value_for(field) is None


def test_unknown_top_level_attributes_forbidden():
    with pytest.raises(ValueError):
        Modinfo(custom="nope")  # type: ignore[call-arg]


# --- Named access --- #

def test_get_value_for_fixture(current_xml):
    m = Modinfo.from_string(current_xml)
    assert m.get_value_for("name") == "SomeInternalName"
    assert m.get_value_for("display_name") == "Official Mod Name"
    assert m.get_value_for("author") == "Name"
    assert m.get_value_for("compat") == "A99"
    assert m.get_value_for("description") == "Mod to show format of ModInfo v2"
    assert m.get_value_for("website") == "HP"
    assert m.get_value_for("foo") is None


def test_get_value_for_is_case_insensitive(current_xml):
    m = Modinfo.from_string(current_xml)
    assert m.get_value_for("Author") == m.get_value_for("author") == m.get_value_for("AUTHOR")
    assert m.get_value_for(FieldKey.AUTHOR) == "Name"


def test_get_value_for_does_not_serve_version(current_xml):
    m = Modinfo.from_string(current_xml)
    assert m.get_value_for("version") is None
    assert m.get_value_for("Version") is None
    assert str(m.get_version()) == "2.3.4"


def test_set_value_for_each_field():
    m = Modinfo.new()
    m.set_value_for("Author", "Joe")
    m.set_value_for("description", "Some Description")
    m.set_value_for("DISPLAY_NAME", "Some Mod")
    m.set_value_for("name", "SomeMod")
    m.set_value_for("website", "https://example.org")
    m.set_value_for("compat", "A21")
    m.set_value_for("version", "1.2.3")
    assert m.author == "Joe"
    assert m.description == "Some Description"
    assert m.display_name == "Some Mod"
    assert m.name == "SomeMod"
    assert m.website == "https://example.org"
    assert m.version.compat == "A21"
    assert m.get_version() == Version.new(1, 2, 3)


def test_set_value_for_unknown_field_raises():
    with pytest.raises(ValueError, match="Unknown modinfo field"):
        Modinfo.new().set_value_for("homepage", "x")


def test_assignment_is_validated():
    m = Modinfo.new()
    with pytest.raises(ValueError):
        m.name = ["not", "a", "string"]  # type: ignore[assignment]


# --- Version operations --- #

def test_set_version_is_lenient():
    m = Modinfo.new()
    m.set_version("v3")
    assert m.get_version() == Version.new(3, 0, 0)
    m.set_version("garbage")
    assert str(m.get_version()).startswith("0.0.0+Invalid version")


@pytest.mark.parametrize("bump,expected", [
    ("bump_version_major", Version.new(2, 0, 0)),
    ("bump_version_minor", Version.new(1, 3, 0)),
    ("bump_version_patch", Version.new(1, 2, 4)),
])
def test_bumps(bump, expected):
    m = Modinfo.new()
    m.set_version("1.2.3-foo+bar")
    getattr(m, bump)()
    assert m.get_version() == expected


def test_prerelease_and_build():
    m = Modinfo.new()
    m.set_version("1.2.3")
    m.set_version_prerelease("foo")
    assert str(m.get_version()) == "1.2.3-foo"
    m.set_version_build("bar")
    assert str(m.get_version()) == "1.2.3-foo+bar"


def test_invalid_prerelease_propagates():
    m = Modinfo.new()
    with pytest.raises(InvalidVersion):
        m.set_version_prerelease("not valid")
    with pytest.raises(InvalidVersion):
        m.set_version_build("no/slashes")


def test_bump_keeps_compat():
    m = Modinfo.from_string('<xml><Version value="1.0.0" compat="A20" /></xml>')
    m.bump_version_minor()
    assert m.get_value_for("compat") == "A20"


# --- Layout & path bookkeeping --- #

def test_modinfo_version_round_trip():
    m = Modinfo.new()
    m.set_modinfo_version(ModinfoFormat.LEGACY)
    assert m.get_modinfo_version() is ModinfoFormat.LEGACY
    m.set_modinfo_version("current")
    assert m.get_modinfo_version() is ModinfoFormat.CURRENT


def test_file_path_round_trip():
    m = Modinfo.new()
    m.set_file_path("modinfo.xml")
    assert m.get_file_path() == Path("modinfo.xml")


# --- Validation --- #

def test_validate_passes_for_complete_document():
    m = Modinfo.from_string(COMPLETE.format(version="1.0"))
    m.validate()
    assert m.missing_fields() == []


@pytest.mark.parametrize("drop,error", [
    ("Author", NoModinfoAuthor),
    ("Description", NoModinfoDescription),
    ("Name", NoModinfoName),
])
def test_validate_reports_missing_field(drop, error):
    xml = COMPLETE.format(version="1.0").replace(f'<{drop} value="{drop[0]}" />', "")
    m = Modinfo.from_string(xml)
    with pytest.raises(error):
        m.validate()


def test_validate_blank_value_counts_as_missing():
    m = Modinfo.from_string(COMPLETE.format(version="1.0").replace('Author value="A"', 'Author value="  "'))
    with pytest.raises(NoModinfoAuthor, match="No Author found in modinfo.xml"):
        m.validate()


@pytest.mark.parametrize("xml", [
    COMPLETE.format(version=""),
    COMPLETE.format(version="   "),
    COMPLETE.replace('<Version value="{version}" />', ""),
])
def test_validate_missing_or_empty_version(xml):
    with pytest.raises(NoModinfoVersion, match="No Version found"):
        Modinfo.from_string(xml).validate()


def test_garbage_version_is_not_missing():
    Modinfo.from_string(COMPLETE.format(version="garbage")).validate()


def test_validate_order_and_missing_fields():
    m = Modinfo.from_string("<xml />")
    assert m.missing_fields() == [FieldKey.AUTHOR, FieldKey.DESCRIPTION, FieldKey.NAME, FieldKey.VERSION]
    with pytest.raises(NoModinfoAuthor):
        m.validate()


def test_new_model_has_a_version():
    m = Modinfo.new()
    assert FieldKey.VERSION not in m.missing_fields()


# --- parse_validated --- #

def test_parse_validated_records_path(write_xml, legacy_xml):
    path = write_xml(legacy_xml)
    m = parse_validated(path)
    assert m.get_file_path() == path
    assert m.get_modinfo_version() is ModinfoFormat.LEGACY
    assert Modinfo.from_file(str(path)) == m


def test_parse_validated_missing_file(tmp_path):
    with pytest.raises(FsNotFound, match="File not found"):
        parse_validated(tmp_path / "nope.xml")
    with pytest.raises(FileNotFoundError):
        Modinfo.from_file(tmp_path / "nope.xml")


@pytest.mark.parametrize("drop,error", [
    ("Author", NoModinfoAuthor),
    ("Description", NoModinfoDescription),
    ("Name", NoModinfoName),
])
def test_parse_validated_missing_required(write_xml, current_xml, drop, error):
    lines = [ln for ln in current_xml.splitlines() if f"<{drop} " not in ln]
    with pytest.raises(error):
        parse_validated(write_xml("\n".join(lines)))


def test_parse_validated_empty_version(write_xml, current_xml):
    path = write_xml(current_xml.replace('value="2.3.4"', 'value=""'))
    with pytest.raises(NoModinfoVersion):
        parse_validated(path)


def test_parse_validated_malformed_xml(write_xml):
    with pytest.raises(XmlError):
        parse_validated(write_xml("<xml><Name value='x'>"))


def test_parse_validated_invalid_utf8(tmp_path):
    path = tmp_path / "ModInfo.xml"
    path.write_bytes(b'<xml><Name value="\xff\xfe" /></xml>')
    with pytest.raises(XmlError, match="not valid UTF-8"):
        parse_validated(path)


def test_parse_validated_directory_is_io_error(tmp_path):
    with pytest.raises(ModinfoIOError):
        parse_validated(tmp_path)


def test_missing_required_errors_share_a_base():
    assert issubclass(NoModinfoVersion, MissingRequiredField)


# --- write --- #

def test_write_to_explicit_path_and_reread(tmp_path, current_xml):
    m = Modinfo.from_string(current_xml)
    out = tmp_path / "out.xml"
    m.write(out)
    assert parse_validated(out).get_value_for("website") == "HP"


def test_write_to_stored_path(write_xml, legacy_xml):
    path = write_xml(legacy_xml)
    m = parse_validated(path)
    m.bump_version_major()
    m.set_modinfo_version(ModinfoFormat.CURRENT)
    m.write()
    reread = parse_validated(path)
    assert str(reread.get_version()) == "2.0.0"
    assert reread.get_modinfo_version() is ModinfoFormat.CURRENT
    assert path.read_text(encoding="utf-8").startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_write_without_any_path_raises():
    with pytest.raises(WriteError):
        Modinfo.new().write()


def test_write_failure_is_io_error(tmp_path):
    target = tmp_path / "missing-dir" / "ModInfo.xml"
    with pytest.raises(ModinfoIOError) as excinfo:
        Modinfo.new().write(target)
    assert isinstance(excinfo.value, OSError)
    assert not os.path.exists(target)
