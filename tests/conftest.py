#!/usr/bin/env python3
import pytest


LEGACY_XML = """
          <ModInfo>
              <Name value="SomeInternalName" />
              <Version value="1.2.3" compat="A99" />
              <Description value="Mod to show format of ModInfo v1" />
              <Author value="Name" />
          </ModInfo>
      """

LEGACY_XML_NO_COMPAT = """
          <ModInfo>
              <Name value="SomeInternalName" />
              <Version value="1.2.3" />
              <Description value="Mod to show format of ModInfo v1" />
              <Author value="Name" />
          </ModInfo>
      """

CURRENT_XML = """
          <?xml version="1.0" encoding="UTF-8"?>
          <xml>
              <Name value="SomeInternalName" />
              <DisplayName value="Official Mod Name" />
              <Version value="2.3.4" compat="A99" />
              <Description value="Mod to show format of ModInfo v2" />
              <Author value="Name" />
              <Website value="HP" />
          </xml>
      """

CURRENT_XML_NO_COMPAT = """
          <?xml version="1.0" encoding="UTF-8"?>
          <xml>
              <Name value="SomeInternalName" />
              <DisplayName value="Official Mod Name" />
              <Version value="2.3.4" />
              <Description value="Mod to show format of ModInfo v2" />
              <Author value="Name" />
              <Website value="HP" />
          </xml>
      """


def strip_ws(text: str) -> str:
    return "".join(text.split())


@pytest.fixture
def legacy_xml() -> str:
    return LEGACY_XML


@pytest.fixture
def current_xml() -> str:
    return CURRENT_XML


@pytest.fixture(params=[LEGACY_XML, LEGACY_XML_NO_COMPAT, CURRENT_XML, CURRENT_XML_NO_COMPAT],
                ids=["legacy", "legacy-no-compat", "current", "current-no-compat"])
def any_fixture_xml(request) -> str:
    return request.param


@pytest.fixture
def write_xml(tmp_path):
    """Write XML text to a ModInfo.xml under tmp_path and return the path."""
    def _write(text: str, name: str = "ModInfo.xml"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
