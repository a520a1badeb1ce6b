#!/usr/bin/env python3
"""
Purpose:
    Renders a `Modinfo` model as ModInfo.xml text in the layout recorded in
    its metadata (legacy or current), with two-space indentation.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from modinfo.core.constants import COMPAT_ATTRIBUTE, INDENT, VALUE_ATTRIBUTE, XML_DECLARATION
from modinfo.core.fields import FieldKey, ModinfoFormat, fields_for

if TYPE_CHECKING:
    from modinfo.core.modinfo import Modinfo


def build_element(model: "Modinfo") -> ET.Element:
    """Build the (unindented) element tree for `model`."""
    fmt = model.meta.format_version
    root = ET.Element(fmt.root_tag)

    for key in fields_for(fmt):
        if key is FieldKey.VERSION:
            elem = ET.SubElement(root, key.tag, {VALUE_ATTRIBUTE: str(model.version.value)})
            if model.version.compat is not None:
                elem.set(COMPAT_ATTRIBUTE, model.version.compat)
        else:
            ET.SubElement(root, key.tag, {VALUE_ATTRIBUTE: model.get_value_for(key) or ""})

    return root


def render_modinfo(model: "Modinfo") -> str:
    """
    Render `model` as XML text.

    The current layout is preceded by an XML declaration; legacy has none and
    never contains DisplayName or Website, whatever the model holds.
    """
    root = build_element(model)
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")

    if model.meta.format_version is ModinfoFormat.CURRENT:
        return f"{XML_DECLARATION}\n{body}\n"
    return f"{body}\n"
