#!/usr/bin/env python3
"""
Purpose:
    Reads ModInfo.xml text into a `Modinfo` model. The text is turned into a
    flat sequence of typed events (document start, one event per childless
    element with its attributes, document end) and the model is filled in a
    single forward pass over those events.

Layout detection uses the root element only: ``<xml>`` is the current layout,
any other root is legacy.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, Optional

from modinfo.core.constants import COMPAT_ATTRIBUTE, VALUE_ATTRIBUTE
from modinfo.core.errors import XmlError
from modinfo.core.fields import TAG_TO_FIELD, FieldKey, ModinfoFormat
from modinfo.core.utils import to_title_case
from modinfo.core.version import parse_version

if TYPE_CHECKING:
    from modinfo.core.modinfo import Modinfo

log = logging.getLogger(__name__)


# --- Events --- #

class EventKind(Enum):
    DOCUMENT_START = "document-start"
    ELEMENT = "element"
    DOCUMENT_END = "document-end"


@dataclass(frozen=True)
class ParseEvent:
    """
    One step of a document scan.
    - kind: event type
    - tag: root tag for DOCUMENT_START, element tag for ELEMENT
    - attributes: lowercased attribute name -> value (ELEMENT only)
    """
    kind: EventKind
    tag: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)


def iter_events(xml_text: str) -> Iterator[ParseEvent]:
    """
    Scan `xml_text` and yield events in document order.

    Raises:
        XmlError: if the text is not well-formed XML.
    """
    # tolerate a BOM or indentation ahead of the XML declaration
    text = xml_text.lstrip("\ufeff \t\r\n")
    parser = ET.XMLPullParser(events=("start", "end"))
    depth = 0
    try:
        parser.feed(text)
        parser.close()
        for event, elem in parser.read_events():
            if event == "start":
                if depth == 0:
                    yield ParseEvent(EventKind.DOCUMENT_START, tag=elem.tag)
                depth += 1
                continue
            depth -= 1
            if depth > 0 and len(elem) == 0:
                yield ParseEvent(EventKind.ELEMENT, tag=elem.tag, attributes=_normalize_attributes(elem.attrib))
    except ET.ParseError as e:
        raise XmlError(str(e)) from e
    yield ParseEvent(EventKind.DOCUMENT_END)


def _normalize_attributes(attrib: Dict[str, str]) -> Dict[str, str]:
    return {k.lower(): v for k, v in attrib.items()}


# --- Reader --- #

def read_modinfo(xml_text: str, model: "Modinfo") -> "Modinfo":
    """
    Populate `model` from `xml_text` and return it.

    Unknown elements are ignored. Required fields are not enforced here; see
    `modinfo.core.modinfo.parse_validated`.

    Raises:
        XmlError: malformed XML, or a known element without a 'value' attribute.
    """
    display_name_seen = False
    model._has_version = False

    for event in iter_events(xml_text):
        if event.kind is EventKind.DOCUMENT_START:
            model.meta.format_version = ModinfoFormat.from_root_tag(event.tag)
            log.debug("Detected %s layout (root <%s>)", model.meta.format_version.value, event.tag)
            continue
        if event.kind is EventKind.DOCUMENT_END:
            break

        key = TAG_TO_FIELD.get(event.tag)
        if key is None:
            log.debug("Ignoring unknown element <%s>", event.tag)
            continue

        if VALUE_ATTRIBUTE not in event.attributes:
            raise XmlError(f"<{event.tag}> element is missing its '{VALUE_ATTRIBUTE}' attribute")
        value = event.attributes[VALUE_ATTRIBUTE]

        if key is FieldKey.NAME:
            if not display_name_seen:
                model.display_name = to_title_case(value)
            model.name = value
        elif key is FieldKey.DISPLAY_NAME:
            model.display_name = value
            display_name_seen = True
        elif key is FieldKey.VERSION:
            model.version.value = parse_version(value)
            model.version.compat = event.attributes.get(COMPAT_ATTRIBUTE)
            model._has_version = value.strip() != ""
        else:
            setattr(model, key.value, value)

    return model
