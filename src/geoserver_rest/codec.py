"""
XML codec for GeoServer resource models.

Models describe their wire layout through field aliases:

- ``name``                child element text (or a nested model)
- ``defaultStyle>name``   nested path; wrappers are created on encode
- ``@class``              attribute of the model's own element
- ``#text``               text of the model's own element
- ``#inner``              raw inner XML of the model's own element

A list-typed field repeats the last path segment, so ``metadata>entry``
declared as ``List[MetadataEntry]`` reads and writes
``<metadata><entry/><entry/></metadata>``.

Fields left at ``None`` and empty lists are not written. Elements the model
does not declare (``atom:link`` and friends) are ignored on decode.
"""

from __future__ import annotations

import types
import typing
import xml.etree.ElementTree as ET
from typing import Any, ClassVar, List, Optional, Tuple, Type, TypeVar
from xml.sax.saxutils import escape

from defusedxml import ElementTree as SafeET
from defusedxml.common import DefusedXmlException
from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import XMLDecodeError

M = TypeVar("M", bound="XmlModel")

_SKIP = object()


class XmlModel(BaseModel):
    """Base class for every GeoServer wire schema."""

    model_config = ConfigDict(populate_by_name=True)

    xml_tag: ClassVar[str] = ""

    def to_xml(self, tag: Optional[str] = None) -> str:
        return encode(self, tag)

    @classmethod
    def from_xml(cls: Type[M], body: str) -> M:
        return decode(cls, body)


class ResourceRef(XmlModel):
    """Minimal entry of a collection listing: a name and the link to the full record."""

    name: str = ""
    href: Optional[str] = None


# ---------------------------------------------------------------------------
# Type helpers
# ---------------------------------------------------------------------------

def _unwrap(annotation: Any) -> Tuple[bool, Any]:
    """Return ``(is_list, scalar_or_model_type)`` for a field annotation."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is getattr(types, "UnionType", None):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        annotation = args[0]
        origin = typing.get_origin(annotation)
    if origin in (list, List):
        return True, typing.get_args(annotation)[0]
    return False, annotation


def _is_model(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, XmlModel)


def _convert(raw: Optional[str], target: Any) -> Any:
    text = (raw or "").strip()
    if target is str:
        return text
    if not text:
        return _SKIP
    if target is bool:
        return text.lower() == "true"
    try:
        if target is int:
            return int(text)
        if target is float:
            return float(text)
    except ValueError as exc:
        raise XMLDecodeError(f"cannot read {text!r} as {target.__name__}") from exc
    return text


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _inner_xml(elem: ET.Element) -> str:
    parts = [escape(elem.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in elem)
    return "".join(parts)


def _decode_node(node: ET.Element, target: Any) -> Any:
    if _is_model(target):
        return decode_element(target, node)
    return _convert(node.text, target)


def decode_element(cls: Type[M], elem: ET.Element) -> M:
    values = {}
    for name, field in cls.model_fields.items():
        path = field.alias or name
        is_list, target = _unwrap(field.annotation)

        if path.startswith("@"):
            raw = elem.get(path[1:])
            value = _SKIP if raw is None else _convert(raw, target)
        elif path == "#text":
            value = _convert(elem.text, target)
        elif path == "#inner":
            value = _inner_xml(elem)
        else:
            *parents, leaf = path.split(">")
            node: Optional[ET.Element] = elem
            for parent in parents:
                node = node.find(parent)
                if node is None:
                    break
            if node is None:
                continue
            if is_list:
                value = [_decode_node(child, target) for child in node.findall(leaf)]
                value = [item for item in value if item is not _SKIP]
            else:
                child = node.find(leaf)
                value = _SKIP if child is None else _decode_node(child, target)

        if value is not _SKIP:
            values[name] = value

    try:
        return cls.model_validate(values)
    except ValidationError as exc:
        raise XMLDecodeError(f"invalid <{elem.tag}> document: {exc}") from exc


def parse(body: str) -> ET.Element:
    try:
        return SafeET.fromstring(body.strip())
    except (ET.ParseError, DefusedXmlException) as exc:
        raise XMLDecodeError(f"malformed XML: {exc}", body=body) from exc


def decode(cls: Type[M], body: str, tag: Optional[str] = None) -> M:
    root = parse(body)
    expected = tag or cls.xml_tag
    if expected and root.tag != expected:
        raise XMLDecodeError(f"expected <{expected}> but got <{root.tag}>", body=body)
    return decode_element(cls, root)


def decode_references(body: str, collection_tag: str, item_tag: str) -> List[ResourceRef]:
    if not body.strip():
        return []
    root = parse(body)
    if root.tag != collection_tag:
        raise XMLDecodeError(f"expected <{collection_tag}> but got <{root.tag}>", body=body)

    refs = []
    for item in root.findall(item_tag):
        href = None
        for child in item:
            if child.tag == "link" or child.tag.endswith("}link"):
                href = child.get("href")
                break
        refs.append(ResourceRef(name=(item.findtext("name") or "").strip(), href=href))
    return refs


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _set_inner(elem: ET.Element, value: str) -> None:
    try:
        wrapper = SafeET.fromstring(f"<inner>{value}</inner>")
    except (ET.ParseError, DefusedXmlException) as exc:
        raise ValueError(f"inner XML of <{elem.tag}> is not well-formed: {exc}") from exc
    elem.text = wrapper.text
    for child in wrapper:
        elem.append(child)


def encode_element(model: XmlModel, tag: str) -> ET.Element:
    elem = ET.Element(tag)
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None or (isinstance(value, list) and not value):
            continue
        path = field.alias or name

        if path.startswith("@"):
            elem.set(path[1:], _format(value))
            continue
        if path == "#text":
            elem.text = _format(value)
            continue
        if path == "#inner":
            _set_inner(elem, value)
            continue

        *parents, leaf = path.split(">")
        node = elem
        for parent in parents:
            existing = node.find(parent)
            node = existing if existing is not None else ET.SubElement(node, parent)

        for item in value if isinstance(value, list) else [value]:
            if isinstance(item, XmlModel):
                node.append(encode_element(item, leaf))
            else:
                ET.SubElement(node, leaf).text = _format(item)
    return elem


def encode(model: XmlModel, tag: Optional[str] = None) -> str:
    root_tag = tag or model.xml_tag
    if not root_tag:
        raise ValueError(f"{type(model).__name__} has no root element name")
    return ET.tostring(encode_element(model, root_tag), encoding="unicode")
