"""
Native SVG → React component transformer.

Produces the same shape of component that SVGR emits with
``icon``/``typescript``/``jsxRuntime: automatic`` and the JSX plugin:

    import type { SVGProps } from "react";
    const ArrowUpIcon = (props: SVGProps<SVGSVGElement>) => (
      <svg xmlns="http://www.w3.org/2000/svg" width="1em" height="1em" viewBox="0 0 24 24" {...props}>
        <path d="M12 4l-8 8h16z" />
      </svg>
    );
    export default ArrowUpIcon;

No optimisation is attempted (no SVGO): the element tree is kept as
is, minus comments and editor namespaces (Inkscape, Sodipodi, ...).
Formatting is left to the formatter stage.
"""

from __future__ import annotations

import json
import logging
import re
import xml.etree.ElementTree as ET

from iconsmith.core.models.config import JSX_PLUGIN, TransformOptions
from iconsmith.core.services.transformers.base import ContentTransformer, TransformError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

SUPPORTED_PLUGINS = frozenset({JSX_PLUGIN})

_INDENT = "  "

# HTML attribute names React spells differently
_ATTRIBUTE_ALIASES = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
}

_NAMESPACE_PREFIXES = {
    XLINK_NS: "xlink",
    XML_NS: "xml",
}

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _split_qname(qname: str) -> tuple[str, str]:
    """Split ElementTree's ``{ns}local`` into (ns, local)."""
    if qname.startswith("{"):
        ns, _, local = qname[1:].partition("}")
        return ns, local
    return "", qname


def _camel_case(name: str) -> str:
    head, *rest = re.split(r"[-:]", name)
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def jsx_attribute_name(qname: str) -> str | None:
    """JSX prop name for an SVG attribute, or None to drop it."""
    ns, local = _split_qname(qname)

    if ns:
        prefix = _NAMESPACE_PREFIXES.get(ns)
        if prefix is None:
            return None
        return prefix + local[:1].upper() + local[1:]

    if local in _ATTRIBUTE_ALIASES:
        return _ATTRIBUTE_ALIASES[local]
    if local.startswith(("data-", "aria-")):
        return local
    return _camel_case(local)


def _style_property(name: str) -> str:
    name = name.strip()
    if name.startswith("--"):
        return json.dumps(name)
    if name.startswith("-"):
        # -webkit-mask → WebkitMask
        name = name[1:]
        prop = _camel_case(name)
        return prop[:1].upper() + prop[1:]
    return _camel_case(name.lower())


def style_object(style: str) -> str:
    """Render an inline CSS string as a JSX style object literal."""
    items = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, _, value = declaration.partition(":")
        if not prop.strip():
            continue
        key = _style_property(prop)
        if not key.startswith('"') and not _IDENTIFIER.match(key):
            key = json.dumps(key)
        items.append(f"{key}: {json.dumps(value.strip())}")
    if not items:
        return "{{}}"
    return "{{ " + ", ".join(items) + " }}"


def _attribute(name: str, value: str) -> str:
    if name == "style":
        return f"style={style_object(value)}"
    if '"' in value or "&" in value or "\n" in value:
        return f"{name}={{{json.dumps(value)}}}"
    return f'{name}="{value}"'


def _text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return "{" + json.dumps(value.strip()) + "}"


class SvgComponentTransformer(ContentTransformer):
    """Transform SVG markup into a React function component."""

    @property
    def name(self) -> str:
        return "svg-component"

    def transform(
        self,
        svg: str,
        options: TransformOptions,
        component_name: str,
    ) -> str:
        self._check_plugins(options)

        try:
            root = ET.fromstring(svg)
        except ET.ParseError as e:
            raise TransformError(f"Invalid SVG markup: {e}") from e

        ns, local = _split_qname(root.tag)
        if local != "svg" or ns not in ("", SVG_NS):
            raise TransformError(f"Expected an <svg> root element, got <{local}>")

        uses_xlink = any(
            _split_qname(key)[0] == XLINK_NS
            for el in root.iter()
            for key in el.attrib
        )

        root_attrs = [("xmlns", SVG_NS)]
        if uses_xlink:
            root_attrs.append(("xmlnsXlink", XLINK_NS))
        root_attrs.extend(self._attributes(root))

        if options.icon:
            root_attrs = [(k, v) for k, v in root_attrs if k not in ("width", "height")]
            root_attrs[1:1] = [("width", "1em"), ("height", "1em")]

        jsx = self._render(root, root_attrs, depth=1, spread_props=True)
        return self._module(component_name, jsx, options)

    # ── Internals ───────────────────────────────────────────────────

    @staticmethod
    def _check_plugins(options: TransformOptions) -> None:
        unsupported = [p for p in options.plugins if p not in SUPPORTED_PLUGINS]
        if unsupported:
            raise TransformError(f"Unsupported plugin(s): {', '.join(unsupported)}")
        if JSX_PLUGIN not in options.plugins:
            raise TransformError(f"The {JSX_PLUGIN} plugin is required to emit a component")

    @staticmethod
    def _attributes(el: ET.Element) -> list[tuple[str, str]]:
        attrs = []
        for key, value in el.attrib.items():
            name = jsx_attribute_name(key)
            if name is None:
                logger.debug("Dropping foreign attribute %s", key)
                continue
            attrs.append((name, value))
        return attrs

    def _render(
        self,
        el: ET.Element,
        attrs: list[tuple[str, str]],
        depth: int,
        spread_props: bool = False,
    ) -> list[str]:
        _, tag = _split_qname(el.tag)
        pad = _INDENT * depth

        parts = [_attribute(k, v) for k, v in attrs]
        if spread_props:
            parts.append("{...props}")
        opening = f"<{tag}" + "".join(f" {p}" for p in parts)

        body: list[str] = []
        text = _text(el.text)
        if text:
            body.append(_INDENT * (depth + 1) + text)
        for child in el:
            child_ns, _ = _split_qname(child.tag) if isinstance(child.tag, str) else ("?", "")
            if child_ns not in ("", SVG_NS):
                logger.debug("Dropping foreign element %s", child.tag)
            else:
                body.extend(self._render(child, self._attributes(child), depth + 1))
            tail = _text(child.tail)
            if tail:
                body.append(_INDENT * (depth + 1) + tail)

        if not body:
            return [f"{pad}{opening} />"]
        return [f"{pad}{opening}>", *body, f"{pad}</{tag}>"]

    @staticmethod
    def _module(component_name: str, jsx: list[str], options: TransformOptions) -> str:
        lines: list[str] = []
        if options.jsx_runtime == "classic":
            lines.append('import * as React from "react";')
        if options.typescript:
            lines.append('import type { SVGProps } from "react";')
            signature = "(props: SVGProps<SVGSVGElement>)"
        else:
            signature = "(props)"

        lines.append(f"const {component_name} = {signature} => (")
        lines.extend(jsx)
        lines.append(");")
        lines.append(f"export default {component_name};")
        return "\n".join(lines) + "\n"
