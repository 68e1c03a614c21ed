from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:
    __version__: str = "unknown"

from .app import MarkupApp
from .component import Component, Effect
from .render import render
from .vdom import (
    AttrBoolean,
    AttributeValue,
    AttrNumber,
    AttrString,
    ViewNode,
    attr,
    custom,
    el,
    native,
    text,
)

__all__ = [
    "MarkupApp",
    "Component",
    "Effect",
    "render",
    "AttrBoolean",
    "AttributeValue",
    "AttrNumber",
    "AttrString",
    "ViewNode",
    "attr",
    "custom",
    "el",
    "native",
    "text",
]
