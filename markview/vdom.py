from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Mapping, TypeAlias

if TYPE_CHECKING:
    from markview.component import Component

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1


@dataclass(slots=True, frozen=True)
class AttrString:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"string attribute must be a str: {self.value!r}")

    def as_text(self) -> str:
        return self.value

    def to_display_string(self) -> str:
        # embedded quotes are not escaped
        return f'"{self.value}"'

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(slots=True, frozen=True)
class AttrNumber:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"number attribute must be an int: {self.value!r}")
        if not I32_MIN <= self.value <= I32_MAX:
            raise ValueError(f"number attribute out of 32-bit range: {self.value}")

    @classmethod
    def from_unsigned(cls, value: int) -> "AttrNumber":
        """Reinterpret a 32-bit unsigned value as signed.

        Values above ``I32_MAX`` wrap around, e.g. ``2**32 - 1`` becomes ``-1``.
        """
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"unsigned attribute out of 32-bit range: {value}")
        return cls(value - (U32_MAX + 1) if value > I32_MAX else value)

    def as_text(self) -> str:
        return str(self.value)

    def to_display_string(self) -> str:
        return self.as_text()

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(slots=True, frozen=True)
class AttrBoolean:
    value: bool

    def as_text(self) -> str:
        return "true" if self.value else "false"

    def to_display_string(self) -> str:
        return self.as_text()

    def __str__(self) -> str:
        return self.to_display_string()


AttributeValue = AttrString | AttrNumber | AttrBoolean
AttrLike: TypeAlias = AttributeValue | str | int | bool
Attributes: TypeAlias = dict[str, AttributeValue]


def attr(value: AttrLike) -> AttributeValue:
    match value:
        case AttrString() | AttrNumber() | AttrBoolean():
            return value
        case bool():
            return AttrBoolean(value)
        case int():
            return AttrNumber(value)
        case str():
            return AttrString(value)
        case _:
            raise TypeError(f"unsupported attribute value: {value!r}")


@dataclass(slots=True, frozen=True)
class Native:
    tag: str


@dataclass(slots=True, frozen=True)
class Text:
    value: str


@dataclass(slots=True, frozen=True)
class Custom:
    component: "Component[Any]" = field(repr=False)
    rendered: "ViewNode"


NodeKind = Native | Text | Custom


@dataclass(slots=True, frozen=True)
class ViewNode:
    """A node of the view tree.

    ``kind`` decides which fields matter: ``Text`` ignores ``children`` and
    ``attributes``, ``Custom`` ignores ``children`` and renders its cached
    subtree instead. ``attached_message`` is reserved for click binding and
    stays ``None`` in every tree built here.
    """

    kind: NodeKind
    children: list["ViewNode"] = field(default_factory=list)
    attached_message: Any | None = None
    attributes: Attributes = field(default_factory=dict)

    def with_child(self, child: "ViewNode") -> "ViewNode":
        return replace(self, children=[*self.children, child])

    def with_attribute(self, key: str, value: AttrLike) -> "ViewNode":
        return replace(self, attributes={**self.attributes, key: attr(value)})

    def render(self) -> str:
        from markview.render import render

        return render(self)


def native(tag: str) -> ViewNode:
    return ViewNode(kind=Native(tag=tag))


def text(value: str) -> ViewNode:
    return ViewNode(kind=Text(value=value))


def custom(component: "Component[Any]") -> ViewNode:
    """Wrap ``component`` in a boundary node, calling its ``view`` right away."""
    return ViewNode(kind=Custom(component=component, rendered=component.view()))


def el(
    tag: str,
    attributes: Mapping[str, AttrLike] | None = None,
    children: list[ViewNode | str] | None = None,
) -> ViewNode:
    if attributes is None:
        attributes = {}
    if children is None:
        children = []
    return ViewNode(
        kind=Native(tag=tag),
        children=[text(c) if isinstance(c, str) else c for c in children],
        attributes={k: attr(v) for k, v in attributes.items()},
    )
