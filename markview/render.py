from typing import Mapping

from markview.vdom import AttributeValue, Custom, Native, Text, ViewNode

INDENT = "  "


def indent(markup: str) -> str:
    return "\n".join(f"{INDENT}{line}" for line in markup.split("\n"))


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    if not attributes:
        return ""
    return " " + " ".join(
        f"{k}={v.to_display_string()}" for k, v in attributes.items()
    )


def render(node: ViewNode) -> str:
    """Serialize ``node`` into indented markup.

    Text is emitted verbatim and quoted attribute values are not escaped, so
    ``<``, ``>`` and ``"`` in the input end up unchanged in the output.
    """
    match node.kind:
        case Text(value):
            return value
        case Custom(rendered=rendered):
            return render(rendered)
        case Native(tag):
            attributes = render_attributes(node.attributes)
            children = "\n".join(indent(render(c)) for c in node.children)
            return f"<{tag}{attributes}>\n{children}\n</{tag}>"
        case _:
            raise AssertionError(f"unexpected: {node.kind}")
