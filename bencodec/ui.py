from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from bencodec.value import ByteString, Dict, Integer, List, Value, INVALID_TEXT


def _string_text(data: bytes) -> Text:
    # byte strings go in as Text so their content is never parsed as markup
    try:
        return Text(data.decode("utf-8"), style="green")
    except UnicodeDecodeError:
        return Text(f"{INVALID_TEXT} ({len(data)} bytes)", style="red")


def _header(value: Value, prefix: str | None) -> Text:
    label = Text.assemble((prefix, "bold blue"), ": ") if prefix is not None else Text()
    match value:
        case Integer(n):
            label.append(str(n), style="cyan")
        case ByteString(data):
            label.append_text(_string_text(data))
        case List(items):
            label.append(f"list ({len(items)})", style="bold")
        case Dict(entries):
            label.append(f"dict ({len(entries)})", style="bold")
    return label


def _add_children(node: Tree, value: Value) -> None:
    match value:
        case List(items):
            for index, item in enumerate(items):
                _add_children(node.add(_header(item, str(index))), item)
        case Dict():
            for key, item in value.sorted_items():
                _add_children(node.add(_header(item, _string_text(key).plain)), item)


def render_tree(value: Value, label: str | None = None) -> Tree:
    """rich tree of a value, dict keys in canonical order"""
    tree = Tree(_header(value, label))
    _add_children(tree, value)
    return tree


def print_value(value: Value, console: Console | None = None) -> None:
    (console or Console()).print(render_tree(value))
