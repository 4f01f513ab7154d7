import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)

AVATAR_PREFIX = "Avatar user square/"

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_IDENTIFIER = re.compile(r"[^a-zA-Z0-9_]")


@dataclass(frozen=True)
class NamedColor:
    # Full name (e.g. "GreyScale/Black")
    name: str
    # Full name escaped for a C++ string literal
    string_name: str
    # Full name as a C++ identifier (e.g. "GreyScaleBlack")
    enum_name: str
    # {'r': .., 'g': .., 'b': ..} in the 0-1 range
    color: dict
    alpha: Optional[float] = None


def escape_enum_name(name):
    """
    Strip accents, then drop everything that can't appear in an identifier.
    escape_enum_name("Café/Red-1") -> "CafeRed1"
    """
    name = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", name))
    return _NON_IDENTIFIER.sub("", name)


def escape_string_name(name):
    return name.replace('"', '\\"')


def exclude_prefixes(prefixes: Iterable[str]) -> Callable[[str], bool]:
    """
    Build a style name predicate that is true for names starting with any of the prefixes.
    """
    prefixes = tuple(p for p in prefixes if p)

    def _excluded(name):
        return bool(prefixes) and name.startswith(prefixes)

    return _excluded


is_avatar_color = exclude_prefixes([AVATAR_PREFIX])


def collect_colors(styles, exclude: Callable[[str], bool] = is_avatar_color) -> List[NamedColor]:
    """
    Flatten paint styles into NamedColor records.
    styles: list of {'name': str, 'paints': [paint, ...]}
    The result keeps style order, then paint order, since the generated
    enum ordinals index the generated color array.
    """
    colors = []
    for style in styles:
        name = style["name"]
        if exclude(name):
            continue

        for paint in style.get("paints", []):
            # Get only solid colors
            if paint.get("type") != "SOLID":
                continue

            colors.append(NamedColor(
                name=name,
                string_name=escape_string_name(name),
                enum_name=escape_enum_name(name),
                color=paint["color"],
                alpha=paint.get("opacity"),
            ))

    logger.debug("Collected %d colors from %d styles", len(colors), len(styles))
    return colors


def paint_style_ids(file_data):
    """
    Node IDs of the local paint styles of a file, in file order.
    """
    return [
        node_id
        for node_id, meta in file_data.get("styles", {}).items()
        if meta.get("styleType") == "FILL" and not meta.get("remote", False)
    ]


def local_paint_styles(file_data, nodes_data):
    """
    Build the ordered paint style list from the file and nodes API responses.
    Returns: list of dicts {'name': style_name, 'paints': fills}
    """
    nodes = (nodes_data or {}).get("nodes") or {}
    styles = []
    for node_id in paint_style_ids(file_data):
        entry = nodes.get(node_id) or {}
        document = entry.get("document") or {}
        styles.append({
            "name": file_data["styles"][node_id]["name"],
            "paints": document.get("fills", []),
        })
    return styles
