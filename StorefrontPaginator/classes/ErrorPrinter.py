import sys
from typing import Any, TextIO

from colorama import Fore, Style

INDENT = "  "


def _paint(text: str, colored: bool) -> str:
    if not colored:
        return text
    return f"{Fore.RED}{text}{Style.RESET_ALL}"


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list)) or len(value) == 0


def _render_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return "{}" if isinstance(value, dict) else "(empty array)"
    return str(value)


def _render_lines(value: Any, depth: int, colored: bool) -> list[str]:
    prefix = INDENT * depth
    lines = []
    if isinstance(value, dict) and len(value) > 0:
        for key, item in value.items():
            label = _paint(f"{key}:", colored)
            if _is_scalar(item):
                lines.append(f"{prefix}{label} {_render_scalar(item)}")
            else:
                lines.append(f"{prefix}{label}")
                lines.extend(_render_lines(item, depth + 1, colored))
    elif isinstance(value, list) and len(value) > 0:
        dash = _paint("-", colored)
        for item in value:
            if _is_scalar(item):
                lines.append(f"{prefix}{dash} {_render_scalar(item)}")
            else:
                lines.append(f"{prefix}{dash}")
                lines.extend(_render_lines(item, depth + 1, colored))
    else:
        lines.append(f"{prefix}{_render_scalar(value)}")
    return lines


def render(value: Any, colored: bool = True) -> str:
    """
    Renders JSON-like data as indented `key: value` lines, list items prefixed by a dash.
    :param value: The data to render.
    :param colored: Whether to colour keys and dashes red.
    :return: The rendered text.
    """
    return "\n".join(_render_lines(value, 0, colored))


def print_graphql_error(error: BaseException, stream: TextIO | None = None, colored: bool = True) -> None:
    """
    Prints the GraphQL errors and the request of an error raised by a client, if it carries them.
    Nothing in the library calls this, it is for callers presenting a failed walk.
    :param error: The error to print.
    :param stream: Where to print, stderr by default.
    :param colored: Whether to colour keys and dashes red.
    """
    stream = stream if stream is not None else sys.stderr
    response = getattr(error, "response", None)
    if isinstance(response, dict) and response.get("errors"):
        print(render(response["errors"], colored), file=stream)
    request = getattr(error, "request", None)
    if request:
        print(render(request, colored), file=stream)
