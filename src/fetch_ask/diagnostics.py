"""
Rich pretty-printing of composed requests and responses.

Only used when `AskConfig.debug` is enabled.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .types import ComposedOptions

SENSITIVE_HEADERS = ("authorization", "x-api-key")

console = Console(stderr=True)


def mask_auth_header(value: Optional[str], show_chars: int = 15) -> str:
    """Mask an auth header value, keeping its first characters."""
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Copy headers with credentials masked for safe printing."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_auth_header(masked[key])
    return masked


def format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    return str(body)


def print_request(options: ComposedOptions, out: Optional[Console] = None) -> None:
    out = out or console
    out.print(Panel(
        f"[bold cyan]{options.method}[/bold cyan] {options.url}",
        title="[bold blue]Request[/bold blue]",
    ))
    out.print("[bold]Headers:[/bold]", mask_headers(options.headers))
    if options.body is not None:
        out.print(Panel(
            Syntax(format_body(options.body), "json", theme="monokai"),
            title="[bold]Request Body[/bold]",
        ))


def print_response(url: str, response: Any, out: Optional[Console] = None) -> None:
    out = out or console
    status = getattr(response, "status", None)
    status_text = getattr(response, "status_text", "") or ""
    color = "green" if getattr(response, "ok", False) else "red"
    out.print(Panel(
        f"[bold {color}]{status}[/bold {color}] {status_text}",
        title=f"[bold blue]Response[/bold blue] ({url})",
    ))
