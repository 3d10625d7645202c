"""MCP resource handlers: read-only data exposed to AI assistants."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_resources(mcp: FastMCP) -> None:
    """Register all resource handlers on the given MCP server."""

    @mcp.resource(
        "catalog://services",
        name="Badge Services",
        description="Built-in badge services with their URL templates.",
        mime_type="application/json",
    )
    def service_list() -> str:
        from ghbadges.catalog import get_builtin_services

        return json.dumps([service.model_dump() for service in get_builtin_services()])

    @mcp.resource(
        "catalog://styles",
        name="Badge Styles",
        description="Supported badge styles in display order.",
        mime_type="application/json",
    )
    def style_list() -> str:
        from ghbadges.catalog import STYLES

        return json.dumps([style.value for style in STYLES])

    @mcp.resource(
        "catalog://formats",
        name="Snippet Formats",
        description="Snippet formats with their Jinja2 templates.",
        mime_type="application/json",
    )
    def format_list() -> str:
        from ghbadges.catalog import FORMATS

        return json.dumps([fmt.model_dump() for fmt in FORMATS])

    @mcp.resource(
        "config://user",
        name="User Configuration",
        description="Current user-level default configuration values.",
        mime_type="application/json",
    )
    def user_config() -> str:
        from ghbadges.user_config import get_config_path, load_user_config

        config = load_user_config()
        return json.dumps(
            {
                "config_path": str(get_config_path()),
                "values": config,
            }
        )
