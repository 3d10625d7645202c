"""MCP tool handlers: actions an AI assistant can invoke."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from pydantic import Field

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_tools(mcp: FastMCP) -> None:
    """Register all tool handlers on the given MCP server."""

    # ------------------------------------------------------------------
    # list_services
    # ------------------------------------------------------------------
    @mcp.tool(
        name="list_services",
        description="List the badge services of the built-in or a custom catalog.",
        tags={"catalog"},
    )
    def list_services(
        catalog_path: Annotated[
            str | None, Field(description="Custom service catalog YAML file")
        ] = None,
    ) -> str:
        from ghbadges.catalog import get_builtin_services, load_service_catalog

        services = (
            load_service_catalog(Path(catalog_path)) if catalog_path else get_builtin_services()
        )
        return json.dumps([service.model_dump() for service in services])

    # ------------------------------------------------------------------
    # list_styles
    # ------------------------------------------------------------------
    @mcp.tool(
        name="list_styles",
        description="List the badge styles; the first one is the default.",
        tags={"catalog"},
    )
    def list_styles() -> str:
        from ghbadges.catalog import STYLES, style_label

        return json.dumps([{"style": s.value, "label": style_label(s)} for s in STYLES])

    # ------------------------------------------------------------------
    # list_formats
    # ------------------------------------------------------------------
    @mcp.tool(
        name="list_formats",
        description="List the snippet formats (Markdown, reStructuredText, HTML, ...).",
        tags={"catalog"},
    )
    def list_formats() -> str:
        from ghbadges.catalog import FORMATS

        return json.dumps(
            [
                {"identifier": f.identifier, "label": f.label, "is_default": f.is_default}
                for f in FORMATS
            ]
        )

    # ------------------------------------------------------------------
    # compose_badges
    # ------------------------------------------------------------------
    @mcp.tool(
        name="compose_badges",
        description=(
            "Compose badges for a repository. Returns the resolved badge URLs and the "
            "snippet text in the requested format."
        ),
        tags={"badges"},
    )
    def compose_badges(
        repository: Annotated[
            str, Field(description="Repository identifier, e.g. 'facebook/react' or 'lodash'")
        ],
        services: Annotated[
            list[str] | None,
            Field(description="Service names to include; catalog defaults when omitted"),
        ] = None,
        style: Annotated[
            str | None,
            Field(description="Badge style: 'flat', 'flat-square', 'plastic', ..."),
        ] = None,
        snippet_format: Annotated[
            str | None,
            Field(description="Snippet format identifier, e.g. 'markdown' or 'rst'"),
        ] = None,
        catalog_path: Annotated[
            str | None, Field(description="Custom service catalog YAML file")
        ] = None,
    ) -> str:
        from ghbadges.badge_generator import compose_enabled, render_snippet
        from ghbadges.catalog import find_format_index, find_service_index, load_service_catalog
        from ghbadges.selection import SelectionState

        selection = SelectionState(
            load_service_catalog(Path(catalog_path)) if catalog_path else None
        )
        selection.set_repository(repository)
        if services is not None:
            wanted = {find_service_index(name, selection.services) for name in services}
            for index in range(len(selection.services)):
                selection.set_service_enabled(index, index in wanted)
        if style is not None:
            selection.set_style(style)
        if snippet_format is not None:
            selection.set_format(find_format_index(snippet_format, selection.formats))

        badges = compose_enabled(selection)
        return json.dumps(
            {
                "repository": selection.repository,
                "style": selection.active_style.value,
                "format": selection.active_format.identifier,
                "badges": [
                    {"title": b.title, "link_url": b.link_url, "image_url": b.image_url}
                    for b in badges
                ],
                "snippet": render_snippet(badges, selection.active_format),
            }
        )
