"""MCP server for ghbadges: exposes badge composition via Model Context Protocol."""

from fastmcp import FastMCP


def create_server() -> FastMCP:
    """Create and configure the FastMCP server instance."""
    mcp = FastMCP(
        name="ghbadges",
        instructions=(
            "MCP server for ghbadges, which composes status badge snippets (image + link) "
            "for a repository. Use tools to list services, styles and formats, and to "
            "compose the snippet for a repository."
        ),
    )

    # Import and register tools and resources
    from ghbadges.mcp_server.resources import register_resources
    from ghbadges.mcp_server.tools import register_tools

    register_tools(mcp)
    register_resources(mcp)

    return mcp


def main() -> None:
    """Entry point for the ghbadges-mcp CLI command."""
    server = create_server()
    server.run()
