"""URL template resolution and snippet template rendering."""

import logging
import re
from functools import lru_cache
from urllib.parse import urlencode

from jinja2 import Environment, StrictUndefined, Template

logger = logging.getLogger(__name__)

REPOSITORY_PLACEHOLDER = "{repository}"
BRANCH_PLACEHOLDER = "{branch}"
PLACEHOLDERS = (REPOSITORY_PLACEHOLDER, BRANCH_PLACEHOLDER)

DEFAULT_BRANCH = "master"

_PLACEHOLDER_PATTERN = re.compile("|".join(re.escape(p) for p in PLACEHOLDERS))
_BRACED_TOKEN_PATTERN = re.compile(r"\{[^{}]*\}")


def find_unknown_placeholders(template: str) -> list[str]:
    """Return every ``{...}`` token in a URL template that is not a known placeholder."""
    return [
        token for token in _BRACED_TOKEN_PATTERN.findall(template) if token not in PLACEHOLDERS
    ]


def resolve_template(template: str, repository: str, branch: str = DEFAULT_BRANCH) -> str:
    """Substitute the repository and branch placeholders in a URL template.

    Substitution is a single pass over the template: values inserted for one
    placeholder are never scanned again, so a repository identifier that
    itself contains ``{branch}`` is kept verbatim.

    Args:
        template: URL template, e.g. ``https://github.com/{repository}``.
        repository: Repository identifier (a slug, a package name, ...). May be empty.
        branch: Branch name substituted for ``{branch}``.

    Returns:
        The concrete URL.
    """
    values = {REPOSITORY_PLACEHOLDER: repository, BRANCH_PLACEHOLDER: branch}
    return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)


def apply_style(image_url: str, style: str) -> str:
    """Append ``style=<style>`` to the query string of a badge image URL.

    The rest of the URL is kept byte for byte; existing query parameters and
    any fragment are preserved.
    """
    head, sep, fragment = image_url.partition("#")
    if "?" not in head:
        joiner = "?"
    elif head.endswith(("?", "&")):
        joiner = ""
    else:
        joiner = "&"
    style_query = urlencode({"style": str(style)})
    return f"{head}{joiner}{style_query}{sep}{fragment}"


def create_jinja_environment() -> Environment:
    """Create the Jinja2 environment used for snippet format templates.

    Autoescaping is off: most snippet formats are plain-text markup, and the
    HTML format escapes its values explicitly.
    """
    return Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=False,
    )


@lru_cache(maxsize=64)
def _compile(source: str) -> Template:
    logger.debug(f"Compiling snippet template: {source!r}")
    return create_jinja_environment().from_string(source)


def render_content(source: str, *, title: str, link_url: str, image_url: str) -> str:
    """Render a snippet format template for a single badge."""
    return _compile(source).render(title=title, link_url=link_url, image_url=image_url)
