"""Service, style and format catalogs."""

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from ghbadges.errors import CatalogError, UnknownFormatError, UnknownServiceError
from ghbadges.models import BadgeStyle, FormatDefinition, ServiceCatalogFile, ServiceDefinition

logger = logging.getLogger(__name__)

STYLES: tuple[BadgeStyle, ...] = tuple(BadgeStyle)
DEFAULT_STYLE = STYLES[0]

FORMATS: tuple[FormatDefinition, ...] = (
    FormatDefinition(
        identifier="markdown",
        label="Markdown",
        template="[![{{ title }}]({{ image_url }})]({{ link_url }})",
        is_default=True,
    ),
    FormatDefinition(
        identifier="rst",
        label="reStructuredText",
        template=(
            ".. image:: {{ image_url }}\n"
            "    :target: {{ link_url }}\n"
            "    :alt: {{ title }}"
        ),
    ),
    FormatDefinition(
        identifier="asciidoc",
        label="AsciiDoc",
        template='image:{{ image_url }}["{{ title }}", link="{{ link_url }}"]',
    ),
    FormatDefinition(
        identifier="html",
        label="HTML",
        template=(
            '<a href="{{ link_url | e }}">'
            '<img src="{{ image_url | e }}" alt="{{ title | e }}"></a>'
        ),
    ),
    FormatDefinition(
        identifier="textile",
        label="Textile",
        template="!{{ image_url }}({{ title }})!:{{ link_url }}",
    ),
    FormatDefinition(
        identifier="rdoc",
        label="RDoc",
        template='{<img src="{{ image_url }}" alt="{{ title }}" />}[{{ link_url }}]',
    ),
)


def get_builtin_catalog_path() -> Path:
    """Get the path of the built-in service catalog."""
    return Path(__file__).parent / "data" / "services.yaml"


def load_service_catalog(path: Path | None = None) -> tuple[ServiceDefinition, ...]:
    """Load and validate a service catalog YAML file.

    Args:
        path: Custom catalog file. The built-in catalog is used when omitted.

    Returns:
        The services in declaration order.

    Raises:
        CatalogError: If the file is missing, is not valid YAML or does not
            match the catalog schema.
    """
    catalog_path = path or get_builtin_catalog_path()
    if not catalog_path.is_file():
        raise CatalogError(f"Service catalog '{catalog_path}' not found")

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Service catalog '{catalog_path}' could not be read: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Service catalog '{catalog_path}' is not valid YAML: {e}") from e

    try:
        catalog = ServiceCatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid service catalog '{catalog_path}':\n{e}") from e

    logger.debug(f"Loaded {len(catalog.services)} services from {catalog_path}")
    return tuple(catalog.services)


@lru_cache(maxsize=1)
def get_builtin_services() -> tuple[ServiceDefinition, ...]:
    """Return the built-in service catalog, loading it on first use."""
    return load_service_catalog()


def find_service_index(name: str, services: Sequence[ServiceDefinition]) -> int:
    """Return the catalog index of the service named ``name`` (case-insensitive)."""
    wanted = name.strip().lower()
    for index, service in enumerate(services):
        if service.name.lower() == wanted:
            return index
    valid = ", ".join(service.name for service in services)
    raise UnknownServiceError(f"Unknown service '{name}'. Valid: {valid}")


def default_format_index(formats: Sequence[FormatDefinition] = FORMATS) -> int:
    """Return the index of the single format marked as default."""
    defaults = [index for index, fmt in enumerate(formats) if fmt.is_default]
    if len(defaults) != 1:
        raise CatalogError(
            f"Exactly one format must be marked as default, found {len(defaults)}"
        )
    return defaults[0]


def find_format_index(identifier: str, formats: Sequence[FormatDefinition] = FORMATS) -> int:
    """Return the catalog index of the format with ``identifier`` (case-insensitive)."""
    wanted = identifier.strip().lower()
    for index, fmt in enumerate(formats):
        if fmt.identifier.lower() == wanted:
            return index
    valid = ", ".join(fmt.identifier for fmt in formats)
    raise UnknownFormatError(f"Unknown format '{identifier}'. Valid: {valid}")


def style_label(style: str) -> str:
    """Turn a style identifier into a label, e.g. ``flat-square`` -> ``Flat square``."""
    name = str(style).replace("-", " ")
    return name[:1].upper() + name[1:]
