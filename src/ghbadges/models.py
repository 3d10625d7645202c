"""Catalog models for ghbadges."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ghbadges.template_engine import find_unknown_placeholders, render_content


class BadgeStyle(StrEnum):
    """Visual style applied to every badge image.

    See https://shields.io/badges for a rendering of each style.
    """

    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"
    FOR_THE_BADGE = "for-the-badge"
    SOCIAL = "social"


class ServiceDefinition(BaseModel):
    """A badge provider and its URL templates."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Service name shown in option lists")
    title: str = Field(..., min_length=1, description="Badge title used as alt/link text")
    link_url_template: str = Field(..., description="Template of the URL the badge links to")
    image_url_template: str = Field(..., description="Template of the badge image URL")
    enabled_by_default: bool = Field(False, description="Whether the service starts selected")

    @field_validator("link_url_template", "image_url_template")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        unknown = find_unknown_placeholders(value)
        if unknown:
            raise ValueError(f"unrecognized placeholder(s) {unknown} in {value!r}")
        return value


class ServiceCatalogFile(BaseModel):
    """Schema of a service catalog YAML file."""

    services: list[ServiceDefinition] = Field(..., description="Services in display order")

    @model_validator(mode="after")
    def _check_services(self) -> "ServiceCatalogFile":
        if not self.services:
            raise ValueError("a service catalog must define at least one service")
        seen: set[str] = set()
        for service in self.services:
            key = service.name.lower()
            if key in seen:
                raise ValueError(f"duplicate service name '{service.name}'")
            seen.add(key)
        return self


class FormatDefinition(BaseModel):
    """An output snippet syntax."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1, description="Stable format identifier")
    label: str = Field("", description="Human readable format name")
    template: str = Field(
        ..., description="Jinja2 template over title, link_url and image_url"
    )
    is_default: bool = Field(False, description="Whether this is the initially selected format")

    def render(self, title: str, link_url: str, image_url: str) -> str:
        """Render one badge in this format."""
        return render_content(self.template, title=title, link_url=link_url, image_url=image_url)
