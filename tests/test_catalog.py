"""Tests for the service, style and format catalogs."""

from pathlib import Path

import pytest

from ghbadges.catalog import (
    DEFAULT_STYLE,
    FORMATS,
    STYLES,
    default_format_index,
    find_format_index,
    find_service_index,
    get_builtin_catalog_path,
    get_builtin_services,
    load_service_catalog,
    style_label,
)
from ghbadges.errors import CatalogError, UnknownFormatError, UnknownServiceError
from ghbadges.models import BadgeStyle, FormatDefinition
from ghbadges.template_engine import find_unknown_placeholders


class TestBuiltinServices:
    """Tests for the built-in service catalog."""

    def test_catalog_file_exists(self) -> None:
        """Test that the catalog ships with the package."""
        assert get_builtin_catalog_path().is_file()

    def test_loads_services(self) -> None:
        """Test that the built-in catalog has services in declaration order."""
        services = get_builtin_services()
        assert len(services) > 0
        assert services[0].name == "Travis CI"
        assert services[0].title == "Build Status"

    def test_is_immutable_tuple(self) -> None:
        """Test that the catalog is a tuple shared between calls."""
        assert isinstance(get_builtin_services(), tuple)
        assert get_builtin_services() is get_builtin_services()

    def test_templates_use_known_placeholders(self) -> None:
        """Test that no template carries an unrecognized placeholder."""
        for service in get_builtin_services():
            assert find_unknown_placeholders(service.link_url_template) == []
            assert find_unknown_placeholders(service.image_url_template) == []

    def test_some_services_enabled_by_default(self) -> None:
        """Test that at least one service starts selected."""
        assert any(service.enabled_by_default for service in get_builtin_services())


class TestLoadServiceCatalog:
    """Tests for load_service_catalog()."""

    def test_custom_catalog(self, catalog_file: Path) -> None:
        """Test loading a custom catalog file."""
        services = load_service_catalog(catalog_file)
        assert [s.name for s in services] == ["build"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing catalog raises CatalogError."""
        with pytest.raises(CatalogError, match="not found"):
            load_service_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparsable YAML raises CatalogError."""
        path = tmp_path / "bad.yaml"
        path.write_text("services: [")
        with pytest.raises(CatalogError, match="not valid YAML"):
            load_service_catalog(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Test that entries missing required fields raise CatalogError."""
        path = tmp_path / "bad.yaml"
        path.write_text("services:\n  - name: build\n")
        with pytest.raises(CatalogError, match="Invalid service catalog"):
            load_service_catalog(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file is rejected."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(CatalogError):
            load_service_catalog(path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        """Test that undecodable bytes raise CatalogError."""
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"services:\n  - name: \xff\xfe\n")
        with pytest.raises(CatalogError, match="could not be read"):
            load_service_catalog(path)


class TestFindServiceIndex:
    """Tests for find_service_index()."""

    def test_case_insensitive(self) -> None:
        """Test that lookup ignores case."""
        assert find_service_index("travis ci", get_builtin_services()) == 0

    def test_unknown(self) -> None:
        """Test that unknown names raise UnknownServiceError."""
        with pytest.raises(UnknownServiceError, match="Unknown service 'nope'"):
            find_service_index("nope", get_builtin_services())


class TestStyles:
    """Tests for the style catalog."""

    def test_default_is_first(self) -> None:
        """Test that the default style is the first catalog entry."""
        assert DEFAULT_STYLE == STYLES[0] == BadgeStyle.FLAT

    @pytest.mark.parametrize(
        ("style", "label"),
        [
            ("flat", "Flat"),
            ("flat-square", "Flat square"),
            ("for-the-badge", "For the badge"),
        ],
    )
    def test_style_label(self, style: str, label: str) -> None:
        """Test human readable style labels."""
        assert style_label(style) == label


class TestFormats:
    """Tests for the format catalog."""

    def test_exactly_one_default(self) -> None:
        """Test that the built-in catalog has a single default format."""
        assert sum(fmt.is_default for fmt in FORMATS) == 1
        assert FORMATS[default_format_index()].identifier == "markdown"

    def test_no_default_rejected(self) -> None:
        """Test that a catalog without a default is an error."""
        formats = [FormatDefinition(identifier="a", template="{{ title }}")]
        with pytest.raises(CatalogError, match="Exactly one format"):
            default_format_index(formats)

    def test_two_defaults_rejected(self) -> None:
        """Test that a catalog with two defaults is an error."""
        formats = [
            FormatDefinition(identifier="a", template="{{ title }}", is_default=True),
            FormatDefinition(identifier="b", template="{{ title }}", is_default=True),
        ]
        with pytest.raises(CatalogError):
            default_format_index(formats)

    def test_find_format_index(self) -> None:
        """Test lookup by identifier."""
        assert FORMATS[find_format_index("RST")].identifier == "rst"

    def test_unknown_format(self) -> None:
        """Test that unknown identifiers raise UnknownFormatError."""
        with pytest.raises(UnknownFormatError):
            find_format_index("docx")

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("markdown", "[![T](https://i)](https://l)"),
            ("rst", ".. image:: https://i\n    :target: https://l\n    :alt: T"),
            ("asciidoc", 'image:https://i["T", link="https://l"]'),
            ("html", '<a href="https://l"><img src="https://i" alt="T"></a>'),
            ("textile", "!https://i(T)!:https://l"),
            ("rdoc", '{<img src="https://i" alt="T" />}[https://l]'),
        ],
    )
    def test_renderers(self, identifier: str, expected: str) -> None:
        """Test each built-in format's output."""
        fmt = FORMATS[find_format_index(identifier)]
        assert fmt.render("T", "https://l", "https://i") == expected

    def test_html_escapes_values(self) -> None:
        """Test that the HTML format escapes attribute values."""
        fmt = FORMATS[find_format_index("html")]
        result = fmt.render('A & "B"', "https://l/?a=1&b=2", "https://i")
        assert 'href="https://l/?a=1&amp;b=2"' in result
        assert "alt=\"A &amp; &#34;B&#34;\"" in result
