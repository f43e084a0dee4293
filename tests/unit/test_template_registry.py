"""Unit tests for TemplateRegistry and LayoutConfigRegistry classes."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from cvtex.contexts.templating.exceptions import LayoutConfigError, TemplateRenderError
from cvtex.contexts.templating.registries import LayoutConfigRegistry, TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.types_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_get_template_experience():
    """Test loading the moderncv experience template."""
    registry = TemplateRegistry()
    template = registry.get_template("moderncv", "experience")

    assert template is not None
    assert "moderncv/experience" in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("moderncv", "skills")
    assert registry.is_cached("moderncv", "skills")

    template2 = registry.get_template("moderncv", "skills")
    assert template1 is template2


@pytest.mark.unit
def test_markup_families_cached_separately():
    """The same type name in two markup families gives two templates."""
    registry = TemplateRegistry()

    moderncv = registry.get_template("moderncv", "skills")
    europass = registry.get_template("europasscv", "skills")

    assert moderncv is not europass
    assert len(registry._cache) == 2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("moderncv", "nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("europasscv", "experience")

    assert isinstance(path, Path)
    assert path.name == "template.tex.jinja"
    assert path.parent.name == "experience"
    assert path.parent.parent.name == "europasscv"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("moderncv", "skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_delimiters():
    """Test that custom delimiters work (no conflict with LaTeX braces)."""
    registry = TemplateRegistry()

    # LaTeX braces in the value must pass through untouched
    result = registry.render("moderncv", "skills", skills=r"\textbf{Bold Text}")

    assert result == r"\cvitem{}{\textbf{Bold Text}}"


@pytest.mark.unit
def test_render_missing_variable():
    """StrictUndefined turns a missing context variable into TemplateRenderError."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render("moderncv", "language", name="English")

    assert exc_info.value.type_name == "moderncv/language"
    assert exc_info.value.template_path == registry.get_template_path("moderncv", "language")


@pytest.mark.unit
def test_custom_types_path(tmp_path):
    """Templates can be loaded from another directory."""
    template_dir = tmp_path / "moderncv" / "skills"
    template_dir.mkdir(parents=True)
    (template_dir / "template.tex.jinja").write_text(r"\skills{<<< skills >>>}" + "\n")

    registry = TemplateRegistry(types_base_path=tmp_path)

    assert registry.render("moderncv", "skills", skills="Go") == r"\skills{Go}"


@pytest.mark.unit
def test_layout_registry_available():
    """All bundled layouts are discovered."""
    registry = LayoutConfigRegistry()
    assert registry.available() == ["classic", "compact", "european"]


@pytest.mark.unit
def test_layout_config_loading_and_caching():
    """Layout configs load with their section list and are cached."""
    registry = LayoutConfigRegistry()

    config = registry.get_config("classic")

    assert config["document_class"] == "moderncv"
    assert config["style"] == "classic"
    assert [section["key"] for section in config["sections"]][:2] == ["profile", "education"]
    assert registry.is_cached("classic")
    assert registry.get_config("classic") is config

    registry.clear_cache()
    assert not registry.is_cached("classic")


@pytest.mark.unit
def test_layout_config_not_found(tmp_path):
    """Missing layout file raises FileNotFoundError."""
    registry = LayoutConfigRegistry(layouts_base_path=tmp_path)

    with pytest.raises(FileNotFoundError):
        registry.get_config("classic")


@pytest.mark.unit
def test_layout_config_missing_keys(tmp_path):
    """A layout without a section list is rejected."""
    (tmp_path / "classic.yaml").write_text("document_class: moderncv\n")
    registry = LayoutConfigRegistry(layouts_base_path=tmp_path)

    with pytest.raises(LayoutConfigError, match="sections"):
        registry.get_config("classic")
