"""
Unit tests for CV record loading.

Tests key-style tolerance, missing and malformed fields, and file loading in
cvtex.contexts.templating.cv_data_structure.
"""

from pathlib import Path

import pytest
import yaml

from cvtex.contexts.templating.cv_data_structure import (
    CVRecord,
    Experience,
    Language,
    load_cv_record,
)
from cvtex.contexts.templating.exceptions import InvalidCVStructureError

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


class TestFromDict:
    """Tests for CVRecord.from_dict."""

    @pytest.mark.unit
    def test_camel_case_keys(self):
        cv = CVRecord.from_dict({
            "fullName": "John Doe",
            "experience": [{"role": "Analyst", "employmentType": "Contract", "isCurrent": True}],
            "extracurricularActivities": [{"organization": "Club"}],
        })

        assert cv.full_name == "John Doe"
        assert cv.experience[0].employment_type == "Contract"
        assert cv.experience[0].is_current is True
        assert cv.extracurricular_activities[0].organization == "Club"

    @pytest.mark.unit
    def test_snake_case_keys(self):
        cv = CVRecord.from_dict({
            "full_name": "John Doe",
            "experience": [{"employment_type": "Contract", "start_date": "2020"}],
        })

        assert cv.full_name == "John Doe"
        assert cv.experience[0].employment_type == "Contract"
        assert cv.experience[0].start_date == "2020"

    @pytest.mark.unit
    def test_missing_fields_default_to_empty(self):
        cv = CVRecord.from_dict({"fullName": "John Doe"})

        assert cv.title == ""
        assert cv.experience == []
        assert cv.languages == []
        assert cv.template == "classic"

    @pytest.mark.unit
    @pytest.mark.parametrize("data", [None, [], "text"])
    def test_non_mapping_gives_empty_record(self, data):
        assert CVRecord.from_dict(data) == CVRecord()

    @pytest.mark.unit
    def test_none_values_become_empty_strings(self):
        cv = CVRecord.from_dict({"title": None, "languages": [{"name": "English", "proficiency": None}]})

        assert cv.title == ""
        assert cv.languages == [Language(name="English", proficiency="")]

    @pytest.mark.unit
    def test_malformed_collection_items_dropped(self):
        cv = CVRecord.from_dict({
            "experience": [{"role": "Analyst"}, "not a mapping", None, 42],
            "education": "not a list",
        })

        assert [entry.role for entry in cv.experience] == ["Analyst"]
        assert cv.education == []

    @pytest.mark.unit
    def test_scalar_coercion(self):
        cv = CVRecord.from_dict({
            "phone": 35312345,
            "skills": ["Python", "SQL"],
            "experience": [{"isCurrent": "true"}, {"isCurrent": "no"}],
        })

        assert cv.phone == "35312345"
        assert cv.skills == "Python, SQL"
        assert [entry.is_current for entry in cv.experience] == [True, False]

    @pytest.mark.unit
    @pytest.mark.parametrize("template", ["", "   ", None])
    def test_blank_template_uses_default(self, template):
        assert CVRecord.from_dict({"template": template}).template == "classic"

    @pytest.mark.unit
    def test_unknown_template_kept_as_given(self):
        """Resolution to a layout happens at generation time, not load time."""
        assert CVRecord.from_dict({"template": "Banking"}).template == "Banking"


class TestToDict:
    """Tests for to_dict serialization."""

    @pytest.mark.unit
    def test_snake_case(self):
        cv = CVRecord(full_name="Jane", experience=[Experience(role="Engineer")])
        data = cv.to_dict()

        assert data["full_name"] == "Jane"
        assert data["experience"][0]["role"] == "Engineer"
        assert data["experience"][0]["is_current"] is False

    @pytest.mark.unit
    def test_camel_case(self):
        cv = CVRecord(full_name="Jane", experience=[Experience(employment_type="Contract")])
        data = cv.to_dict(camel_case=True)

        assert data["fullName"] == "Jane"
        assert "extracurricularActivities" in data
        assert data["experience"][0]["employmentType"] == "Contract"

    @pytest.mark.unit
    def test_from_dict_accepts_to_dict_output(self):
        cv = CVRecord(full_name="Jane", languages=[Language(name="Irish", proficiency="Basic")])

        assert CVRecord.from_dict(cv.to_dict(camel_case=True)) == cv


class TestLoadCVRecord:
    """Tests for load_cv_record function."""

    @pytest.mark.unit
    def test_yaml_fixture(self):
        cv = load_cv_record(FIXTURES_PATH / "jane_obrien.yaml")

        assert cv.full_name == "Jane A. O'Brien"
        assert cv.experience[0].company == "Acme Corp"
        assert cv.experience[0].is_current is True
        assert cv.education[0].start_date == "2012"
        assert len(cv.languages) == 2

    @pytest.mark.unit
    def test_editor_export_wrapper_unwrapped(self):
        cv = load_cv_record(FIXTURES_PATH / "editor_export.json")

        assert cv.full_name == "John Michael Doe"
        assert cv.template == "banking"
        assert cv.experience[0].start_date == "Sep 2021"
        assert cv.experience[0].is_current is True
        assert cv.projects[0].name == "Risk dashboard"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["Bash ${HOME} expansion", "Budget ${budget", "Saved ${ 100", "???", r"\${esc}"],
    )
    def test_dollar_brace_text_kept_literal(self, tmp_path, text):
        path = tmp_path / "cv.yaml"
        path.write_text(yaml.safe_dump({"full_name": "Jane", "summary": text}), encoding="utf-8")

        assert load_cv_record(path).summary == text

    @pytest.mark.unit
    def test_malformed_yaml_rejected(self, tmp_path):
        path = tmp_path / "cv.yaml"
        path.write_text("full_name: [Jane\n")

        with pytest.raises(InvalidCVStructureError):
            load_cv_record(path)

    @pytest.mark.unit
    def test_scalar_document_rejected(self, tmp_path):
        path = tmp_path / "cv.yaml"
        path.write_text("just a sentence\n")

        with pytest.raises(InvalidCVStructureError):
            load_cv_record(path)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_cv_record(tmp_path / "missing.yaml")

    @pytest.mark.unit
    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "cv.yaml"
        path.write_text("- full_name: Jane\n")

        with pytest.raises(InvalidCVStructureError):
            load_cv_record(path)

    @pytest.mark.unit
    def test_empty_file_gives_empty_record(self, tmp_path):
        path = tmp_path / "cv.yaml"
        path.write_text("")

        assert load_cv_record(path) == CVRecord()
