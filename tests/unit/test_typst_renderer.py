"""Unit tests for Typst resume rendering."""

from datetime import date

import pytest

from quiver.contexts.targeting.targeting_data_structures import TargetedResume
from quiver.contexts.templating import (
    ProfileError,
    ResumeProfile,
    TemplateRenderError,
    TypstRenderer,
    load_resume_profile,
    order_sections,
    resume_filename,
)


@pytest.fixture
def result():
    return TargetedResume(
        identifier="Acme-Engineer",
        company="Acme",
        role="Engineer",
        selected_lines={
            "Wabash College": ["Raised alumni gifts"],
            "Civitas LLC": ["Built #strong[Python] pipeline", "Tracked legislation"],
        },
        relevant_skills=["Python", "SQL"],
    )


@pytest.mark.unit
def test_render_sections_and_skills(result):
    content = TypstRenderer().render(
        result,
        ResumeProfile(name="Jackson Miller", email="jackson@example.com"),
        category_order=["Civitas LLC", "Wabash College"],
    )

    assert content.startswith('#import "@preview/basic-resume')
    assert '  author: "Jackson Miller",' in content
    assert '  email: "jackson@example.com",' in content
    assert "phone" not in content
    assert "== Civitas LLC\n- Built #strong[Python] pipeline\n- Tracked legislation\n" in content
    assert content.index("== Civitas LLC") < content.index("== Wabash College")
    assert "== Skills" in content
    assert "Python, SQL" in content


@pytest.mark.unit
def test_render_without_skills(result):
    result.relevant_skills = []
    content = TypstRenderer().render(result)
    assert "== Skills" not in content


@pytest.mark.unit
def test_profile_values_escaped(result):
    content = TypstRenderer().render(result, ResumeProfile(name='Jo "JJ" Doe'))
    assert 'author: "Jo \\"JJ\\" Doe",' in content


@pytest.mark.unit
def test_write_uses_company_role_date(result, tmp_path):
    path = TypstRenderer().write(result, tmp_path / "out", on=date(2026, 10, 17))

    assert path == tmp_path / "out" / "Acme-Engineer-2026-10-17.typ"
    assert "== Civitas LLC" in path.read_text(encoding="utf-8")


@pytest.mark.unit
def test_missing_template_raises(result, tmp_path):
    with pytest.raises(TemplateRenderError):
        TypstRenderer(templates_path=tmp_path).render(result)


@pytest.mark.unit
def test_order_sections_appends_unknown_categories():
    selected = {"C": ["c"], "A": ["a"], "B": []}
    assert order_sections(selected, ["A", "B"]) == [("A", ["a"]), ("C", ["c"])]
    assert order_sections(selected) == [("C", ["c"]), ("A", ["a"])]


@pytest.mark.unit
def test_resume_filename():
    assert resume_filename("Acme", "Dev", date(2026, 1, 2)) == "Acme-Dev-2026-01-02.typ"


@pytest.mark.unit
def test_profile_header_fields(tmp_path):
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text("name: Ada Lovelace\npersonal_site: ada.dev\n")

    profile = load_resume_profile(profile_file)

    assert profile.header_fields() == {"author": "Ada Lovelace", "personal-site": "ada.dev"}


@pytest.mark.unit
def test_missing_profile_raises(tmp_path):
    with pytest.raises(ProfileError, match="not found") as exc_info:
        load_resume_profile(tmp_path / "nope.yaml")
    assert exc_info.value.profile_path == tmp_path / "nope.yaml"


@pytest.mark.unit
def test_profile_unknown_key_raises(tmp_path):
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text("nmae: Ada Lovelace\n")

    with pytest.raises(ProfileError, match="nmae"):
        load_resume_profile(profile_file)


@pytest.mark.unit
def test_profile_malformed_yaml_raises(tmp_path):
    profile_file = tmp_path / "profile.yaml"
    profile_file.write_text("name: [unclosed\n")

    with pytest.raises(ProfileError):
        load_resume_profile(profile_file)


@pytest.mark.unit
def test_write_all_skips_failed_writes(result, tmp_path):
    # "/" in the company points the file into a directory that does not exist
    unwritable = TargetedResume(
        identifier="Missing/Acme-Dev",
        company="Missing/Acme",
        role="Dev",
        selected_lines={"Civitas LLC": ["Tracked legislation"]},
        relevant_skills=[],
    )

    report = TypstRenderer().write_all([unwritable, result], tmp_path, on=date(2026, 1, 2))

    assert list(report.failures) == ["Missing/Acme-Dev"]
    assert isinstance(report.failures["Missing/Acme-Dev"], OSError)
    assert report.written == {"Acme-Engineer": tmp_path / "Acme-Engineer-2026-01-02.typ"}
    assert report.written["Acme-Engineer"].exists()
