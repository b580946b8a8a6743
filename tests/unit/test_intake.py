"""Unit tests for job posting and content bank intake."""

import json

import pytest

from quiver.contexts.intake import (
    BankLine,
    ContentBank,
    ContentBankError,
    JobDescriptionError,
    JobPosting,
    discover_job_postings,
)
from quiver.contexts.intake.nomenclature import identifier_from_filename, parse_identifier


class TestNomenclature:
    @pytest.mark.unit
    def test_identifier_from_filename(self):
        assert identifier_from_filename("AcmeCorp-SoftwareEngineer.txt") == "AcmeCorp-SoftwareEngineer"

    @pytest.mark.unit
    def test_parse_identifier(self):
        assert parse_identifier("AcmeCorp-SoftwareEngineer") == ("AcmeCorp", "SoftwareEngineer")
        assert parse_identifier("Acme-Engineer-Remote") == ("Acme", "Engineer")

    @pytest.mark.unit
    @pytest.mark.parametrize("identifier", ["AcmeCorp", "-Engineer", "Acme-", ""])
    def test_parse_identifier_rejects_malformed(self, identifier):
        with pytest.raises(ValueError):
            parse_identifier(identifier)


class TestJobPosting:
    @pytest.mark.unit
    def test_from_text(self):
        posting = JobPosting.from_text("Write Python. Review code. ", identifier="Acme-Dev")

        assert posting.company == "Acme"
        assert posting.role == "Dev"
        assert posting.sentences == ("Write Python", "Review code")

    @pytest.mark.unit
    def test_empty_text_is_validation_error(self):
        with pytest.raises(JobDescriptionError, match="no non-empty sentences"):
            JobPosting.from_text(" .. . ", identifier="Acme-Dev")

    @pytest.mark.unit
    def test_bad_identifier_is_validation_error(self):
        with pytest.raises(JobDescriptionError, match="Company-Role"):
            JobPosting.from_text("Write Python.", identifier="AcmeDev")

    @pytest.mark.unit
    def test_from_file(self, tmp_path):
        path = tmp_path / "Acme-DataEngineer.txt"
        path.write_text("Build pipelines. Use SQL.", encoding="utf-8")

        posting = JobPosting.from_file(path)

        assert posting.identifier == "Acme-DataEngineer"
        assert posting.source_path == path
        assert posting.sentences == ("Build pipelines", "Use SQL")

    @pytest.mark.unit
    def test_from_missing_file(self, tmp_path):
        with pytest.raises(JobDescriptionError) as exc_info:
            JobPosting.from_file(tmp_path / "Acme-Dev.txt")
        assert exc_info.value.source_path == tmp_path / "Acme-Dev.txt"

    @pytest.mark.unit
    def test_discover_job_postings(self, tmp_path):
        for name in ["B-Role.md", "A-Role.txt", "notes.pdf"]:
            (tmp_path / name).write_text("x.")
        (tmp_path / "subdir.txt").mkdir()

        assert [p.name for p in discover_job_postings(tmp_path)] == ["A-Role.txt", "B-Role.md"]

    @pytest.mark.unit
    def test_discover_missing_directory(self, tmp_path):
        with pytest.raises(JobDescriptionError):
            discover_job_postings(tmp_path / "missing")


class TestContentBank:
    @pytest.mark.unit
    def test_from_json_file(self, tmp_path):
        path = tmp_path / "resume-lines.json"
        path.write_text(
            json.dumps(
                {
                    "lines": [
                        {"job": "Civitas LLC", "line": "Built a Python pipeline."},
                        {"job": "Wabash College", "line": "Raised alumni gifts."},
                        {"job": "Civitas LLC", "line": "Tracked state legislation."},
                    ],
                    "skills": ["Python", "Lobbying"],
                }
            )
        )

        bank = ContentBank.from_file(path)

        assert bank.lines[0] == BankLine(category="Civitas LLC", text="Built a Python pipeline.")
        assert bank.categories == ["Civitas LLC", "Wabash College"]
        assert bank.skills == ["Python", "Lobbying"]

    @pytest.mark.unit
    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text("lines:\n  - job: Acme\n    line: Shipped features\n")

        bank = ContentBank.from_file(path)

        assert len(bank.lines) == 1
        assert bank.skills == []

    @pytest.mark.unit
    def test_missing_lines_key(self):
        with pytest.raises(ContentBankError, match="'lines'"):
            ContentBank.from_dict({"skills": []})

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "entry", [{"job": "Acme"}, {"line": "text"}, {"job": "Acme", "line": "  "}, "just text"]
    )
    def test_malformed_entries(self, entry):
        with pytest.raises(ContentBankError):
            ContentBank.from_dict({"lines": [entry]})

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentBankError, match="not found"):
            ContentBank.from_file(tmp_path / "missing.json")
