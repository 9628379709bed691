import pytest

from kenya_law.citations.metadata import JURISDICTION, generate_response_metadata
from kenya_law.citations.validator import STATUS_WARNINGS, validate_citation


def test_valid_section_in_force(db):
    result = validate_citation(db, "Section 25, Data Protection Act 2019")
    assert result.valid is True
    assert result.provision_ref == "s25"
    assert result.warnings == []
    assert result.document_id == "data-protection-act-2019"
    assert result.status == "in_force"
    assert result.normalized == "Section 25, Data Protection Act 2019"


def test_missing_provision_still_reports_document(db):
    result = validate_citation(db, "Section 99, Data Protection Act 2019")
    assert result.valid is False
    assert result.document_id == "data-protection-act-2019"
    assert result.document_title == "Data Protection Act 2019"
    assert result.provision_ref is None
    assert result.normalized is None
    assert "not found" in result.warnings[-1]


@pytest.mark.parametrize("citation,valid", [
    ("Section 22, Computer Misuse and Cybercrimes Act 2018", True),
    ("Section 99, CMCA 2018", False),
])
def test_partially_suspended_warns_either_way(db, citation, valid):
    result = validate_citation(db, citation)
    assert result.valid is valid
    assert result.status == "partially_suspended"
    assert result.warnings[0] == STATUS_WARNINGS["partially_suspended"]
    assert "suspended" in result.warnings[0]


def test_repealed(db):
    result = validate_citation(db, "Section 1, Companies Act Cap 486")
    assert result.valid is True
    assert result.warnings == ["WARNING: This statute has been repealed."]


def test_amended_trailing_form_with_suffix(db):
    result = validate_citation(db, "KICA, s 83C")
    assert result.valid is True
    assert result.provision_ref == "s83C"
    assert result.normalized == "Section 83C, Kenya Information and Communications Act"
    assert result.warnings == [STATUS_WARNINGS["amended"]]


def test_not_yet_in_force_has_no_status_warning(db):
    result = validate_citation(db, "Section 4, Digital Health Act 2023")
    assert result.valid is True
    assert result.status == "not_yet_in_force"
    assert result.warnings == []


def test_article_reference(db):
    result = validate_citation(db, "Article 31, Constitution of Kenya 2010")
    assert result.valid is True
    assert result.provision_ref == "art31"
    assert result.normalized == "Section 31, Constitution of Kenya 2010"


def test_trailing_section(db):
    result = validate_citation(db, "Data Protection Act 2019, Section 25A")
    assert result.valid is True
    assert result.provision_ref == "s25A"


def test_bare_document_reference(db):
    result = validate_citation(db, "DPA 2019")
    assert result.valid is True
    assert result.normalized == "Data Protection Act 2019"
    assert result.provision_ref is None
    assert result.warnings == []


@pytest.mark.parametrize("citation", ["", "   ", None])
def test_empty_input(db, citation):
    result = validate_citation(db, citation)
    assert result.valid is False
    assert result.warnings == ["Could not parse citation format"]


def test_unknown_document(db):
    result = validate_citation(db, "Section 5, Mining Act 2016")
    assert result.valid is False
    assert result.document_id is None
    assert result.warnings == ['Document not found: "Mining Act 2016"']


def test_prose_is_an_invalid_result(db):
    result = validate_citation(db, "The quick brown fox jumps over the lazy dog")
    assert result.valid is False
    assert result.warnings[0].startswith("Document not found")


def test_store_failure_is_reported_not_raised(db):
    db.close()
    result = validate_citation(db, "Section 25, Data Protection Act 2019")
    assert result.valid is False
    assert result.warnings[0].startswith("Validation failed")


def test_response_metadata(db):
    meta = generate_response_metadata(db)
    assert meta.jurisdiction == JURISDICTION == "KE"
    assert meta.freshness == "2026-01-01T00:00:00Z"
    assert "kenyalaw.org" in meta.disclaimer
    assert generate_response_metadata(None).freshness is None
