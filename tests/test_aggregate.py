from jobfinder.core.aggregate import (
    DEFAULT_CATEGORY,
    aggregate,
    category_of,
    extract_locations,
    infer_category,
)
from jobfinder.core.models import JobRecord


def make_record(title="Staff Umum", classification=None, location="Jakarta", snippet=""):
    return JobRecord(
        id=None,
        title=title,
        company="PT Contoh",
        location=location,
        detail_url=f"https://id.jobstreet.com/id/job/{abs(hash(title))}",
        source="JobStreet Indonesia",
        posted_label="N/A",
        classification=classification,
        description_snippet=snippet,
    )


def test_aggregate_counts_classifications():
    records = [
        make_record(classification="IT"),
        make_record(classification="IT"),
        make_record(classification="Sales"),
    ]
    assert aggregate(records) == [
        {"name": "IT", "count": 2},
        {"name": "Sales", "count": 1},
    ]


def test_ties_keep_first_encountered_order():
    records = [
        make_record(classification="Sales"),
        make_record(classification="Finance"),
        make_record(classification="IT"),
        make_record(classification="Finance"),
        make_record(classification="IT"),
    ]
    assert [c["name"] for c in aggregate(records)] == ["Finance", "IT", "Sales"]


def test_aggregate_empty():
    assert aggregate([]) == []


def test_unclassified_records_use_inferred_category():
    records = [
        make_record(title="Backend Developer"),
        make_record(title="Office Boy"),
        make_record(classification="IT"),
    ]
    assert aggregate(records) == [
        {"name": "IT", "count": 2},
        {"name": DEFAULT_CATEGORY, "count": 1},
    ]


def test_infer_category():
    assert infer_category(make_record(title="UI/UX Designer")) == "Design"
    assert infer_category(make_record(title="Staff HR & GA")) == "HR"
    assert infer_category(make_record(title="Guru Matematika")) == "Education"
    assert infer_category(make_record(title="Kasir", snippet="melayani pelanggan")) == DEFAULT_CATEGORY


def test_short_keywords_match_whole_words_only():
    # "cs" must not match inside "physics"
    assert infer_category(make_record(title="Physics Lab Assistant")) == DEFAULT_CATEGORY
    assert infer_category(make_record(title="CS Online")) == "Customer Service"


def test_category_of_prefers_classification():
    assert category_of(make_record(title="Backend Developer", classification="Retail")) == "Retail"


def test_extract_locations():
    records = [
        make_record(location="Jakarta"),
        make_record(location="Bandung"),
        make_record(location="Indonesia"),
        make_record(location="N/A"),
        make_record(location="Jakarta  "),
    ]
    assert extract_locations(records) == ["Bandung", "Jakarta"]
