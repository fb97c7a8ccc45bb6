"""Test DOM extraction with realistic JobStreet listing HTML"""

from jobfinder.adapters.jobstreet.config import (
    SNIPPET_PLACEHOLDER,
    SOURCE_NAME,
    UNKNOWN_POSTED,
)
from jobfinder.adapters.jobstreet.extraction import dom
from jobfinder.adapters.jobstreet.extraction.dom import (
    extract_jobs_from_dom,
    find_job_links,
    parse_document,
    resolve_card,
)


def test_dom_extraction(listing_html):
    """Test that extract_jobs_from_dom correctly parses job cards"""
    soup = parse_document(listing_html)

    jobs, distinct = extract_jobs_from_dom(soup, limit=30)

    assert [job.id for job in jobs] == ["81234567", "81234568", "81234569"]
    assert distinct == 4

    backend = jobs[0]
    assert backend.title == "Backend Developer"
    assert backend.company == "PT Teknologi Maju"
    assert backend.location == "Jakarta Selatan"
    assert backend.salary_range == "Rp 8.000.000 – Rp 12.000.000 per month"
    assert backend.classification == "Information & Communication Technology"
    assert backend.job_type == "Full time"
    assert backend.posted_label == "2 hari yang lalu"
    assert backend.detail_url == "https://id.jobstreet.com/id/job/81234567?type=standard"
    assert backend.source == SOURCE_NAME


def test_first_occurrence_wins_on_duplicate_ids(listing_html):
    jobs, _ = extract_jobs_from_dom(parse_document(listing_html), limit=30)

    sales = [job for job in jobs if job.id == "81234568"]
    assert len(sales) == 1
    assert sales[0].title == "Sales Executive"
    assert len({job.id for job in jobs}) == len(jobs)


def test_anchor_text_title_and_company_phrase(listing_html):
    jobs, _ = extract_jobs_from_dom(parse_document(listing_html), limit=30)
    sales, designer = jobs[1], jobs[2]

    assert sales.company == "PT Niaga Sejahtera"
    assert sales.location == "Bandung"
    assert sales.salary_range is None
    assert sales.posted_label == "5 jam yang lalu"
    assert sales.classification is None
    assert sales.job_type is None

    assert designer.company == "Studio Kreatif"
    assert designer.location == "Surabaya"
    assert designer.posted_label == "Hari ini"
    assert designer.job_type == "Kontrak"


def test_short_titles_are_dropped(listing_html):
    jobs, _ = extract_jobs_from_dom(parse_document(listing_html), limit=30)
    assert "81234570" not in [job.id for job in jobs]


def test_limit_stops_early(listing_html):
    jobs, distinct = extract_jobs_from_dom(parse_document(listing_html), limit=2)

    assert [job.id for job in jobs] == ["81234567", "81234568"]
    # Distinct links are still counted over the whole page
    assert distinct == 4


def test_snippet_excludes_extracted_fields(listing_html):
    jobs, _ = extract_jobs_from_dom(parse_document(listing_html), limit=30)
    snippet = jobs[0].description_snippet

    assert "REST APIs" in snippet
    assert "Backend Developer" not in snippet
    assert "PT Teknologi Maju" not in snippet
    assert "Rp" not in snippet
    assert "()" not in snippet
    assert len(snippet) <= 153

    # Nothing left besides the extracted fields
    assert jobs[1].description_snippet == SNIPPET_PLACEHOLDER


def test_resolve_card_prefers_listing_container(listing_html):
    soup = parse_document(listing_html)
    link = find_job_links(soup)[0]

    card = resolve_card(link)
    assert card.name == "article"
    assert card.get("data-automation") == "normalJob"


def test_resolve_card_walks_parents_without_container():
    html = """
    <html><body>
      <section>
        <div><a href="/id/job/81111111">Warehouse Staff</a></div>
      </section>
    </body></html>
    """
    link = find_job_links(parse_document(html))[0]

    card = resolve_card(link)
    assert card.name == "section"


def test_missing_posted_label_uses_sentinel():
    html = """
    <html><body>
      <article><h3><a href="/id/job/82222222">Office Administrator</a></h3></article>
    </body></html>
    """
    jobs, _ = extract_jobs_from_dom(parse_document(html), limit=10)

    assert len(jobs) == 1
    assert jobs[0].posted_label == UNKNOWN_POSTED


def test_broken_card_does_not_abort_listing(listing_html, monkeypatch):
    real_extract_company = dom.extract_company

    def extract_company(card, text=None):
        if "Niaga Sejahtera" in card.get_text():
            raise AttributeError("'NoneType' object has no attribute 'get'")
        return real_extract_company(card, text)

    monkeypatch.setattr(dom, "extract_company", extract_company)

    jobs, distinct = extract_jobs_from_dom(parse_document(listing_html), limit=30)

    assert [job.id for job in jobs] == ["81234567", "81234569"]
    assert distinct == 4
