import pytest

from jobfinder.adapters.jobstreet.config import UNKNOWN_COMPANY
from jobfinder.adapters.jobstreet.extraction.detail import extract_job_detail
from jobfinder.adapters.jobstreet.extraction.dom import parse_document
from jobfinder.adapters.jobstreet.extraction.json_ld import extract_json_ld, json_ld_salary
from jobfinder.adapters.jobstreet.scraping import scrape_job, validate_job_id
from jobfinder.core.errors import FetchHttpError, InvalidParameter, JobNotFound

JOB_URL = "https://id.jobstreet.com/id/job/81234567"

LABELLED_DETAIL_HTML = """
<html><body>
  <h1>Admin Gudang</h1>
  <dl>
    <dt>Perusahaan</dt><dd>CV Sumber Rejeki</dd>
    <dt>Lokasi</dt><dd>Bekasi</dd>
    <dt>Gaji</dt><dd>Rp 4.000.000 per month</dd>
  </dl>
  <p>Bertanggung jawab atas pencatatan stok barang masuk dan keluar gudang.</p>
  <p>Kami menggunakan cookie untuk meningkatkan pengalaman Anda di situs ini.</p>
</body></html>
"""


def test_extract_detail_prefers_json_ld(detail_html):
    detail = extract_job_detail(parse_document(detail_html), "81234567", JOB_URL)

    assert detail.id == "81234567"
    assert detail.title == "Senior Python Engineer"
    assert detail.company == "PT Data Nusantara"
    assert detail.location == "Jakarta Selatan, Jakarta Raya"
    assert detail.salary == "Rp 15.000.000 – Rp 25.000.000 per month"
    assert detail.job_type == "Full Time"
    assert detail.classification == "Information & Communication Technology"
    assert detail.posted_label == "Diposting 3 hari yang lalu"
    assert detail.apply_url == JOB_URL


def test_description_and_requirements(detail_html):
    detail = extract_job_detail(parse_document(detail_html), "81234567", JOB_URL)

    assert detail.description == [
        "We are looking for an experienced engineer to build our data platform services."
    ]
    assert detail.requirements == [
        "5+ years of Python experience",
        "Familiar with PostgreSQL and Redis",
    ]


def test_labelled_values_without_json_ld():
    detail = extract_job_detail(parse_document(LABELLED_DETAIL_HTML), "81234567", JOB_URL)

    assert detail.title == "Admin Gudang"
    assert detail.company == "CV Sumber Rejeki"
    assert detail.location == "Bekasi"
    assert detail.salary == "Rp 4.000.000 per month"
    assert detail.job_type is None
    assert detail.posted_label == "N/A"
    # Cookie banners are not part of the description
    assert detail.description == [
        "Bertanggung jawab atas pencatatan stok barang masuk dan keluar gudang."
    ]


def test_missing_company_uses_sentinel():
    html = "<html><body><h1>Barista</h1></body></html>"
    detail = extract_job_detail(parse_document(html), "81234567", JOB_URL)
    assert detail.company == UNKNOWN_COMPANY


def test_page_without_title_is_not_found():
    with pytest.raises(JobNotFound):
        extract_job_detail(parse_document("<html><body><p>Maaf</p></body></html>"), "81234567", JOB_URL)


def test_json_ld_graph_and_single_salary():
    html = """
    <html><head><script type="application/ld+json">
    {"@graph": [{"@type": "WebPage"}, {"@type": "JobPosting", "title": "Kurir",
      "baseSalary": {"currency": "IDR", "value": {"minValue": 3500000, "unitText": "MONTH"}}}]}
    </script></head><body></body></html>
    """
    data = extract_json_ld(parse_document(html))

    assert data["title"] == "Kurir"
    assert json_ld_salary(data) == "Rp 3.500.000 per month"


def test_malformed_json_ld_is_skipped():
    html = """
    <html><head><script type="application/ld+json">{not json</script></head>
    <body><h1>Driver Ekspedisi</h1></body></html>
    """
    assert extract_json_ld(parse_document(html)) is None
    detail = extract_job_detail(parse_document(html), "81234567", JOB_URL)
    assert detail.title == "Driver Ekspedisi"


@pytest.mark.parametrize("job_id", ["", "abc123", "12345", "12345678901", None])
def test_validate_job_id_rejects(job_id):
    with pytest.raises(InvalidParameter):
        validate_job_id(job_id)


def test_validate_job_id_accepts():
    assert validate_job_id(" 81234567 ") == "81234567"


async def test_scrape_job(make_client, test_settings, detail_html):
    client = make_client({"/id/job/81234567": (200, detail_html)})

    detail = await scrape_job("81234567", fetch_client=client, settings=test_settings)

    assert detail.title == "Senior Python Engineer"
    assert str(client.requests[0].url) == JOB_URL


async def test_scrape_job_404_is_not_found(make_client, test_settings):
    client = make_client({})

    with pytest.raises(JobNotFound):
        await scrape_job("81234567", fetch_client=client, settings=test_settings)


async def test_scrape_job_server_error_propagates(make_client, test_settings):
    client = make_client({"/id/job/81234567": (502, "Bad Gateway")})

    with pytest.raises(FetchHttpError):
        await scrape_job("81234567", fetch_client=client, settings=test_settings)


async def test_invalid_id_never_fetches(make_client, test_settings):
    client = make_client({})

    with pytest.raises(InvalidParameter):
        await scrape_job("not-a-job", fetch_client=client, settings=test_settings)
    assert client.requests == []


def test_non_numeric_json_ld_salary_falls_through():
    html = """
    <html><head><script type="application/ld+json">
    {"@type": "JobPosting", "title": "Staff Akuntansi",
     "baseSalary": {"currency": "IDR", "value": {"minValue": "Negotiable"}}}
    </script></head>
    <body>
      <h1>Staff Akuntansi</h1>
      <dl><dt>Gaji</dt><dd>Rp 6.000.000 per month</dd></dl>
    </body></html>
    """
    data = extract_json_ld(parse_document(html))
    assert json_ld_salary(data) is None

    detail = extract_job_detail(parse_document(html), "81234567", JOB_URL)
    assert detail.title == "Staff Akuntansi"
    assert detail.salary == "Rp 6.000.000 per month"
