"""Shared HTML fixtures and a network-free fetch client"""

from typing import Callable, Dict

import httpx
import pytest

from jobfinder.config.settings import Settings
from jobfinder.fetch.client import FetchClient

# Three distinct jobs, a repeated link to the first job, a repost of the
# second job, and a card whose only title is too short.
LISTING_HTML = """
<html>
<body>
<div data-automation="searchResults">
  <article data-automation="normalJob">
    <h3 data-automation="jobTitle"><a href="/id/job/81234567?type=standard">Backend Developer</a></h3>
    <span data-automation="jobCompany">PT Teknologi Maju</span>
    <span data-automation="jobLocation">Jakarta Selatan</span>
    <span data-automation="jobSalary">Rp 8.000.000 – Rp 12.000.000 per month</span>
    <span data-automation="jobClassification">(Information &amp; Communication Technology)</span>
    <span data-automation="jobWorkType">Full time</span>
    <span data-automation="jobListingDate">2 hari yang lalu</span>
    <p>Build and maintain REST APIs for our payments platform.</p>
    <a href="/id/job/81234567?type=standard#apply">Lihat detail</a>
  </article>
  <article data-automation="normalJob">
    <a href="/id/job/81234568">Sales Executive</a>
    <span>Lowongan di PT Niaga Sejahtera</span>
    <span>Bandung</span>
    <span>5 jam yang lalu</span>
  </article>
  <article data-automation="normalJob">
    <h3><a href="/id/job/81234569">Graphic Designer</a></h3>
    <span>at Studio Kreatif • Surabaya</span>
    <span>Hari ini</span>
    <span>Kontrak</span>
  </article>
  <article data-automation="normalJob">
    <h3><a href="/id/job/81234568">Sales Executive (Repost)</a></h3>
  </article>
  <article data-automation="normalJob">
    <a href="/id/job/81234570">QA</a>
    <span>Jakarta</span>
  </article>
</div>
</body>
</html>
"""

EMPTY_LISTING_HTML = """
<html>
<body>
<div data-automation="searchResults">
  <p>Tidak ada lowongan yang cocok.</p>
  <a href="/id/companies">Perusahaan</a>
</div>
</body>
</html>
"""

DETAIL_HTML = """
<html>
<head>
<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "JobPosting",
  "title": "Senior Python Engineer",
  "hiringOrganization": {"@type": "Organization", "name": "PT Data Nusantara"},
  "jobLocation": {
    "@type": "Place",
    "address": {"addressLocality": "Jakarta Selatan", "addressRegion": "Jakarta Raya"}
  },
  "baseSalary": {
    "@type": "MonetaryAmount",
    "currency": "IDR",
    "value": {"@type": "QuantitativeValue", "minValue": 15000000, "maxValue": 25000000, "unitText": "MONTH"}
  },
  "employmentType": "FULL_TIME"
}
</script>
</head>
<body>
  <h1 data-automation="job-detail-title">Senior Python Engineer</h1>
  <span data-automation="job-detail-location">Jakarta Selatan, Jakarta Raya</span>
  <span data-automation="job-detail-classifications">(Information &amp; Communication Technology)</span>
  <span data-automation="job-detail-date">Diposting 3 hari yang lalu</span>
  <div data-automation="jobAdDetails">
    <p>We are looking for an experienced engineer to build our data platform services.</p>
    <p>Short.</p>
    <ul>
      <li>5+ years of Python experience</li>
      <li>Familiar with PostgreSQL and Redis</li>
      <li>OK</li>
    </ul>
  </div>
</body>
</html>
"""


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        USER_AGENT="JobFinderTest/1.0",
        MAX_RETRIES=0,
        RETRY_BASE_DELAY=0,
        RETRY_MAX_DELAY=0,
    )


@pytest.fixture
def make_client(test_settings) -> Callable[..., FetchClient]:
    """
    Build a FetchClient whose responses come from a path -> (status, body) map.
    Unknown paths answer 404. Every request is recorded on client.requests.
    """

    def factory(routes: Dict[str, tuple], settings: Settings = None) -> FetchClient:
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            status, body = routes.get(request.url.path, (404, "Not Found"))
            return httpx.Response(status, text=body)

        client = FetchClient(settings or test_settings, transport=httpx.MockTransport(handler))
        client.requests = requests
        return client

    return factory


@pytest.fixture
def listing_html() -> str:
    return LISTING_HTML


@pytest.fixture
def empty_listing_html() -> str:
    return EMPTY_LISTING_HTML


@pytest.fixture
def detail_html() -> str:
    return DETAIL_HTML
