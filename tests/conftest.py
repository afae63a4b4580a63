import pytest

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <link href="http://arxiv.org/api/query?search_query=au:bousso" rel="self" type="application/atom+xml"/>
  <title type="html">ArXiv Query: search_query=au:bousso&amp;id_list=&amp;start=0&amp;max_results=2</title>
  <id>http://arxiv.org/api/abc123</id>
  <updated>2024-01-01T00:00:00-05:00</updated>
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">142</opensearch:totalResults>
  <opensearch:startIndex xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:startIndex>
  <opensearch:itemsPerPage xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">2</opensearch:itemsPerPage>
  <entry>
    <id>http://arxiv.org/abs/1112.3341v2</id>
    <updated>2012-02-01T18:04:11Z</updated>
    <published>2011-12-14T20:59:38Z</published>
    <title>Vacuum Structure and the Arrow of
  Time</title>
    <summary>  We show that the arrow of time can be explained by the
structure of the vacuum.
</summary>
    <author>
      <name>Raphael Bousso</name>
    </author>
    <author>
      <name>Claire Zukowski</name>
    </author>
    <arxiv:doi xmlns:arxiv="http://arxiv.org/schemas/atom">10.1103/PhysRevD.86.123520</arxiv:doi>
    <arxiv:comment xmlns:arxiv="http://arxiv.org/schemas/atom">12 pages</arxiv:comment>
    <arxiv:journal_ref xmlns:arxiv="http://arxiv.org/schemas/atom">Phys. Rev. D 86, 123520 (2012)</arxiv:journal_ref>
    <link href="http://arxiv.org/abs/1112.3341v2" rel="alternate" type="text/html"/>
    <link title="pdf" href="http://arxiv.org/pdf/1112.3341v2" rel="related" type="application/pdf"/>
    <arxiv:primary_category xmlns:arxiv="http://arxiv.org/schemas/atom" term="hep-th" scheme="http://arxiv.org/schemas/atom"/>
    <category term="hep-th" scheme="http://arxiv.org/schemas/atom"/>
    <category term="gr-qc" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
  <entry>
    <id>http://arxiv.org/abs/0901.4806v1</id>
    <updated>2009-01-30T00:00:00Z</updated>
    <published>2009-01-30T00:00:00Z</published>
    <title>Complementarity in the Multiverse</title>
    <summary>Abstract text.</summary>
    <author>
      <name>Raphael Bousso</name>
    </author>
    <link href="http://arxiv.org/abs/0901.4806v1" rel="alternate" type="text/html"/>
    <category term="hep-th" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
</feed>
"""

EMPTY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="html">ArXiv Query: search_query=</title>
  <id>http://arxiv.org/api/empty</id>
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:totalResults>
</feed>
"""

ERROR_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="html">ArXiv Query: search_query=</title>
  <id>http://arxiv.org/api/error</id>
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">1</opensearch:totalResults>
  <entry>
    <id>http://arxiv.org/api/errors#incorrect_id_format_for_foo</id>
    <title>Error</title>
    <summary>incorrect id format for foo</summary>
  </entry>
</feed>
"""

@pytest.fixture
def sample_feed() -> str:
    return SAMPLE_FEED


@pytest.fixture
def empty_feed() -> str:
    return EMPTY_FEED


@pytest.fixture
def error_feed() -> str:
    return ERROR_FEED


@pytest.fixture(autouse=True)
def _no_api_url_override(monkeypatch):
    monkeypatch.delenv("ARXIV_API_URL", raising=False)
