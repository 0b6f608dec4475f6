import pytest
from newsdigest.ingestion.parser import (
    clean_markdown, domain_matches, extract_domain, html_to_markdown
)


@pytest.mark.parametrize("url,expected_domain", [
    ("http://example.com", "example.com"),
    ("https://www.example.com/path?query=123", "example.com"),
    ("https://WWW.Superhuman.AI/p/x", "superhuman.ai"),
    ("http://subdomain.example.com/page", "subdomain.example.com"),
    ("http://www2.example.org", "www2.example.org"),  # we only strip "www."
    ("", ""),
])
def test_extract_domain(url, expected_domain):
    assert extract_domain(url) == expected_domain


def test_domain_matches_subdomains():
    assert domain_matches("beehiiv.com", ["beehiiv.com"])
    assert domain_matches("media.beehiiv.com", ["beehiiv.com"])
    assert not domain_matches("notbeehiiv.com", ["beehiiv.com"])


def test_html_to_markdown_headings_and_lists():
    html = """
    <h1>Title</h1>
    <h3>Section</h3>
    <ul><li>Alpha</li><li>Beta</li></ul>
    """
    result = html_to_markdown(html)

    assert result.startswith("# Title")
    assert "### Section" in result
    assert "- Alpha" in result
    assert "- Beta" in result
    assert "* Alpha" not in result


def test_html_to_markdown_images_and_links():
    html = """
    <p>See <a href="https://example.com/a">the report</a>.</p>
    <p><a href="https://example.com/icon"><span> </span></a></p>
    <img src="https://example.com/i.png" alt="Diagram">
    <img alt="no source">
    """
    result = html_to_markdown(html)

    assert "[the report](https://example.com/a)" in result
    assert "https://example.com/icon" not in result
    assert "![Diagram](https://example.com/i.png)" in result
    assert "no source" not in result


def test_html_to_markdown_fenced_code():
    result = html_to_markdown("<pre><code>x = 1\ny = 2</code></pre>")
    assert result.startswith("```")
    assert "x = 1\ny = 2" in result
    assert result.endswith("```")


def test_html_to_markdown_empty():
    assert html_to_markdown("") == ""
    assert html_to_markdown("   \n ") == ""


def test_clean_markdown_collapses_blank_lines():
    text = "\n\nFirst\n\n\n\n\nSecond\n\n\nThird\n\n"
    assert clean_markdown(text) == "First\n\nSecond\n\nThird"
