import re
from urllib.parse import urlparse

from markdownify import ATX, MarkdownConverter


def extract_domain(url):
    """
    Extracts the domain name from a URL using urllib.parse.

    Parameters:
    url (str): The URL string.

    Returns:
    str: The lower-cased domain name without a leading "www.".
    """
    netloc = urlparse(url).netloc.lower()
    return re.sub(r'^www\.', '', netloc)


def domain_matches(domain, candidates):
    """True if `domain` is one of `candidates` or a subdomain of one."""
    return any(domain == c or domain.endswith("." + c) for c in candidates)


class DigestMarkdownConverter(MarkdownConverter):
    """
    markdownify converter with the digest's conventions: ATX headings,
    "-" bullets, fenced code, images kept as references, empty links dropped.
    """

    def __init__(self, **options):
        options.setdefault("heading_style", ATX)
        options.setdefault("bullets", "-")
        super().__init__(**options)

    def convert_img(self, el, text, *args, **kwargs):
        src = (el.get("src") or "").strip()
        if not src:
            return ""
        alt = (el.get("alt") or "").strip()
        return f"![{alt}]({src})\n"

    def convert_a(self, el, text, *args, **kwargs):
        # icon-only anchors would otherwise render as "[](url)"
        if not el.get_text(strip=True):
            return ""
        return super().convert_a(el, text, *args, **kwargs)


def clean_markdown(text):
    # Collapse 3+ newlines into a single blank line
    text = re.sub(r'\n{3,}', '\n\n', text)
    return text.strip()


def html_to_markdown(html):
    """
    Convert an HTML fragment to normalized markdown.

    Parameters:
    html (str): The HTML string.

    Returns:
    str: Markdown with at most one consecutive blank line, trimmed.
    """
    if not html or not html.strip():
        return ""
    converted = DigestMarkdownConverter().convert(html)
    return clean_markdown(converted)
