from io import StringIO

from rich.console import Console

from newsdigest.ingestion.models import PostReference
from newsdigest.utils.print import print_references, shorten


def render(references, **kwargs):
    buffer = StringIO()
    print_references(references, console=Console(file=buffer, width=140), **kwargs)
    return buffer.getvalue()


def test_shorten():
    assert shorten("short", max_len=10) == "short"
    assert shorten("a" * 12, max_len=10) == "a" * 10 + "..."


def test_print_references_table():
    refs = [
        PostReference(title="OpenAI ships agents", date="Feb 21, 2026",
                      url="https://www.superhuman.ai/p/openai-ships-agents",
                      slug="openai-ships-agents"),
        PostReference(title="Robots in the kitchen", date="3 hours ago",
                      url="https://www.superhuman.ai/p/robots-in-the-kitchen",
                      slug="robots-in-the-kitchen"),
    ]
    out = render(refs, title="Superhuman AI Newsletter")

    assert "Superhuman AI Newsletter" in out
    assert "OpenAI ships agents" in out
    assert "3 hours ago" in out
    assert "https://www.superhuman.ai/p/robots-in-the-kitchen" in out
    assert out.index("OpenAI ships agents") < out.index("Robots in the kitchen")


def test_print_references_empty():
    assert render([]).strip() == "No posts found."
