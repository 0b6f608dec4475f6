from datetime import datetime
from typing import List, Optional, Sequence

from ..ingestion.models import PostContent
from ..utils.date import format_compiled_date


SEPARATOR = "\n\n" + "─" * 80 + "\n\n"

INSTRUCTIONS = (
    "Full content of each post is included below. Use this to produce a weekly digest\n"
    "with combined top stories, must-read links, and a reference back to each source URL."
)


def format_header(site_name: str, count: int, compiled_at: Optional[datetime] = None) -> str:
    return "\n".join([
        f"# {site_name}: {count} Most Recent Posts",
        f"Compiled: {format_compiled_date(compiled_at)}",
        "",
        INSTRUCTIONS,
    ])


def format_links(post: PostContent) -> str:
    if not post.external_links:
        return ""
    lines = [f"- [{link.text}]({link.url})" for link in post.external_links]
    return "\n\n**Links referenced in this post:**\n" + "\n".join(lines)


def format_post(post: PostContent, index: int, total: int) -> str:
    """
    Render one post section: numbered heading, metadata lines, optional
    summary and featured image, body and the referenced links.
    """
    meta: List[str] = [
        f"## [Post {index}/{total}] {post.title}",
        f"**Date:** {post.date}  |  **Author:** {post.author}",
        f"**Source:** <{post.url}>",
    ]
    if post.subtitle:
        meta.append(f"**Summary:** {post.subtitle}")
    if post.featured_image:
        meta.append(f"\n![Featured Image]({post.featured_image})\n")

    return "\n".join(meta) + "\n\n" + post.body_markdown + format_links(post)


def format_digest(
    site_name: str,
    posts: Sequence[PostContent],
    compiled_at: Optional[datetime] = None,
) -> str:
    """
    Combine posts into one markdown document, in input order.

    Args:
        site_name: Human readable newsletter name for the title line
        posts: Extracted posts (placeholders included)
        compiled_at: Timestamp for the "Compiled:" line, defaults to now

    Returns:
        The digest text
    """
    total = len(posts)
    header = format_header(site_name, total, compiled_at)
    sections = [format_post(post, i, total) for i, post in enumerate(posts, 1)]
    return header + SEPARATOR + SEPARATOR.join(sections)
