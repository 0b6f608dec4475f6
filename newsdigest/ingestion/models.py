from typing import List, Optional
from pydantic import BaseModel, Field


class PostReference(BaseModel):
    """Lightweight record for a post discovered on a listing page."""
    title: str = Field(..., description="Listing title, lowest confidence.")
    date: str = Field("", description="Site-native display date, unparsed.")
    url: str = Field(..., description="Absolute post URL.")
    slug: str = Field(..., description="Post path without the post prefix.")

    model_config = {
        "frozen": True,
    }


class ExternalLink(BaseModel):
    text: str
    url: str

    model_config = {
        "frozen": True,
    }


class PostContent(PostReference):
    """Fully extracted post."""
    author: str
    subtitle: str = ""
    body_markdown: str = ""
    external_links: List[ExternalLink] = Field(default_factory=list)
    featured_image: Optional[str] = None


class ExtractionOutcome(BaseModel):
    """
    Result of resolving one reference: either content or an error message.
    Both variants are rendered through the same formatter.
    """
    reference: PostReference
    content: Optional[PostContent] = None
    error: Optional[str] = None

    model_config = {
        "frozen": True,
    }

    @classmethod
    def ok(cls, reference: PostReference, content: PostContent) -> "ExtractionOutcome":
        return cls(reference=reference, content=content)

    @classmethod
    def failed(cls, reference: PostReference, reason: str) -> "ExtractionOutcome":
        return cls(reference=reference, error=reason)

    @property
    def is_ok(self) -> bool:
        return self.content is not None

    def to_content(self, default_author: str) -> PostContent:
        """Return the extracted content, or a placeholder carrying the error."""
        if self.content is not None:
            return self.content
        return PostContent(
            **self.reference.model_dump(),
            author=default_author,
            subtitle="",
            body_markdown=f"_Could not fetch content: {self.error}_",
            external_links=[],
        )
