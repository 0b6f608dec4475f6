"""
Externally invocable operations.

Each tool takes a bounded post count and returns a ToolResult carrying the
digest text, or a human readable error with `is_error` set.
"""
import logging
from typing import Annotated, Callable, Dict, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .ingestion.errors import FetchError
from .ingestion.sites import SUPERHUMAN, THE_CODE, SiteConfig
from .pipeline import DigestPipeline
from .utils.config import load_config


logger = logging.getLogger(__name__)


class ToolResult(BaseModel):
    text: str
    is_error: bool = False


class ToolSpec(BaseModel):
    name: str
    title: str
    description: str
    site: SiteConfig
    handler: Callable[..., ToolResult]

    model_config = {
        "arbitrary_types_allowed": True,
    }


def validate_count(count, site: SiteConfig) -> int:
    """Validate `count` against the site bounds (1..site.max_count)."""
    adapter = TypeAdapter(Annotated[int, Field(ge=1, le=site.max_count, strict=True)])
    return adapter.validate_python(count)


def run_tool(
    site: SiteConfig,
    count,
    pipeline: Optional[DigestPipeline] = None,
    config: Optional[dict] = None,
) -> ToolResult:
    """
    Build the digest for `site`. Never raises: validation errors, listing
    failures and empty archives all come back as error results.
    """
    try:
        count = validate_count(count, site)
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        return ToolResult(text=f"Error: invalid count {count!r}: {message}", is_error=True)

    if pipeline is not None:
        return _build_result(site, count, pipeline)

    config = config if config is not None else load_config(configure_logging=False)
    with DigestPipeline.from_config(site, config) as owned:
        return _build_result(site, count, owned)


def _build_result(site: SiteConfig, count: int, pipeline: DigestPipeline) -> ToolResult:
    try:
        references = pipeline.collect(count)
        if not references:
            return ToolResult(
                text=(
                    f"No posts found on {site.domain}. "
                    "The site may be temporarily unavailable."
                ),
                is_error=True,
            )
        return ToolResult(text=pipeline.render(references))
    except FetchError as e:
        logger.error(f"Listing fetch failed for {site.name}: {e}")
        return ToolResult(text=f"Error: {e}", is_error=True)
    except Exception as e:
        logger.exception(f"Digest build failed for {site.name}")
        return ToolResult(text=f"Error: {e}", is_error=True)


def fetch_superhuman_newsletters(count=SUPERHUMAN.default_count, **kwargs) -> ToolResult:
    return run_tool(SUPERHUMAN, count, **kwargs)


def fetch_code_newsletter(count=THE_CODE.default_count, **kwargs) -> ToolResult:
    return run_tool(THE_CODE, count, **kwargs)


def health_check() -> Dict[str, str]:
    return {"status": "ok"}


TOOLS: Dict[str, ToolSpec] = {
    spec.name: spec for spec in [
        ToolSpec(
            name="fetch_superhuman_newsletters",
            title="Fetch Superhuman AI Newsletters",
            description=(
                "Fetches the N most recent posts from the Superhuman AI newsletter "
                "(superhuman.ai) and returns one markdown document with every post "
                "in full: title, date, source URL, body, images and external links. "
                f"Count: 1-{SUPERHUMAN.max_count}, default {SUPERHUMAN.default_count}."
            ),
            site=SUPERHUMAN,
            handler=fetch_superhuman_newsletters,
        ),
        ToolSpec(
            name="fetch_code_newsletter",
            title="Fetch The Code Newsletter",
            description=(
                "Fetches the N most recent posts from The Code newsletter "
                "(codenewsletter.ai) and returns one markdown document with every post "
                "in full. The archive page serves up to ~9 posts without JavaScript. "
                f"Count: 1-{THE_CODE.max_count}, default {THE_CODE.default_count}."
            ),
            site=THE_CODE,
            handler=fetch_code_newsletter,
        ),
    ]
}


def get_tool(name: str) -> ToolSpec:
    """Look up a tool by tool name or site key."""
    if name in TOOLS:
        return TOOLS[name]
    for spec in TOOLS.values():
        if spec.site.key == name:
            return spec
    raise ValueError(f"Unknown tool '{name}'. Available tools: {', '.join(TOOLS)}")
