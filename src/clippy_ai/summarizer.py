"""Page summarization: fetch, strip markup, prompt Gemini."""

import logging
from typing import Optional

import requests

from .config import CONTENT_PLACEHOLDER
from .fetcher import fetch_html, make_session
from .llm.base import LLMProvider
from .llm.gemini import GeminiProvider
from .markup import strip_html
from .models import SummaryRequest

logger = logging.getLogger(__name__)

SUMMARY_TIMEOUT = 15.0


def build_prompt(template: str, content: str) -> str:
    """Substitute every ``{content}`` placeholder in ``template``."""
    if CONTENT_PLACEHOLDER not in template:
        logger.warning(
            "Prompt template has no %s placeholder; page text will not be sent",
            CONTENT_PLACEHOLDER,
        )
    return template.replace(CONTENT_PLACEHOLDER, content)


def summarize_request(
    request: SummaryRequest,
    session: Optional[requests.Session] = None,
    llm: Optional[LLMProvider] = None,
    timeout: float = SUMMARY_TIMEOUT,
) -> str:
    """Summarize the page described by ``request``.

    The page body is summarized whatever its HTTP status.
    """
    if session is None:
        own = make_session()
        try:
            return summarize_request(request, own, llm, timeout)
        finally:
            own.close()

    html = fetch_html(request.url, timeout=timeout, session=session, check_status=False)
    text = strip_html(html)
    logger.info("Extracted %d chars from %s", len(text), request.url)

    llm = llm or GeminiProvider(
        api_key=request.api_key,
        model=request.model,
        session=session,
        generate_timeout=timeout,
    )
    return llm.generate(build_prompt(request.prompt_template, text))


def summarize(
    url: str,
    api_key: str,
    model: str,
    prompt_template: str,
    session: Optional[requests.Session] = None,
) -> str:
    """Fetch ``url`` and return Gemini's summary of its text."""
    return summarize_request(
        SummaryRequest(
            url=url, api_key=api_key, model=model, prompt_template=prompt_template
        ),
        session=session,
    )


def list_models(api_key: str, session: Optional[requests.Session] = None) -> list[str]:
    """Model identifiers that support content generation."""
    with GeminiProvider(api_key=api_key, session=session) as llm:
        return llm.list_models()
