# services/gemini.py
import asyncio
import functools
import logging

from google import genai
from google.genai import types, errors as gerrors

from config import settings
from core.errors import ParseError, ServiceError
from core.ports import AIRequest, AIResponse, Citation

_LOG = logging.getLogger(__name__)


# ───────────── API Key & Client ─────────────
def build_client(api_key: str | None) -> genai.Client | None:
    """Return a Gemini SDK client, or None when no key is configured."""
    if not api_key:
        _LOG.error("GEMINI_API_KEY not set in environment; AI features disabled")
        return None
    return genai.Client(api_key=api_key)


# ───────────── Response decoding ─────────────
def decode_response(resp: types.GenerateContentResponse) -> AIResponse:
    """Pull text + web citations out of an SDK response, failing closed."""
    text = resp.text
    if text is None:
        raise ParseError("Gemini response carried no text")

    citations: list[Citation] = []
    candidates = resp.candidates or []
    meta = candidates[0].grounding_metadata if candidates else None
    for chunk in (meta.grounding_chunks or []) if meta else []:
        web = chunk.web
        if web is None:
            continue
        if not web.uri:
            raise ParseError("grounding chunk without uri")
        citations.append(Citation(uri=web.uri, title=web.title or web.uri))
    return AIResponse(text=text, citations=tuple(citations))


def _config(request: AIRequest) -> types.GenerateContentConfig:
    if request.response_schema is not None:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=request.response_schema,
        )
    if request.search_grounding:
        return types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )
    return types.GenerateContentConfig()


# ───────────── Generation (async, bounded) ─────────────
class GeminiClient:
    """`ContentGenerator` backed by the google-genai async API."""

    def __init__(self, client: genai.Client, timeout_s: float = 60.0) -> None:
        self._client = client
        self.timeout_s = timeout_s

    async def generate(self, request: AIRequest) -> AIResponse:
        try:
            resp = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=request.model,
                    contents=request.content,
                    config=_config(request),
                ),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError as e:
            _LOG.error("Gemini generation timed out after %.1fs", self.timeout_s)
            raise ServiceError(f"Gemini call timed out after {self.timeout_s}s") from e
        except gerrors.APIError as e:
            _LOG.error("Gemini generation failed: %s", e)
            raise ServiceError(f"Gemini API error ({e.code}): {e.message}") from e
        except Exception as e:
            _LOG.error("Gemini generation failed: %s", e)
            raise ServiceError(f"Failed to reach Gemini: {e}") from e
        return decode_response(resp)


@functools.lru_cache(maxsize=1)
def get_generator() -> GeminiClient | None:
    """Process-wide generator, built once from settings."""
    client = build_client(settings.gemini_api_key)
    if client is None:
        return None
    return GeminiClient(client, timeout_s=settings.gemini_timeout_s)
