"""Anthropic Text Generator — single-attempt wrapper over AsyncAnthropic.

Invariants:
    - Exactly one API call per generate(); SDK-level retries disabled (max_retries=0)
    - Model, temperature and max_tokens fixed at construction
    - Rate limits, connection errors, timeouts, non-2xx statuses and replies
      without text all raise GeneratorAPIError (core/errors.py)
    - Returned text is the concatenated text blocks, untrimmed

Design Decisions:
    - Wrapper over raw client: the transformer never sees SDK exception types
    - No backoff: a failed call falls through to the deterministic fallback at once
"""

import logging

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    RateLimitError,
)

from diary.core.errors import GeneratorAPIError

logger = logging.getLogger(__name__)


class AnthropicTextGenerator:
    """Calls the Anthropic Messages API with a fixed model and sampling config."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.9,
        max_tokens: int = 600,
        timeout_seconds: float = 600.0,
        client: anthropic.AsyncAnthropic | None = None,
    ):
        self.client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, prompt: str) -> str:
        """Send `prompt` as a single user message and return the reply text."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except RateLimitError as e:
            raise GeneratorAPIError(str(e), "rate_limit")
        except APITimeoutError:
            raise GeneratorAPIError("API timeout", "timeout")
        except APIConnectionError as e:
            raise GeneratorAPIError(str(e), "connection_error")
        except APIStatusError as e:
            raise GeneratorAPIError(
                f"HTTP {e.status_code}: {e.message}", "status_error",
            )
        except APIError as e:
            raise GeneratorAPIError(str(e), "client_error")

        text = _extract_text(response)
        if not text:
            raise GeneratorAPIError(
                "Reply contained no text content", "malformed_response",
            )
        self._log_success(response)
        return text

    def _log_success(self, response) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "Generator API success",
            extra={
                "model": self.model,
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )


def _extract_text(response) -> str:
    """Join the text blocks of a Messages API reply."""
    blocks = getattr(response, "content", None) or []
    return "".join(
        getattr(block, "text", "") or ""
        for block in blocks
        if getattr(block, "type", None) == "text"
    )
