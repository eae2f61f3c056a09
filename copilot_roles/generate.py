import logging
from typing import Dict, Sequence

import openai

from .errors import RequestError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 300

async def generate_text(
    client,
    *,
    model: str = DEFAULT_MODEL,
    messages: Sequence[Dict[str, str]],
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> str:
    """Send one chat-completion request and return the generated text."""
    logger.debug("Requesting %s with %d messages (max_tokens=%d)", model, len(messages), max_tokens)
    try:
        resp = await client.chat.completions.create(
            model=model,
            messages=list(messages),
            max_tokens=max_tokens,
        )
    except openai.APIStatusError as e:
        logger.debug("Chat completion failed with HTTP %s", e.status_code)
        raise RequestError(e.message, status_code=e.status_code) from e
    except openai.APIError as e:
        logger.debug("Chat completion failed: %s", e)
        raise RequestError(str(e)) from e

    if not resp.choices:
        raise RequestError(f"No choices returned by model {model}")

    text = resp.choices[0].message.content or ""
    logger.debug("Received %d characters", len(text))
    return text
