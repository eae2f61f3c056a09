import sys
from typing import Any, Dict, Sequence

import httpx

from .client import client_from_tokens
from .errors import RequestError
from .generate import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, generate_text
from .messages import PIRATE_CONVERSATION
from .report import RULE, format_insights, format_messages, format_response

async def run_demo(
    tokens: Dict[str, Any],
    *,
    model: str = DEFAULT_MODEL,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    messages: Sequence[Dict[str, str]] = PIRATE_CONVERSATION,
    http_client: httpx.AsyncClient | None = None,
) -> int:
    """
    Run the role demo once against the endpoint described by `tokens`.

    A failed request is printed to stderr and swallowed; the return value is the exit code.
    """
    print("\n👥 Testing Message Roles\n")
    print(RULE)
    print(format_messages(messages))
    print("\n🤖 Calling Copilot with different roles...\n")

    client = client_from_tokens(tokens, http_client=http_client)
    try:
        text = await generate_text(client, model=model, messages=messages, max_tokens=max_tokens)
    except RequestError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 0
    finally:
        await client.close()

    print(format_response(text))
    print(format_insights())
    return 0
