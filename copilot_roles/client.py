import logging
from typing import Any, Dict

import httpx
from openai import AsyncOpenAI

from .config import DEFAULT_API_URL, TOKEN_KEY

logger = logging.getLogger(__name__)

# Copilot rejects requests that do not identify a supported editor.
COPILOT_HEADERS = {
    "Editor-Version": "vscode/1.99.3",
    "Editor-Plugin-Version": "copilot-chat/0.26.7",
    "User-Agent": "GitHubCopilotChat/0.26.7",
}

def make_client(
    api_key: str,
    base_url: str | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> AsyncOpenAI:
    base_url = base_url or DEFAULT_API_URL
    logger.debug("Creating chat client for %s", base_url)
    return AsyncOpenAI(
        api_key=api_key,
        base_url=base_url,
        default_headers=COPILOT_HEADERS,
        max_retries=0,
        http_client=http_client,
    )

def client_from_tokens(tokens: Dict[str, Any], *, http_client: httpx.AsyncClient | None = None) -> AsyncOpenAI:
    return make_client(tokens[TOKEN_KEY], tokens.get("api_url"), http_client=http_client)
