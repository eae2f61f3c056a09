from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError

DEFAULT_TOKENS_FILE = ".tokens.yaml"
DEFAULT_API_URL = "https://api.githubcopilot.com"
TOKEN_KEY = "copilot_token"

def load_tokens(path: str | Path = DEFAULT_TOKENS_FILE) -> Dict[str, Any]:
    """
    Read the YAML tokens file and return it as a dict.

    Relative paths resolve against the current working directory. The token is
    returned verbatim; `api_url` falls back to the public Copilot endpoint.
    """
    p = Path(path)
    if not p.is_absolute():
        p = Path.cwd() / p

    try:
        content = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read tokens file {p}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Tokens file {p} is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Tokens file {p} is not valid YAML: {e}") from e

    # An empty document parses to None; other scalars are rejected below.
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Tokens file {p} must contain a mapping, got {type(data).__name__}")

    token = data.get(TOKEN_KEY)
    if not token:
        raise ConfigError(f"Tokens file {p} has no '{TOKEN_KEY}'")

    tokens = dict(data)
    tokens["api_url"] = data.get("api_url") or DEFAULT_API_URL
    return tokens
