# scripts/roles.py
import os
import asyncio
import argparse
import logging
from dotenv import load_dotenv

from copilot_roles.config import DEFAULT_TOKENS_FILE, load_tokens
from copilot_roles.demo import run_demo
from copilot_roles.errors import ConfigError
from copilot_roles.generate import DEFAULT_MAX_TOKENS, DEFAULT_MODEL


def main(argv=None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Demonstrate chat message roles against GitHub Copilot")
    parser.add_argument("--tokens", default=os.getenv("COPILOT_TOKENS_FILE", DEFAULT_TOKENS_FILE),
                        help="Path to the YAML file holding copilot_token (and optionally api_url)")
    parser.add_argument("--model", default=os.getenv("COPILOT_MODEL", DEFAULT_MODEL))
    parser.add_argument("--max-tokens", type=int, default=DEFAULT_MAX_TOKENS,
                        help="Upper bound on generated tokens")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        tokens = load_tokens(args.tokens)
    except ConfigError as e:
        raise SystemExit(f"❌ Config error: {e}")

    return asyncio.run(run_demo(tokens, model=args.model, max_tokens=args.max_tokens))



if __name__ == "__main__":
    raise SystemExit(main())
