#!/usr/bin/env python3
"""
Normalize a Cardano error payload from the command line.

Reads a JSON payload (a plain string is taken as error text) from a file or
stdin and prints the NormalizedError as JSON.

Usage:
  python -m cardano_errors error.json --source wallet_submit --stage submit
  echo '{"status_code": 429, "error": "Too Many Requests", "message": "slow down"}' | python -m cardano_errors
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from cardano_errors.core.codes import ErrorSource, ErrorStage
from cardano_errors.errors_logging import configure_logging, get_logger
from cardano_errors.normalizer import NormalizerConfig, create_normalizer

logger = get_logger(__name__)


def _load_payload(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text.strip()


def _build_context(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "source": args.source,
        "stage": args.stage,
        "network": args.network,
        "provider": args.provider,
        "wallet_hint": args.wallet,
        "tx_hash": args.tx_hash,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Normalize a Cardano provider/wallet/node error payload.")
    parser.add_argument("path", nargs="?", default="-", help="JSON payload file (default: stdin)")
    parser.add_argument("--source", choices=[s.value for s in ErrorSource], default=None)
    parser.add_argument("--stage", choices=[s.value for s in ErrorStage], default=None)
    parser.add_argument("--network", default=None, help="mainnet | preprod | preview | sanchonet")
    parser.add_argument("--provider", default=None, help="Provider name, e.g. blockfrost")
    parser.add_argument("--wallet", default=None, help="Wallet hint, e.g. eternl")
    parser.add_argument("--tx-hash", dest="tx_hash", default=None)
    parser.add_argument("--fingerprint", action="store_true", help="Attach a fingerprint")
    parser.add_argument("--traces", action="store_true", help="Collect trace lines into meta")
    parser.add_argument("--debug", action="store_true", help="Log input/context/output")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("--log-level", default=None, help="DEBUG | INFO | WARNING | ERROR (default: LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["console", "json"], default=None)
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        configure_logging(args.log_level, args.log_format)

    try:
        if args.path == "-":
            text = sys.stdin.read()
        else:
            with open(args.path, encoding="utf-8") as f:
                text = f.read()
    except OSError as e:
        logger.error("cli_payload_read_failed", path=args.path, error=str(e))
        return 1

    normalizer = create_normalizer(
        NormalizerConfig(
            include_fingerprint=args.fingerprint,
            parse_traces=args.traces,
            debug=args.debug,
        )
    )
    normalized = normalizer.normalize(_load_payload(text), _build_context(args))
    print(json.dumps(normalized.to_dict(), indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
