"""Command-line entry point: sign and submit one contract call."""

import argparse
import asyncio
import json
import logging
import math
import os
import sys
from typing import Any, List, Optional

from .client import Amadeus
from .constants import (
    DEFAULT_TIMEOUT,
    ENV_ENDPOINT,
    ENV_TIMEOUT,
    MCP_ENDPOINT,
    Network,
)
from .exceptions import AmadeusError, DecodeError, RemoteRejected, UsageError
from .utils.encoding import decode_json

__all__ = ["main", "build_parser"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

EXAMPLE = (
    "example:\n"
    "  amasign SK_B58 Coin transfer '[{\"b58\":\"RECIPIENT\"},\"1000000000\",\"AMA\"]' testnet"
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="amasign",
        description="Build, sign locally and submit an Amadeus transaction.",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("seed", help="Base-58 encoded secret seed")
    ap.add_argument("contract", help="Contract identifier (e.g. Coin)")
    ap.add_argument("function", help="Contract function name (e.g. transfer)")
    ap.add_argument("args_json", help="JSON-encoded argument list")
    ap.add_argument(
        "network",
        nargs="?",
        default=Network.MAINNET.value,
        help=f"Target network (default: {Network.MAINNET.value})",
    )
    ap.add_argument(
        "--endpoint",
        default=os.environ.get(ENV_ENDPOINT, MCP_ENDPOINT),
        help=f"MCP service URL (default: ${ENV_ENDPOINT} or {MCP_ENDPOINT})",
    )
    ap.add_argument(
        "--timeout",
        default=os.environ.get(ENV_TIMEOUT, str(DEFAULT_TIMEOUT)),
        help=f"Request timeout in seconds (default: ${ENV_TIMEOUT} or {DEFAULT_TIMEOUT})",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Derive and print the signer public key without contacting the service",
    )
    ap.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return ap


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def _parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise UsageError(f"Invalid timeout: {value!r}") from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise UsageError(f"Invalid timeout: {value!r}")
    return timeout


def _parse_args_json(text: str) -> Any:
    try:
        return decode_json(text)
    except DecodeError as e:
        raise UsageError(f"args_json is not valid JSON: {e.message}") from e


def _format_result(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2)


async def _submit(args: argparse.Namespace, call_args: Any, timeout: float) -> Any:
    async with Amadeus.create_http_client(
        network=args.network,
        endpoint=args.endpoint,
        timeout=timeout,
    ) as client:
        return await client.sign_and_submit(
            args.seed,
            args.contract,
            args.function,
            call_args,
        )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.
    
    Returns:
        Process exit code: 0 on success, 1 on decode, transport, protocol
        or remote errors, 2 on usage errors
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    
    try:
        timeout = _parse_timeout(args.timeout)
        call_args = _parse_args_json(args.args_json)
        
        if args.dry_run:
            signer = Amadeus.signer_for(args.seed)
            print(json.dumps({"signer": signer.base58()}))
            return EXIT_OK
            
        result = asyncio.run(_submit(args, call_args, timeout))
        
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except RemoteRejected as e:
        print(f"error: remote rejected: {json.dumps(e.detail)}", file=sys.stderr)
        return EXIT_FAILURE
    except AmadeusError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
        
    print(_format_result(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
