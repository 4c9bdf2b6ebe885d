"""Run a stream function locally, without the host.

Builds the function-call message the host would deliver, dispatches it and
prints the result text. Can be invoked as:
    python -m get_weather --arguments '{"latitude": 51.5074, "longitude": -0.1278}'
"""

import argparse
import json
import logging
import sys
import uuid
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from . import exports
from .context import REDUCER_TAG, FunctionCall
from .handler import SfnHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_message(function_name: str, arguments: str) -> bytes:
    """Encode a function call the way the host delivers it."""
    call = FunctionCall(
        req_id=uuid.uuid4().hex,
        tool_call_id=f"call_{uuid.uuid4().hex[:24]}",
        function_name=function_name,
        arguments=arguments
    )
    return call.to_bytes()


def run(handler: SfnHandler, arguments: str, name: Optional[str] = None, tag: Optional[int] = None) -> Optional[str]:
    """Invoke one of ``handler``'s functions and return the text it wrote back.

    Args:
        handler: Handler holding the function
        arguments: JSON-encoded arguments
        name: Function name, required when the handler has several
        tag: Data tag to send on (defaults to the function's first tag)

    Returns:
        Result text, or None if nothing was written back
    """
    if name is None:
        if len(handler.functions) != 1:
            raise ValueError(f"Handler {handler.name} has {len(handler.functions)} functions, pick one by name")
        fn = next(iter(handler.functions.values()))
    else:
        fn = handler.get(name)

    ctx = exports.dispatch(
        tag if tag is not None else fn.data_tags[0],
        build_message(fn.name, arguments)
    )
    for out_tag, data in ctx.written:
        if out_tag == REDUCER_TAG:
            return FunctionCall.from_bytes(data).result
    return None


def main(handler: SfnHandler, argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Run the {handler.name} stream function locally"
    )
    parser.add_argument("--arguments", "-a", default="{}",
                        help="JSON object with the function arguments")
    parser.add_argument("--function", "-f", dest="name",
                        help="Function to run when the handler has several")
    parser.add_argument("--tag", "-t", type=lambda s: int(s, 0),
                        help="Data tag to deliver the call on (e.g. 0x62)")
    parser.add_argument("--env-file", default=None,
                        help="Load environment variables from this file (default: nearest .env from the working directory)")
    parser.add_argument("--list", action="store_true",
                        help="Print the registration records and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    setup_logging(args.verbose)

    if args.list:
        print(json.dumps(exports.list_functions(), indent=2))
        return 0

    try:
        result = run(handler, args.arguments, name=args.name, tag=args.tag)
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result is None:
        print("Error: no result was written back", file=sys.stderr)
        return 1

    print(result)
    return 0
