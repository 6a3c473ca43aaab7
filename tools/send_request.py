#!/usr/bin/env python3
"""
Request Diagnostic Tool

Builds a single HttpRequest from the command line, sends it and prints the
outcome delivered to the completion callback. Useful for checking what an
endpoint answers to a given set of headers and parameters.

Usage:
    python tools/send_request.py GET https://login.example.com/.well-known/openid-configuration
    python tools/send_request.py POST https://login.example.com/token \\
        -b grant_type=password -b username=alice -H "Accept: application/json"
    python tools/send_request.py GET https://api.example.com -q page=2 --status-errors
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

# Make the authhttp package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from authhttp import (  # noqa: E402
    HttpClient,
    HttpRequest,
    HttpResponse,
    RequestBuildError,
    status_error_for,
)
from authhttp.logging_config import setup_logging  # noqa: E402

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_SENT = 2


class Colors:
    """ANSI color codes for terminal output"""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def print_header(text: str, char: str = "=") -> None:
    """Print a formatted header"""
    print(f"\n{Colors.BOLD}{Colors.CYAN}{char * 70}{Colors.RESET}")
    print(f"{Colors.BOLD}{text}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.CYAN}{char * 70}{Colors.RESET}")


def print_success(text: str) -> None:
    """Print success message"""
    print(f"{Colors.GREEN}✅ {text}{Colors.RESET}")


def print_error(text: str) -> None:
    """Print error message"""
    print(f"{Colors.RED}❌ {text}{Colors.RESET}")


def print_warning(text: str) -> None:
    """Print warning message"""
    print(f"{Colors.YELLOW}⚠️  {text}{Colors.RESET}")


def print_info(text: str) -> None:
    """Print info message"""
    print(f"{Colors.BLUE}[INFO] {text}{Colors.RESET}")


def parse_header(text: str) -> tuple[str, str]:
    """Parse "Name: value" into (name, value)"""
    name, sep, value = text.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Header must look like 'Name: value', got {text!r}")
    return name.strip(), value.strip()


def parse_parameter(text: str) -> tuple[str, str]:
    """Parse "key=value" into (key, value); the value may be empty"""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Parameter must look like 'key=value', got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a single GET or POST request")
    parser.add_argument("method", type=str.upper, choices=["GET", "POST"], help="HTTP method")
    parser.add_argument("endpoint", help="Absolute http(s) endpoint URL")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        type=parse_header,
        action="append",
        default=[],
        help="Set a header field ('Name: value'); repeat to replace",
    )
    parser.add_argument(
        "-A",
        "--add-header",
        dest="added_headers",
        type=parse_header,
        action="append",
        default=[],
        help="Add a header value ('Name: value'); repeat to build a comma-separated list",
    )
    parser.add_argument(
        "-q",
        "--query",
        type=parse_parameter,
        action="append",
        default=[],
        help="Query parameter ('key=value')",
    )
    parser.add_argument(
        "-b",
        "--body",
        type=parse_parameter,
        action="append",
        default=[],
        help="JSON body parameter ('key=value', POST only)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: from config)",
    )
    parser.add_argument(
        "--status-errors",
        action="store_true",
        help="Treat 4xx/5xx responses as failures",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    return parser


def build_request(args: argparse.Namespace, client: HttpClient) -> HttpRequest:
    """Create the HttpRequest described by the parsed arguments"""
    request = HttpRequest(args.endpoint, client)
    for name, value in args.headers:
        request.set_header_value(value, name)
    for name, value in args.added_headers:
        request.add_header_value(value, name)
    for key, value in args.query:
        request.set_query_parameter(value, key)
    for key, value in args.body:
        request.set_body_parameter(value, key)
    return request


def print_response(response: HttpResponse, verbose: bool = False) -> None:
    """Print status, headers and body of a response"""
    color = Colors.GREEN if response.ok else Colors.YELLOW
    print(f"  {Colors.BOLD}Status:{Colors.RESET} {color}{response.status_code}{Colors.RESET}")
    if verbose:
        print(f"  {Colors.BOLD}Headers:{Colors.RESET}")
        for name, value in response.headers.items():
            print(f"    {name}: {value}")
    print(f"  {Colors.BOLD}Body:{Colors.RESET}")
    print(response.text or "    (empty)")


def send(request: HttpRequest, method: str) -> dict[str, Any]:
    """Send the request and wait for the callback outcome"""
    outcome: dict[str, Any] = {"calls": 0, "error": None, "response": None}

    def on_complete(error, response):
        outcome["calls"] += 1
        outcome["error"] = error
        outcome["response"] = response

    if method == "GET":
        future = request.send_get(on_complete)
    else:
        future = request.send_post(on_complete)
    future.result()
    return outcome


def main(argv: list[str] | None = None):
    """Main diagnostic routine"""
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose)

    print(f"\n{Colors.BOLD}{Colors.MAGENTA}{'=' * 70}")
    print("Request Diagnostic Tool")
    print(f"{'=' * 70}{Colors.RESET}")
    print(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    with HttpClient(timeout=args.timeout) as client:
        try:
            request = build_request(args, client)
            print_info(f"{args.method} {request.endpoint}")
            outcome = send(request, args.method)
        except RequestBuildError as e:
            print_error(f"Request not sent: {e}")
            sys.exit(EXIT_NOT_SENT)

    print_header("Outcome")

    if outcome["error"] is not None:
        print_error(f"{type(outcome['error']).__name__}: {outcome['error']}")
        sys.exit(EXIT_FAILED)

    response = outcome["response"]
    print_response(response, verbose=args.verbose)

    if args.status_errors:
        status_error = status_error_for(response)
        if status_error is not None:
            print_error(str(status_error))
            print_warning(status_error.get_user_guidance())
            sys.exit(EXIT_FAILED)

    print_success("Response received")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
