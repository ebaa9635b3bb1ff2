"""
Sequential test runner.

Loads the config once, then runs each module's (name, function) table in
order. Every case gets its own ApiClient from setup_test() and the returned
teardown closes it.

A module exposes its cases through get_tests():

    def get_tests():
        instance = TestProducts()
        return [
            ("Products have unique ids", instance.test_products_have_unique_ids),
        ]

and each case takes the client as its only argument.
"""

import argparse
import sys
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from .client import ApiClient
from .config import DEFAULT_ENV_FILE, ApiConfig
from .console import Colors, log_fail, log_info, log_pass, log_section
from .errors import EnvFileError

TestCase = Tuple[str, Callable[[ApiClient], None]]
TestModule = Tuple[str, List[TestCase]]


def setup_test(config: ApiConfig):
    """Create an isolated client for one case. Returns (client, teardown)."""
    client = ApiClient(config)

    def teardown():
        client.close()

    return client, teardown


def run_test_module(module_name: str, tests: Sequence[TestCase], config: ApiConfig):
    """Run a list of tests and return (passed, failed) counts."""
    log_section(module_name)

    passed = 0
    failed = 0

    for name, test_fn in tests:
        client, teardown = setup_test(config)
        try:
            test_fn(client)
            log_pass(name)
            passed += 1
        except AssertionError as e:
            log_fail(name, str(e))
            failed += 1
        except Exception as e:
            log_fail(name, f"{type(e).__name__}: {e}")
            failed += 1
        finally:
            teardown()

    return passed, failed


def run_all(modules: Sequence[TestModule], config: ApiConfig) -> bool:
    """Run all test modules in order. Returns True when nothing failed."""
    print(f"\n🧪 {Colors.CYAN}NemLager API Tests{Colors.END}")
    print(f"   Target: {config.base_url}")
    print(f"   Timestamp: {datetime.now().isoformat()}")
    log_info(f"Credentials: {config.email}")

    total_passed = 0
    total_failed = 0

    for module_name, tests in modules:
        passed, failed = run_test_module(module_name, tests, config)
        total_passed += passed
        total_failed += failed

    # Summary
    print(f"\n{'='*60}")
    if total_failed == 0:
        print(f"{Colors.GREEN}📊 ALL TESTS PASSED: {total_passed}/{total_passed + total_failed}{Colors.END}")
    else:
        print(f"{Colors.RED}📊 RESULTS: {total_passed} passed, {total_failed} failed{Colors.END}")
    print(f"{'='*60}")

    return total_failed == 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the NemLager API integration tests")
    parser.add_argument("--env", default=DEFAULT_ENV_FILE,
                        help=f"Path to the key=value env file (default: {DEFAULT_ENV_FILE})")
    parser.add_argument("--base-url", help="Override baseUrl from the env file")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    return parser


def main(modules: Sequence[TestModule], argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = ApiConfig.load(args.env).with_overrides(base_url=args.base_url, timeout=args.timeout)
    except EnvFileError as e:
        print(f"{Colors.RED}Configuration error: {e}{Colors.END}", file=sys.stderr)
        return 2

    return 0 if run_all(modules, config) else 1
