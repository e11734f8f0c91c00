"""Command-line interface for ltp_search."""

from __future__ import annotations

import argparse
import sys
import time

from ltp_search.errors import LtpSearchError
from ltp_search.search.config import MAX_SUPPORTED_INDEX


def cmd_find(args: argparse.Namespace) -> int:
    """Find the left-truncatable prime at a position."""
    from ltp_search.search.engine import LtpSearchEngine

    engine = LtpSearchEngine()

    start = time.perf_counter()
    result = engine.search(args.index)
    elapsed_ms = (time.perf_counter() - start) * 1000

    print(f"Time spent {elapsed_ms:.2f} ms")
    print(f"Left-truncatable prime at position {args.index} is: {result.value}")

    if args.stats:
        stats = result.stats
        print("\nSearch statistics:")
        print(f"  Orders completed:   {stats.orders_completed}")
        print(f"  Candidates tested:  {stats.candidates_tested}")
        print(f"  Primes found:       {stats.primes_found}")
        print(f"  Records stored:     {stats.records_stored}")
        print(f"  Terminal LTPs:      {stats.terminal_discarded}")
        print(f"  Peak buffer size:   {stats.peak_buffer_size}/{engine.config.capacity}")

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List the first COUNT left-truncatable primes."""
    from ltp_search.core.truncation import digit_length_counts
    from ltp_search.search.engine import generate_ltps

    values = generate_ltps(args.count)

    if args.lengths:
        print(f"{'Digits':>6} {'Count':>6}")
        for length, count in digit_length_counts(values).items():
            print(f"{length:>6} {count:>6}")
        print(f"{'Total':>6} {len(values):>6}")
        return 0

    for i, value in enumerate(values, 1):
        print(f"{i:>5} {value}")

    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Check whether a number is left-truncatable."""
    from ltp_search.core.primality import is_prime
    from ltp_search.core.truncation import is_left_truncatable, left_truncations

    if args.value < 1:
        print(f"Value must be >= 1, got {args.value}")
        return 1

    for t in left_truncations(args.value):
        print(f"  {t:>{len(str(args.value))}}  {'prime' if is_prime(t) else 'composite'}")

    if is_left_truncatable(args.value):
        print(f"{args.value} is a left-truncatable prime")
    else:
        print(f"{args.value} is not a left-truncatable prime")

    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Cross-check the Miller-Rabin tester against a sieve."""
    import numpy as np

    from ltp_search.core.primality import is_prime_array
    from ltp_search.core.sieve import sieve_mask

    if args.limit < 0:
        print(f"Limit must be >= 0, got {args.limit}")
        return 1

    print(f"Verifying primality test for 0..{args.limit}")

    expected = sieve_mask(args.limit + 1)
    actual = is_prime_array(range(args.limit + 1))
    mismatches = np.nonzero(expected != actual)[0]

    print(f"Primes found: {int(actual.sum())}")
    if len(mismatches):
        print(f"Mismatches: {len(mismatches)}")
        for n in mismatches[:20]:
            print(f"  {n}: sieve={bool(expected[n])}, miller_rabin={bool(actual[n])}")
        return 1

    print("No mismatches.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Left-truncatable prime generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    find_parser = subparsers.add_parser("find", help="Find the LTP at a position")
    find_parser.add_argument("index", type=int, help=f"Position between 1 and {MAX_SUPPORTED_INDEX}")
    find_parser.add_argument("--stats", action="store_true", help="Print search statistics")

    list_parser = subparsers.add_parser("list", help="List the first LTPs")
    list_parser.add_argument("count", type=int, help=f"How many LTPs (1 to {MAX_SUPPORTED_INDEX})")
    list_parser.add_argument("--lengths", action="store_true", help="Print counts per digit length")

    check_parser = subparsers.add_parser("check", help="Check whether a number is an LTP")
    check_parser.add_argument("value", type=int, help="Number to check")

    verify_parser = subparsers.add_parser("verify", help="Cross-check primality test against a sieve")
    verify_parser.add_argument("--limit", type=int, default=10000, help="Largest number to check")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "find": cmd_find,
        "list": cmd_list,
        "check": cmd_check,
        "verify": cmd_verify,
    }

    try:
        return commands[args.command](args)
    except LtpSearchError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
