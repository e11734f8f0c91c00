"""Quick start example for ltp_search.

Run this script to print a few left-truncatable primes and test the installation.
"""

import time


def main():
    print("LTP Search - Quick Start Demo")
    print("=" * 50)

    from ltp_search import find_ltp, generate_ltps, is_left_truncatable
    from ltp_search.core.truncation import digit_length_counts, left_truncations

    print("\n1. First 20 left-truncatable primes...")
    print("   " + ", ".join(str(v) for v in generate_ltps(20)))

    print("\n2. Largest supported position (2166)...")
    start = time.perf_counter()
    value = find_ltp(2166)
    print(f"   {value} ({(time.perf_counter() - start) * 1000:.1f} ms)")
    print(f"   Truncations: {left_truncations(value)}")
    print(f"   Left-truncatable: {is_left_truncatable(value)}")

    print("\n3. LTPs per digit length...")
    for length, count in digit_length_counts(generate_ltps(2166)).items():
        print(f"   {length} digits: {count}")

    print("\n" + "=" * 50)
    print("Quick start complete!")


if __name__ == "__main__":
    main()
