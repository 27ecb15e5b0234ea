"""Quick start example for int_kernel.

Run this script to walk through the kernel at each integer width and test
the installation.
"""

import time


def main():
    print("int_kernel - Quick Start Demo")
    print("=" * 50)

    print("\n1. Modular arithmetic at 64 bits...")
    from int_kernel import INT64, mod_divide, mod_inverse, mod_multiply, mod_pow, mods

    big_modulus = INT64.max_value - 24
    print(f"   mods(5, 7) = {mods(5, 7)}")
    print(f"   mod_inverse(8, 11) = {mod_inverse(8, 11)}")
    print(f"   mod_pow(3, -1, 1000003) = {mod_pow(3, -1, 1000003)}")
    print(f"   mod_multiply(MAX - 1, MAX - 1, {big_modulus}) = "
          f"{mod_multiply(INT64.max_value - 1, INT64.max_value - 1, big_modulus)}")
    division = mod_divide(5, 10, 15)
    print(f"   10x = 5 (mod 15): {division} -> {list(division.solutions())}")

    print("\n2. Integer roots and perfect powers...")
    from int_kernel import BIG, get_base_of_perfect_square, get_perfect_power, icbrt, iroot

    print(f"   icbrt(-26) = {icbrt(-26)}")
    print(f"   iroot(MIN, 3) = {iroot(INT64.min_value, 3)}")
    print(f"   iroot(10**40, 4, big) = {iroot(10**40, 4, width=BIG)}")
    print(f"   get_base_of_perfect_square(625) = {get_base_of_perfect_square(625)}")
    for n in (64, -64, 43046721, 10**12):
        print(f"   get_perfect_power({n}) = {get_perfect_power(n)}")

    print("\n3. Primality at every width...")
    from int_kernel import INT32, is_prime, passes_baillie_psw

    samples = [
        (2147483647, INT32),
        (9223372036854775783, INT64),
        (2**89 - 1, BIG),
        (2**64 + 1, BIG),
        (2**128 - 159, BIG),
    ]
    for n, width in samples:
        start = time.perf_counter()
        prime = is_prime(n, width=width)
        elapsed = time.perf_counter() - start
        print(f"   is_prime({n}, {width.name}) = {prime} ({elapsed * 1000:.2f} ms)")
    print(f"   passes_baillie_psw(3215031751) = {passes_baillie_psw(3215031751)}")

    print("\n4. Prime sequences...")
    from int_kernel import PrimeSequence, next_prime

    print(f"   First 10: {list(PrimeSequence.first(10))}")
    print(f"   Up to 50: {PrimeSequence.up_to(50).to_array().tolist()}")
    print(f"   next_prime(2**63 - 24, big) = {next_prime(2**63 - 24, width=BIG)}")

    start = time.perf_counter()
    primes = PrimeSequence.up_to(100_000).to_array()
    elapsed = time.perf_counter() - start
    print(f"   Generated {len(primes):,} primes up to 100k in {elapsed:.3f}s")
    print(f"   Last 5: {primes[-5:].tolist()}")

    print("\n" + "=" * 50)
    print("Demo complete.")


if __name__ == "__main__":
    main()
