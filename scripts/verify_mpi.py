#!/usr/bin/env python3
"""
mpi31 verification run — known vectors plus randomized property checks.

Checks every operation against the Python int reference, writes one JSONL
record per case (RunLogger) and a manifest, and exits non-zero on failure.

Usage:
    python scripts/verify_mpi.py --output runs/verify --count 200 --bits 2048
    python scripts/verify_mpi.py --seed 7 --karatsuba-threshold 4
"""
import argparse
import random
import sys
import time
import uuid
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from mpi31 import (
    Mpi, MpiConfig, NegativeResultError,
    from_decimal, from_u64, to_u64, compare,
    add, sub, mul, mul_naive, mul_karatsuba,
    mul_pow2, div_pow2_floor, mod_pow2, divmod_qr, gcd,
)
from mpi31.limbs.reference import from_int, to_int, random_magnitude
from mpi31.logging import RunLogger, create_manifest


def _dec(text: str) -> Mpi:
    return from_decimal(Mpi(), text)


# ── Known vectors ────────────────────────────────────────────────────────

def known_vectors():
    """(name, thunk) pairs; each thunk returns True on success."""
    def mul_vector():
        r = mul(Mpi(), _dec("22876792454961"), _dec("1853020188851841"))
        return compare(r, _dec("42391158275216203514294433201")) == 0

    def divmod_vector():
        q, r = Mpi(), Mpi()
        divmod_qr(q, r, _dec("549755813889"), _dec("1234"))
        return to_int(q) == 445507142 and to_int(r) == 661

    def gcd_vector():
        return to_int(gcd(Mpi(), _dec("2310"), _dec("46189"))) == 11

    def shift_vectors():
        s = _dec("42391158275216203514294433201")
        return (
            compare(div_pow2_floor(Mpi(), s, 31), _dec("19739921332903301117")) == 0
            and compare(mod_pow2(Mpi(), s, 31), _dec("316798385")) == 0
            and compare(mul_pow2(Mpi(), _dec("3"), 32), _dec("12884901888")) == 0
        )

    def underflow_vector():
        try:
            sub(Mpi(), _dec("0"), _dec("1"))
        except NegativeResultError:
            return True
        return False

    return [
        ("mul_vector", mul_vector),
        ("divmod_vector", divmod_vector),
        ("gcd_vector", gcd_vector),
        ("shift_vectors", shift_vectors),
        ("underflow_vector", underflow_vector),
    ]


# ── Randomized properties ────────────────────────────────────────────────

def random_case(rng: random.Random, bits: int, config: MpiConfig):
    """One randomized round over every operation; returns list of (name, ok)."""
    a = random_magnitude(rng, rng.randint(1, bits))
    b = random_magnitude(rng, rng.randint(1, bits))
    hi, lo = max(a, b), min(a, b)
    shift = rng.randint(0, bits)
    A, B = from_int(a), from_int(b)

    checks = []
    checks.append(("add", to_int(add(Mpi(), A, B)) == a + b))
    checks.append(("sub", to_int(sub(Mpi(), from_int(hi), from_int(lo))) == hi - lo))
    checks.append(("mul", to_int(mul(Mpi(), A, B, config)) == a * b))
    checks.append(("mul_naive_vs_karatsuba", compare(
        mul_naive(Mpi(), A, B), mul_karatsuba(Mpi(), A, B, config)) == 0))
    checks.append(("shift_split", to_int(div_pow2_floor(Mpi(), A, shift)) == a >> shift
                   and to_int(mod_pow2(Mpi(), A, shift)) == a & ((1 << shift) - 1)
                   and to_int(mul_pow2(Mpi(), A, shift)) == a << shift))
    if lo:
        q, r = Mpi(), Mpi()
        divmod_qr(q, r, from_int(hi), from_int(lo))
        checks.append(("divmod", (to_int(q), to_int(r)) == divmod(hi, lo)))
    u = a & ((1 << 64) - 1)
    checks.append(("u64_roundtrip", to_u64(from_u64(Mpi(), u)) == u))
    return checks


def main():
    parser = argparse.ArgumentParser(description="mpi31 verification run")
    parser.add_argument("--output", type=str, default="runs/verify",
                        help="Directory for manifest.json / *.jsonl")
    parser.add_argument("--count", type=int, default=100,
                        help="Randomized rounds")
    parser.add_argument("--bits", type=int, default=1024,
                        help="Max operand size in bits")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--karatsuba-threshold", type=int, default=None)
    parser.add_argument("--failures-only", action="store_true",
                        help="Only log failing cases to results.jsonl")
    args = parser.parse_args()

    env_config = MpiConfig.from_env()
    config = MpiConfig(
        karatsuba_threshold=(args.karatsuba_threshold
                             if args.karatsuba_threshold is not None
                             else env_config.karatsuba_threshold),
        karatsuba_max_depth=env_config.karatsuba_max_depth,
    )
    run_config = dict(config.to_dict(), count=args.count, bits=args.bits,
                      seed=args.seed)

    out_dir = Path(args.output)
    manifest = create_manifest(uuid.uuid4().hex[:12], run_config)
    manifest.save(out_dir / "manifest.json")

    print(f"mpi31 verify: count={args.count} bits={args.bits} seed={args.seed} "
          f"karatsuba_threshold={config.karatsuba_threshold}")
    print(f"Output: {out_dir}")
    print(f"{'='*72}")

    n_fail = 0
    t_global = time.time()
    with RunLogger(out_dir, failures_only=args.failures_only) as logger:
        for name, thunk in known_vectors():
            t0 = time.time()
            ok = bool(thunk())
            n_fail += not ok
            logger.log_result({"case": name, "kind": "vector", "passed": ok,
                               "elapsed": time.time() - t0})
            print(f"  {'PASS' if ok else 'FAIL'}  {name}")

        rng = random.Random(args.seed)
        per_op = {}
        for i in range(args.count):
            t0 = time.time()
            for name, ok in random_case(rng, args.bits, config):
                stats = per_op.setdefault(name, [0, 0])
                stats[0] += 1
                stats[1] += not ok
                n_fail += not ok
                if not ok:
                    logger.log_result({"case": name, "kind": "random",
                                       "round": i, "passed": False})
            logger.log_metrics({"round": i, "elapsed": time.time() - t0})

        for name, (total, failed) in sorted(per_op.items()):
            logger.log_result({"case": name, "kind": "random_summary",
                               "rounds": total, "failed": failed,
                               "passed": failed == 0})
            print(f"  {'PASS' if failed == 0 else 'FAIL'}  {name:<24} "
                  f"{total - failed}/{total}")

        logger.log_metrics({"total_elapsed": time.time() - t_global,
                            "failures": n_fail})

    print(f"{'='*72}")
    print(f"  Failures: {n_fail}")
    print(f"  Time:     {time.time() - t_global:.1f}s")
    print(f"{'='*72}")
    return 1 if n_fail else 0


if __name__ == "__main__":
    sys.exit(main())
