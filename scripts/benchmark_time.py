#!/usr/bin/env python
"""Time charwalk's validators and splitters on synthetic text.

Timings use ``time.perf_counter()`` only.  With ``--json-only`` one JSON
object per measurement is printed instead of the human-readable table.
"""

from __future__ import annotations

import argparse
import json
import statistics
import time

from charwalk import Charset, get_charset

_SAMPLES: dict[Charset, bytes] = {
    Charset.RAW: bytes(range(256)) * 64,
    Charset.ASCII: b"Hello world, this is a plain ASCII text.\n" * 400,
    Charset.PRINTABLE_ASCII: b"Hello world, this is a plain ASCII text. " * 400,
    Charset.UTF_8: "Héllo wörld café résumé naïve €𝍈 ".encode() * 400,
}


def _time(func, data: bytes, repeat: int) -> list[float]:
    times = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        func(data)
        times.append(time.perf_counter() - t0)
    return times


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark charwalk operations (timing only).",
    )
    parser.add_argument(
        "--repeat", type=int, default=50, help="Runs per measurement (default: 50)"
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output",
    )
    args = parser.parse_args()

    if not args.json_only:
        print(
            f"{'charset':<18} {'operation':<12} {'bytes':>8}"
            f" {'median':>10} {'MB/s':>8}"
        )
    for charset, data in _SAMPLES.items():
        ops = get_charset(charset)
        for name, func in (
            ("validate", ops.validate),
            ("split_int", ops.split_int),
            ("split_char", ops.split_char),
        ):
            times = _time(func, data, args.repeat)
            median = statistics.median(times)
            if args.json_only:
                print(
                    json.dumps(
                        {
                            "charset": charset.value,
                            "operation": name,
                            "bytes": len(data),
                            "median": median,
                        }
                    )
                )
            else:
                rate = len(data) / median / 1e6 if median else 0.0
                print(
                    f"{charset.value:<18} {name:<12} {len(data):>8}"
                    f" {median * 1000:>8.2f}ms {rate:>8.1f}"
                )


if __name__ == "__main__":
    main()
