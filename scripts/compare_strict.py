#!/usr/bin/env python
"""Compare strict UTF-8 validation against Python's own ``utf-8`` codec.

Feeds random byte strings (biased towards near-valid UTF-8) and every file
given on the command line through both, and reports any input where the
two disagree on validity or on the length of the valid prefix.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from charwalk import ValidationStatus, validate

# ---------------------------------------------------------------------------
# Sample generation
# ---------------------------------------------------------------------------

_INTERESTING = bytes(
    [0x00, 0x41, 0x7F, 0x80, 0x8F, 0x90, 0x9F, 0xA0, 0xBF, 0xC0, 0xC1, 0xC2]
    + [0xDF, 0xE0, 0xED, 0xEF, 0xF0, 0xF4, 0xF5, 0xF7, 0xF8, 0xFC, 0xFE, 0xFF]
)


def _random_sample(rng: random.Random) -> bytes:
    if rng.random() < 0.5:
        codepoints = (0x41, 0xE9, 0x20AC, 0x10348)
        text = "".join(chr(rng.choice(codepoints)) for _ in range(8))
        data = bytearray(text.encode())
        if data and rng.random() < 0.7:
            data[rng.randrange(len(data))] = rng.choice(_INTERESTING)
        return bytes(data)
    return bytes(rng.choice(_INTERESTING) for _ in range(rng.randint(0, 6)))


# ---------------------------------------------------------------------------
# Reference
# ---------------------------------------------------------------------------


def reference(data: bytes) -> tuple[ValidationStatus, int]:
    try:
        data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as e:
        # The codec reports "unexpected end of data" for a truncated tail.
        if e.reason == "unexpected end of data":
            return ValidationStatus.INCOMPLETE, e.start
        return ValidationStatus.INVALID, e.start
    return ValidationStatus.VALID, len(data)


def run_comparison(samples: list[tuple[str, bytes]]) -> int:
    mismatches = 0
    for label, data in samples:
        ours = validate(data, strict=True)
        expected = reference(data)
        if (ours.status, ours.offset) != expected:
            mismatches += 1
            print(
                f"  {label}: {data!r}: charwalk={ours.status.value}@{ours.offset}"
                f" codec={expected[0].value}@{expected[1]}"
            )
    print(f"{len(samples)} samples, {mismatches} mismatches")
    return mismatches


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("files", nargs="*", type=Path, help="Extra files to check")
    parser.add_argument(
        "-n", "--count", type=int, default=20_000, help="Random samples to generate"
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    samples = [(f"random-{i}", _random_sample(rng)) for i in range(args.count)]
    samples.extend((str(fp), fp.read_bytes()) for fp in args.files)

    if run_comparison(samples):
        sys.exit(1)


if __name__ == "__main__":
    main()
