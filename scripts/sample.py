#!/usr/bin/env python3
"""
Sample a random array and print it.

Usage:
    python scripts/sample.py --shape 2 3
    python scripts/sample.py --config configs/default.yaml --dist randn --shape 4 4
    python scripts/sample.py --shape 3 3 --order shuffled --verbose
"""

import argparse
import itertools
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from randarray.config.load import load_config
from randarray.core.exceptions import RandArrayError
from randarray.random import configure, rand, randint, randn, set_seed


def parse_args():
    parser = argparse.ArgumentParser(description="Print a lazily generated random array")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--shape", type=int, nargs="+", required=True, help="Array extents")
    parser.add_argument("--dist", choices=("rand", "randint", "randn"), default="rand")
    parser.add_argument("--low", type=float, default=None, help="Lower bound / mean")
    parser.add_argument("--high", type=float, default=None, help="Upper bound / std dev")
    parser.add_argument("--seed", type=int, default=None, help="Override random seed")
    parser.add_argument("--order", choices=("row-major", "shuffled"), default="row-major",
                        help="Element read order; the printed array is the same either way")
    parser.add_argument("--verbose", action="store_true", help="Log rewinds and replays")
    return parser.parse_args()


def build_array(args):
    if args.dist == "rand":
        return rand(args.shape, 0.0 if args.low is None else args.low,
                    1.0 if args.high is None else args.high)
    if args.dist == "randint":
        return randint(args.shape, 0 if args.low is None else int(args.low),
                       100 if args.high is None else int(args.high))
    return randn(args.shape, 0.0 if args.low is None else args.low,
                 1.0 if args.high is None else args.high)


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    try:
        if args.config:
            configure(load_config(args.config))
        if args.seed is not None:
            set_seed(args.seed)
        arr = build_array(args)
    except RandArrayError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    indices = list(itertools.product(*(range(e) for e in arr.shape)))
    if args.order == "shuffled":
        np.random.default_rng().shuffle(indices)
    
    out = np.empty(arr.shape, dtype=arr.dtype)
    for idx in indices:
        out[idx] = arr[idx]
    
    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
