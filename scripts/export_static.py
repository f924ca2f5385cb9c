#!/usr/bin/env python3
"""
Export the portfolio as a static site (no Streamlit server needed).

The blog post is fetched and rendered at export time; a failed fetch is baked
into the page as the blog error state rather than failing the export.

Usage:
  python scripts/export_static.py --out site/
  python scripts/export_static.py --out site/ --seed 7
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import get_config  # noqa: E402
from export import build_site  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--out", required=True, help="Output directory")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the hero background layout")
    args = ap.parse_args()

    cfg = get_config()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    index = build_site(cfg, args.out, seed=args.seed)
    print(f"Wrote: {index}")


if __name__ == "__main__":
    main()
