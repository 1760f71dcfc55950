#!/usr/bin/env python3
"""
Build hexagon layers for a region and write them to disk.

Usage:

    python -m windscout.cli --region germany --out out/germany
    python -m windscout.cli --region us --synthetic --seed 7 --format parquet --out out/us

Writes per resolution ``hex_r{res}.geojson`` (or ``.ndjson`` / ``.parquet``),
plus ``turbines.geojson`` and ``summary.json``.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

from .config import DEFAULT_REGION, H3_MAX_RESOLUTION, H3_RESOLUTIONS, REGIONS, get_region
from .hexagons.materialize import hex_map_to_geodataframe
from .hexagons.validation import validate_hex_output
from .pipeline import RegionLayers, build_region_layers

FORMATS = ("geojson", "ndjson", "parquet")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Build H3 wind turbine density layers for a region.")
    ap.add_argument("--region", default=DEFAULT_REGION, help=f"Region id (default: {DEFAULT_REGION}).")
    ap.add_argument("--out", help="Output directory.")
    ap.add_argument("--synthetic", action="store_true", help="Skip real data and synthesize turbines.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for synthetic data.")
    ap.add_argument(
        "--resolutions",
        type=int,
        nargs="+",
        default=list(H3_RESOLUTIONS),
        help="H3 resolutions to aggregate at (default: 3 4 5 6).",
    )
    ap.add_argument("--format", choices=FORMATS, default="geojson", help="Hexagon output format.")
    ap.add_argument("--list-regions", action="store_true", help="Print known regions and exit.")
    ap.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return ap


def _write_json(path: str, payload) -> None:
    with open(path, "w") as out:
        json.dump(payload, out, separators=(",", ":"))


def write_layers(build: RegionLayers, output_dir: str, fmt: str = "geojson") -> None:
    os.makedirs(output_dir, exist_ok=True)

    for res in build.resolutions:
        path = os.path.join(output_dir, f"hex_r{res}.{fmt}")
        if fmt == "geojson":
            _write_json(path, build.hexagons[res])
        elif fmt == "ndjson":
            with open(path, "w") as out:
                for feat in build.hexagons[res]["features"]:
                    out.write(json.dumps(feat, separators=(",", ":")) + "\n")
        elif fmt == "parquet":
            gdf = hex_map_to_geodataframe(build.hex_maps[res], res)
            validate_hex_output(gdf)
            gdf.to_parquet(path, index=False)
        else:
            raise ValueError(f"Unsupported format '{fmt}'")
        print(f"[ok] res={res}: wrote {len(build.hex_maps[res])} cells to {path}")

    _write_json(os.path.join(output_dir, "turbines.geojson"), build.turbine_geojson())
    with open(os.path.join(output_dir, "summary.json"), "w") as out:
        json.dump(build.summary(), out, indent=2, ensure_ascii=False)
    print(f"[ok] {build.stats.count} turbines, {build.stats.total_mw} MW ({build.source})")


def run_cli(args: argparse.Namespace) -> int:
    if args.list_regions:
        for region in REGIONS:
            real = "real" if region.has_real_data else "synthetic"
            print(f"{region.id:10s} {region.name} ({real})")
        return 0

    if not args.out:
        print("[error] --out is required")
        return 1

    try:
        region = get_region(args.region)
    except ValueError as exc:
        print(f"[error] {exc}")
        return 1

    bad = [res for res in args.resolutions if not 0 <= res <= H3_MAX_RESOLUTION]
    if bad:
        print(f"[error] Invalid H3 resolution(s) {bad}; expected 0..{H3_MAX_RESOLUTION}")
        return 1

    try:
        build = build_region_layers(
            region,
            use_real_data=not args.synthetic,
            resolutions=args.resolutions,
            seed=args.seed,
        )
        write_layers(build, args.out, args.format)
    except KeyboardInterrupt:
        print("\n[cli] Interrupted.")
        return 130  # 128 + SIGINT
    except Exception as e:
        print(f"[cli] Fatal error: {e}")
        return 2

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO))
    return run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
