# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/solid_demos/runner/run_from_config.py
from __future__ import annotations
import argparse, sys, yaml

DEMO_ORDER = ["srp", "ocp", "lsp", "isp", "dip"]


def run(demo: str, banner: bool = False):
    if banner:
        print(f"=== {demo.upper()} ===")
    if demo == "srp":
        from solid_demos.demos.srp_demo import main as fn
        return fn()
    if demo == "ocp":
        from solid_demos.demos.ocp_demo import main as fn
        return fn()
    if demo == "lsp":
        from solid_demos.demos.lsp_demo import main as fn
        return fn()
    if demo == "isp":
        from solid_demos.demos.isp_demo import main as fn
        return fn()
    if demo == "dip":
        from solid_demos.demos.dip_demo import main as fn
        return fn()
    raise SystemExit(f"Unknown demo: {demo}")


def run_many(demos: list[str], banner: bool = False):
    for demo in demos:
        run(demo, banner=banner)


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run SOLID demos listed in a YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)

    with open(args.config, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}
    if not isinstance(cfg, dict):
        raise SystemExit(f"Config must be a mapping, got {type(cfg).__name__}")

    demos = cfg.get("demos", DEMO_ORDER)
    if not isinstance(demos, list):
        raise SystemExit(f"'demos' must be a list, got {type(demos).__name__}")
    # nothing runs unless every entry names a known demo
    unknown = [d for d in demos if not isinstance(d, str) or d not in DEMO_ORDER]
    if unknown:
        raise SystemExit(f"Unknown demo(s) in config: {', '.join(map(str, unknown))}")
    run_many(demos, banner=bool(cfg.get("banner", False)))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
