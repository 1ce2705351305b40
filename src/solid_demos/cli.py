# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/solid_demos/cli.py
from __future__ import annotations

import argparse
import sys

from solid_demos.runner.run_from_config import DEMO_ORDER, run, run_many


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--banner", action="store_true", help="Print a header before each demo")


def cmd_srp(args: argparse.Namespace) -> None:
    run("srp", banner=args.banner)


def cmd_ocp(args: argparse.Namespace) -> None:
    run("ocp", banner=args.banner)


def cmd_lsp(args: argparse.Namespace) -> None:
    run("lsp", banner=args.banner)


def cmd_isp(args: argparse.Namespace) -> None:
    run("isp", banner=args.banner)


def cmd_dip(args: argparse.Namespace) -> None:
    run("dip", banner=args.banner)


def cmd_all(args: argparse.Namespace) -> None:
    run_many(DEMO_ORDER, banner=args.banner)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="solid-demos", description="Run SOLID principle demos")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("srp", help="Single Responsibility (cookies)")
    _add_common(sp)
    sp.set_defaults(func=cmd_srp)

    sp = sub.add_parser("ocp", help="Open/Closed (performers)")
    _add_common(sp)
    sp.set_defaults(func=cmd_ocp)

    sp = sub.add_parser("lsp", help="Liskov Substitution (animals)")
    _add_common(sp)
    sp.set_defaults(func=cmd_lsp)

    sp = sub.add_parser("isp", help="Interface Segregation (robots)")
    _add_common(sp)
    sp.set_defaults(func=cmd_isp)

    sp = sub.add_parser("dip", help="Dependency Inversion (food vendors)")
    _add_common(sp)
    sp.set_defaults(func=cmd_dip)

    sp = sub.add_parser("all", help="Run every demo in order")
    _add_common(sp)
    sp.set_defaults(func=cmd_all)

    args = p.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
