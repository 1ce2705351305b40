# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/srp_demo.py
"""Single Responsibility: one class holds the cookie, another one eats it."""
from __future__ import annotations


class Cookie:
    def __init__(self, flavor: str):
        self.flavor = flavor


class CookieDunker:
    """Acts on a cookie without owning any cookie data itself."""

    def dunk(self, cookie: Cookie) -> None:
        print(f"Dipping the {cookie.flavor} cookie into the milk and savoring that sweet taste!")


def main():
    cookie = Cookie("Chocolate Chip")
    CookieDunker().dunk(cookie)


if __name__ == "__main__":
    main()
