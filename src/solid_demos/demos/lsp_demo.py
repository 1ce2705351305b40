# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/lsp_demo.py
"""Liskov Substitution: a ``Cat`` goes anywhere an ``Animal`` goes."""
from __future__ import annotations


class Animal:
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name

    def make_sound(self) -> str:
        return "Animal sound!"


class Cat(Animal):
    def make_sound(self) -> str:
        return "Meow!"


def introduce(animal: Animal) -> None:
    print(f"{animal.get_name()} says:")
    print(animal.make_sound())


def main():
    introduce(Animal("Whiskers"))
    introduce(Cat("Whiskers"))


if __name__ == "__main__":
    main()
