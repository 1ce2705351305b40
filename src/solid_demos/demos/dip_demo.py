# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/dip_demo.py
"""Dependency Inversion: a ``Customer`` eats from whatever ``FoodProvider`` it is handed."""
from __future__ import annotations

from abc import ABC, abstractmethod


class FoodProvider(ABC):
    @abstractmethod
    def provide_food(self) -> str:
        """Return a line describing the food being served."""


class IceCreamTruck(FoodProvider):
    def provide_food(self) -> str:
        return "Some sick ice cream!"


class PizzaPlace(FoodProvider):
    def provide_food(self) -> str:
        return "A hot slice of pepperoni pizza!"


class Customer:
    def __init__(self, provider: FoodProvider):
        self.provider = provider

    def consume(self) -> None:
        print(self.provider.provide_food())


def main():
    Customer(IceCreamTruck()).consume()
    Customer(PizzaPlace()).consume()


if __name__ == "__main__":
    main()
