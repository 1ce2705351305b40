# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/ocp_demo.py
"""Open/Closed: new performers join the show without touching ``start_show``."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class Performer(ABC):
    @abstractmethod
    def play(self) -> None:
        ...


class Guitarist(Performer):
    def _tune_strings(self) -> None:
        print("Tuning the guitar strings...")

    def play(self) -> None:
        self._tune_strings()
        print("Shredding a face-melting guitar solo!")


class Drummer(Performer):
    def _take_a_bow(self) -> None:
        print("Taking a bow behind the drum kit.")

    def play(self) -> None:
        print("Pounding out a thunderous drum beat!")
        self._take_a_bow()


def start_show(performers: Iterable[Performer]) -> None:
    for performer in performers:
        performer.play()


def main():
    start_show([Guitarist(), Drummer()])


if __name__ == "__main__":
    main()
