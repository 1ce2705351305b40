# Copyright (c) 2025 The solid-demos contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the solid-demos project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/isp_demo.py
"""Interface Segregation: robots only sign up for the moves they can make.

``Walker``, ``Talker`` and ``Flyer`` are declared independently so that a
robot which can only walk is never asked to implement ``fly``. Each helper
function below asks for the one capability it actually calls.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Walker(ABC):
    @abstractmethod
    def walk(self) -> None:
        ...


class Talker(ABC):
    @abstractmethod
    def talk(self) -> None:
        ...


class Flyer(ABC):
    @abstractmethod
    def fly(self) -> None:
        ...


class WalkingRobot(Walker):
    def walk(self) -> None:
        print("WalkingRobot: clank, clank, clank across the floor.")


class SuperRobot(Walker, Talker, Flyer):
    def walk(self) -> None:
        print("SuperRobot: striding forward with hydraulic legs.")

    def talk(self) -> None:
        print("SuperRobot: Greetings, human!")

    def fly(self) -> None:
        print("SuperRobot: rockets on, lifting off!")


def go_for_a_walk(walker: Walker) -> None:
    walker.walk()


def start_conversation(talker: Talker) -> None:
    talker.talk()


def take_off(flyer: Flyer) -> None:
    flyer.fly()


def main():
    walking_robot = WalkingRobot()
    super_robot = SuperRobot()

    go_for_a_walk(walking_robot)
    go_for_a_walk(super_robot)
    start_conversation(super_robot)
    take_off(super_robot)


if __name__ == "__main__":
    main()
