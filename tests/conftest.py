"""Shared test fixtures."""

import pytest

from turtlesoup.config import Config
from turtlesoup.turtle import Point, SimpleTurtle


@pytest.fixture
def turtle():
    return SimpleTurtle()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def square_path():
    t = SimpleTurtle()
    for _ in range(4):
        t.forward(10)
        t.turn(90)
    return t.get_path()


@pytest.fixture
def waypoints():
    return [Point(10, 10), Point(100, 50), Point(200, 150)]
