"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class CanvasConfig(BaseModel):
    width: int = Field(600, gt=0)
    height: int = Field(600, gt=0)
    scale: float = 0.8
    background: str = "#f4f4f4"
    title: str = "Geometric Turtle Graphics"

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


class StrokeConfig(BaseModel):
    width: float = 2
    opacity: float = Field(0.7, ge=0, le=1)


class OutputConfig(BaseModel):
    filename: str = "turtle_art.html"


class DemoConfig(BaseModel):
    waypoints: list[tuple[float, float]] = [(10, 10), (100, 50), (200, 150)]


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    stroke: StrokeConfig = StrokeConfig()
    output: OutputConfig = OutputConfig()
    demo: DemoConfig = DemoConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/render.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/render.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
