"""
Отображение нормированной последовательности в координаты области рисования.
Ось Y направлена вниз (как у пикселей), поэтому большие u(i) рисуются выше.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from lcg_lab.config import CANVAS_HEIGHT, CANVAS_WIDTH, PLOT_PADDING
from lcg_lab.utils.entities import Sample


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float


@dataclass(frozen=True)
class PlotRegion:
    """Прямоугольная область рисования с полями"""
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    left: float = PLOT_PADDING["left"]
    right: float = PLOT_PADDING["right"]
    top: float = PLOT_PADDING["top"]
    bottom: float = PLOT_PADDING["bottom"]

    @property
    def inner_width(self) -> float:
        return self.width - self.left - self.right

    @property
    def inner_height(self) -> float:
        return self.height - self.top - self.bottom


Segment = Tuple[Tuple[float, float], Tuple[float, float]]


def map_to_plot(samples: Sequence[Sample], region: PlotRegion = None) -> List[PlotPoint]:
    """
    Вычисление координат точек диаграммы рассеяния

    Args:
        samples: последовательность в порядке генерации
        region: область рисования

    Returns:
        Список PlotPoint той же длины и в том же порядке
    """
    region = region or PlotRegion()
    n = len(samples)
    if n == 0:
        return []

    # Деление на max(n - 1, 1): при n = 1 единственная точка стоит на левой границе
    fractions = np.arange(n) / max(n - 1, 1)
    normalized = np.array([sample.normalized for sample in samples], dtype=float)

    xs = region.left + fractions * region.inner_width
    ys = region.top + (1.0 - normalized) * region.inner_height

    return [PlotPoint(x=float(x), y=float(y)) for x, y in zip(xs, ys)]


def axes_segments(region: PlotRegion = None) -> List[Segment]:
    """
    Отрезки осей: ось X по нижнему полю, ось Y по левому

    Returns:
        [(начало, конец) оси X, (начало, конец) оси Y]
    """
    region = region or PlotRegion()
    origin = (region.left, region.height - region.bottom)
    return [
        (origin, (region.width - region.right, region.height - region.bottom)),
        (origin, (region.left, region.top)),
    ]
