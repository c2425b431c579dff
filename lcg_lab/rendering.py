"""
Вывод результатов: текстовая таблица и диаграмма рассеяния (matplotlib)
"""
from typing import List, Sequence, Tuple

import matplotlib

from lcg_lab.config import (AXES_COLOR, MPL_BACKEND, NORMALIZED_DECIMALS, POINT_COLOR,
                            POINT_RADIUS, RENDER_DPI)



def select_backend(name: str):
    """Переключение бэкенда matplotlib; пустое имя - бэкенд по умолчанию"""
    if name:
        matplotlib.use(name)


select_backend(MPL_BACKEND)

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from lcg_lab.plot_mapper import PlotPoint, PlotRegion, axes_segments  # noqa: E402
from lcg_lab.utils.entities import Sample  # noqa: E402


def format_labels(samples: Sequence[Sample]) -> List[Tuple[str, str]]:
    """
    Подписи строк таблицы, нумерация с 1

    Returns:
        [("X1: 8", "u1: 0.50000"), ...]
    """
    return [
        (f"X{i + 1}: {sample.raw}", f"u{i + 1}: {sample.normalized:.{NORMALIZED_DECIMALS}f}")
        for i, sample in enumerate(samples)
    ]


def samples_to_frame(samples: Sequence[Sample]) -> pd.DataFrame:
    """Таблица значений с индексом i = 1..n"""
    frame = pd.DataFrame({
        "raw": [sample.raw for sample in samples],
        "normalized": [sample.normalized for sample in samples],
    })
    frame.index = pd.RangeIndex(start=1, stop=len(samples) + 1, name="i")
    return frame


def format_table(samples: Sequence[Sample]) -> str:
    """Текст таблицы для консоли"""
    return "\n".join(f"{raw_label:<16}{u_label}" for raw_label, u_label in format_labels(samples))


class ScatterPlot:
    """
    Диаграмма рассеяния на холсте width x height пикселей.
    Координаты точек берутся из plot_mapper как есть (ось Y вниз).
    """

    def __init__(self, region: PlotRegion = None, dpi: int = RENDER_DPI):
        self.region = region or PlotRegion()
        self.dpi = dpi
        self.fig, self.ax = plt.subplots(
            figsize=(self.region.width / dpi, self.region.height / dpi), dpi=dpi
        )
        self.points: List[PlotPoint] = []
        self.clear()

    def clear(self):
        """Очистка холста и перерисовка осей"""
        self.points = []
        ax = self.ax
        ax.clear()
        self.fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        ax.set_xlim(0, self.region.width)
        ax.set_ylim(self.region.height, 0)  # ось Y вниз, как на холсте
        ax.set_axis_off()
        self.draw_axes()

    def draw_axes(self):
        for (x0, y0), (x1, y1) in axes_segments(self.region):
            self.ax.plot([x0, x1], [y0, y1], color=AXES_COLOR, linewidth=1)

    def plot(self, points: Sequence[PlotPoint]):
        """Рисование точек (холст предварительно очищается)"""
        self.clear()
        if not points:
            return

        for point in points:
            self.ax.add_patch(Circle((point.x, point.y), POINT_RADIUS, color=POINT_COLOR))
        self.points = list(points)

    def save(self, path: str):
        self.fig.savefig(path, dpi=self.dpi)

    def show(self):
        plt.show()

    def close(self):
        plt.close(self.fig)
