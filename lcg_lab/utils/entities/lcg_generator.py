"""
Линейный конгруэнтный генератор (LCG) для визуализации решётчатой структуры

Рекуррентное соотношение:
X(n+1) = (a * X(n) + c) mod m

где:
- a - множитель (multiplier)
- c - приращение (increment)
- m - модуль (modulus)
- X(0) - начальное значение (seed)

Начальное значение в выходную последовательность не попадает:
первым выдаётся X(1). Нормированное значение u(n) = X(n) / m лежит в [0, 1).

Арифметика ведётся на int Python (произвольная точность), поэтому
ограничений на величину параметров из-за переполнения нет.
"""

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class GeneratorParams:
    """Неизменяемый набор параметров одного запуска генератора"""
    multiplier: int
    increment: int
    modulus: int
    seed: int


@dataclass(frozen=True)
class Sample:
    """Одно значение последовательности: сырое и нормированное"""
    raw: int
    normalized: float


class LCGGenerator:
    """
    Генератор псевдослучайных чисел на основе смешанного линейного конгруэнтного метода
    """

    def __init__(self, params: GeneratorParams):
        """
        Инициализация генератора

        Args:
            params: проверенные параметры (см. lcg_lab.validation)
        """
        self.params = params
        self.a = params.multiplier
        self.c = params.increment
        self.m = params.modulus
        self.current = params.seed

    def next_int(self) -> int:
        """
        Генерация следующего целого числа

        Returns:
            Следующее псевдослучайное целое число из [0, m)
        """
        self.current = (self.a * self.current + self.c) % self.m
        return self.current

    def next_float(self) -> float:
        """Генерация следующего числа в диапазоне [0, 1)"""
        return self.next_int() / self.m

    def generate(self, count: int) -> List[int]:
        """
        Генерация последовательности целых чисел, начиная с начального значения

        Состояние генератора сбрасывается перед генерацией, поэтому
        повторный вызов с тем же count даёт ту же последовательность.

        Args:
            count: количество чисел для генерации

        Returns:
            Список из count псевдослучайных целых чисел
        """
        self.reset()
        return [self.next_int() for _ in range(count)]

    def generate_normalized(self, count: int) -> List[Sample]:
        """
        Генерация последовательности пар (сырое значение, нормированное значение)

        Args:
            count: количество чисел для генерации

        Returns:
            Список Sample в порядке генерации
        """
        return [Sample(raw=value, normalized=value / self.m) for value in self.generate(count)]

    def reset(self):
        """Сброс генератора к начальному состоянию"""
        self.current = self.params.seed

    def get_period(self, max_iterations: int = None) -> int:
        """
        Определение периода генератора

        Args:
            max_iterations: максимальное количество итераций для поиска периода

        Returns:
            Период генератора (или -1 если не найден в пределах max_iterations)
        """
        if max_iterations is None:
            max_iterations = min(self.m + 1, 10**6)  # Ограничиваем поиск

        self.reset()

        # Значение -> индекс первого появления
        first_seen = {}

        for i in range(max_iterations):
            value = self.next_int()
            if value in first_seen:
                self.reset()
                return i - first_seen[value]
            first_seen[value] = i

        self.reset()
        return -1  # Период не найден в пределах max_iterations

    def __iter__(self) -> Iterator[int]:
        """Итератор для генерации бесконечной последовательности"""
        while True:
            yield self.next_int()

    def __str__(self) -> str:
        return f"LCGGenerator(a={self.a}, c={self.c}, m={self.m}, seed={self.params.seed})"
