"""
Состояние "формы" и обработка отправки: проверка -> генерация -> координаты точек
"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from lcg_lab.config import CONFIRM_THRESHOLD, DEFAULT_FIELDS
from lcg_lab.plot_mapper import PlotPoint, PlotRegion, map_to_plot
from lcg_lab.rendering import ScatterPlot
from lcg_lab.utils.entities import GeneratorParams, LCGGenerator, Sample
from lcg_lab.utils.logger import get_logger
from lcg_lab.validation import (ConfirmCallback, DerivedFromCount, FixedModulus,
                                LCGValidationError, SeedRangeError, validate_inputs)

logger = get_logger()


@dataclass
class RunResult:
    """Результат одного запуска"""
    params: GeneratorParams
    samples: List[Sample]
    points: List[PlotPoint]


@dataclass
class LCGApp:
    """
    Модель представления: поля формы, сообщение об ошибке, таблица, точки.
    Поля формы читаются только в начале обработки; дальше работает GeneratorParams.
    """
    derive_modulus: bool = True
    confirm: Optional[ConfirmCallback] = None
    region: PlotRegion = field(default_factory=PlotRegion)
    plot: Optional[ScatterPlot] = None
    threshold: int = CONFIRM_THRESHOLD

    fields: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FIELDS))
    error_message: str = ""
    results: List[Sample] = field(default_factory=list)
    points: List[PlotPoint] = field(default_factory=list)
    modulus_echo: str = ""

    def __post_init__(self):
        if self.plot is not None:
            # Точки считаются в той же области, в которой рисуются
            self.region = self.plot.region
            self.plot.clear()

    def _clear_output(self):
        self.results = []
        self.points = []
        if self.plot is not None:
            self.plot.clear()

    def handle_submit(self, fields: Mapping[str, str] = None) -> Optional[RunResult]:
        """
        Обработка отправки формы

        Args:
            fields: новые значения полей (по умолчанию - текущие)

        Returns:
            RunResult при успехе, None при ошибке или отмене
        """
        submitted = dict(self.fields)
        if fields:
            submitted.update(fields)

        if self.derive_modulus:
            source = DerivedFromCount()
        else:
            source = FixedModulus(submitted.get("modulus", ""))

        try:
            outcome = validate_inputs(submitted, source, confirm=self.confirm, threshold=self.threshold)
        except LCGValidationError as e:
            logger.warning(f"Некорректные параметры: {e}")
            self.fields = submitted
            self.error_message = str(e)
            if isinstance(e, SeedRangeError):
                self.modulus_echo = str(e.modulus)
            self._clear_output()
            return None

        if outcome.cancelled:
            # Отмена не меняет ничего из отображаемого состояния
            return None

        self.fields = submitted
        self.error_message = ""
        self.modulus_echo = str(outcome.modulus)
        self.fields["modulus"] = self.modulus_echo

        samples = LCGGenerator(outcome.params).generate_normalized(outcome.count)
        points = map_to_plot(samples, self.region)

        self.results = samples
        self.points = points
        if self.plot is not None:
            self.plot.plot(points)

        logger.info(f"Сгенерировано {len(samples)} чисел: {outcome.params}")
        return RunResult(params=outcome.params, samples=samples, points=points)

    def handle_reset(self):
        """Возврат полей к значениям по умолчанию и очистка вывода"""
        self.fields = dict(DEFAULT_FIELDS)
        self.error_message = ""
        self.modulus_echo = ""
        self._clear_output()
