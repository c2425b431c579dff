"""
Разбор и проверка параметров генератора, вычисление модуля

Порядок проверок (каждая ошибка прерывает разбор):
1. все используемые поля - десятичные целые без дробной части  -> ParseError
2. count >= 1                                                  -> RangeError
3. seed, multiplier, increment >= 0; для фиксированного модуля m > 1 -> RangeError
4. определение модуля (фиксированный или next_pow2(count))
5. 0 <= seed < m                                               -> SeedRangeError
6. при count > CONFIRM_THRESHOLD - запрос подтверждения (отказ не является ошибкой)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Union

from lcg_lab.config import CONFIRM_THRESHOLD
from lcg_lab.utils.entities import GeneratorParams
from lcg_lab.utils.logger import get_logger

logger = get_logger()

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class LCGValidationError(ValueError):
    """Базовая ошибка проверки входных данных"""


class ParseError(LCGValidationError):
    """Поле не является целым числом"""

    def __init__(self, field: str, value: str):
        super().__init__("all parameters must be integers without decimals")
        self.field = field
        self.value = value


class RangeError(LCGValidationError):
    """Значение вне допустимого диапазона"""


class SeedRangeError(RangeError):
    """Начальное значение не лежит в [0, m)"""

    def __init__(self, seed: int, modulus: int):
        super().__init__(f"seed must satisfy 0 <= seed < modulus (modulus={modulus})")
        self.seed = seed
        self.modulus = modulus


class Decision(Enum):
    """Ответ пользователя на запрос подтверждения"""
    PROCEED = "proceed"
    CANCEL = "cancel"


@dataclass(frozen=True)
class FixedModulus:
    """Модуль задаётся пользователем (текстовое поле формы)"""
    value: str


@dataclass(frozen=True)
class DerivedFromCount:
    """Модуль вычисляется как next_pow2(count), поле формы игнорируется"""


ModulusSource = Union[FixedModulus, DerivedFromCount]

ConfirmCallback = Callable[[int], Decision]


@dataclass(frozen=True)
class ValidationOutcome:
    """Результат проверки: параметры для запуска или отказ пользователя"""
    decision: Decision
    count: int
    modulus: int  # значение для отображения в поле "модуль"
    params: Optional[GeneratorParams] = None

    @property
    def cancelled(self) -> bool:
        return self.decision is Decision.CANCEL


def next_pow2(n: int) -> int:
    """
    Наименьшая степень двойки, не меньшая n (но не меньше 2)

    Args:
        n: требуемое количество чисел

    Returns:
        2^ceil(log2(max(n, 1))), но не меньше 2
    """
    if n <= 2:
        return 2
    return 1 << (n - 1).bit_length()


def parse_integer(field: str, value: str) -> int:
    """Разбор десятичного целого без дробной части"""
    text = (value or "").strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(field, value)
    try:
        return int(text)
    except ValueError:
        # Превышен лимит длины строки для int (sys.get_int_max_str_digits)
        raise ParseError(field, value) from None


def resolve_modulus(source: ModulusSource, count: int) -> int:
    """Определение модуля по выбранному источнику"""
    if isinstance(source, FixedModulus):
        modulus = parse_integer("modulus", source.value)
        if modulus <= 1:
            raise RangeError("modulus must be an integer greater than 1")
        return modulus
    return next_pow2(count)


def validate_inputs(fields: Mapping[str, str],
                    modulus_source: ModulusSource = None,
                    confirm: Optional[ConfirmCallback] = None,
                    threshold: int = CONFIRM_THRESHOLD) -> ValidationOutcome:
    """
    Проверка текстовых полей формы и построение GeneratorParams

    Args:
        fields: словарь с ключами seed, multiplier, increment, count
        modulus_source: FixedModulus (с текстом поля modulus) или DerivedFromCount (по умолчанию)
        confirm: функция подтверждения, вызывается только при count > threshold;
                 если не задана, генерация продолжается
        threshold: порог для запроса подтверждения

    Returns:
        ValidationOutcome с параметрами или с решением CANCEL

    Raises:
        ParseError, RangeError, SeedRangeError
    """
    if modulus_source is None:
        modulus_source = DerivedFromCount()

    # 1. Все используемые поля должны быть целыми
    names = ("seed", "multiplier", "increment", "count")
    parsed: Dict[str, int] = {name: parse_integer(name, fields.get(name, "")) for name in names}
    if isinstance(modulus_source, FixedModulus):
        parse_integer("modulus", modulus_source.value)

    seed = parsed["seed"]
    count = parsed["count"]

    # 2. Количество
    if count < 1:
        raise RangeError("count must be greater than 0")

    # 3. Неотрицательность
    for name in ("seed", "multiplier", "increment"):
        if parsed[name] < 0:
            raise RangeError(f"{name} must be non-negative")

    # 4. Модуль
    modulus = resolve_modulus(modulus_source, count)

    # 5. Диапазон начального значения
    if seed >= modulus:
        raise SeedRangeError(seed, modulus)

    # 6. Мягкое ограничение на количество
    if count > threshold and confirm is not None:
        decision = confirm(count)
        if decision is Decision.CANCEL:
            logger.info(f"Генерация {count} чисел отменена пользователем")
            return ValidationOutcome(decision=Decision.CANCEL, count=count, modulus=modulus)

    params = GeneratorParams(
        multiplier=parsed["multiplier"],
        increment=parsed["increment"],
        modulus=modulus,
        seed=seed,
    )
    logger.debug(f"Параметры проверены: {params}, count={count}")
    return ValidationOutcome(decision=Decision.PROCEED, count=count, modulus=modulus, params=params)
