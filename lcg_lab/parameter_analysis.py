"""
Анализ параметров линейного конгруэнтного генератора

Условия Халла - Добелла для максимального периода m (c != 0):
   - gcd(c, m) = 1
   - a ≡ 1 (mod p) для всех простых делителей p числа m
   - a ≡ 1 (mod 4) если m ≡ 0 (mod 4)

Для модуля-степени двойки (m = next_pow2(count)) единственный простой делитель - 2,
поэтому полный период получается при нечётном c и a ≡ 1 (mod 4).
"""

import math
from typing import Any, Dict, List, Sequence

import numpy as np
from scipy import stats

from lcg_lab.utils.entities import GeneratorParams, LCGGenerator, Sample


def get_prime_factors(n: int) -> List[int]:
    """Получение списка простых делителей числа"""
    factors = []
    d = 2
    while d * d <= n:
        while n % d == 0:
            if d not in factors:
                factors.append(d)
            n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


def check_hull_conditions(a: int, c: int, m: int) -> Dict[str, Any]:
    """
    Проверка условий Халла для максимального периода

    Returns:
        Словарь с результатами проверки каждого условия
    """
    results = {}

    # Условие 1: gcd(c, m) = 1
    results['gcd_c_m'] = math.gcd(c, m) == 1

    # Условие 2: a ≡ 1 (mod p) для всех простых делителей p числа m
    prime_factors = get_prime_factors(m)
    results['prime_factors_condition'] = all((a - 1) % p == 0 for p in prime_factors)
    results['prime_factors'] = prime_factors

    # Условие 3: a ≡ 1 (mod 4) если m ≡ 0 (mod 4)
    if m % 4 == 0:
        results['mod4_condition'] = (a - 1) % 4 == 0
    else:
        results['mod4_condition'] = True  # Условие не применимо

    results['all_conditions_met'] = (
        results['gcd_c_m'] and
        results['prime_factors_condition'] and
        results['mod4_condition']
    )

    return results


def measure_actual_period(params: GeneratorParams, max_iterations: int = None) -> int:
    """
    Измерение фактического периода генератора

    Returns:
        Фактический период или -1 если не найден
    """
    if max_iterations is None:
        max_iterations = min(params.modulus * 2, 100000)

    return LCGGenerator(params).get_period(max_iterations)


def chi2_uniformity(samples: Sequence[Sample], bins: int = None, alpha: float = 0.05) -> Dict[str, Any]:
    """
    Проверка равномерности нормированных значений на [0, 1) критерием хи-квадрат

    Args:
        samples: последовательность генератора
        bins: число интервалов (по умолчанию - правило Стёрджеса)
        alpha: уровень значимости

    Returns:
        Словарь со статистикой, p-значением и выводом
    """
    values = np.array([sample.normalized for sample in samples], dtype=float)
    if len(values) < 2:
        return {'is_uniform': False, 'chi2': 0.0, 'p_value': 0.0, 'bins': 0,
                'reason': 'Недостаточно данных'}

    if bins is None:
        bins = max(2, int(1 + 3.322 * math.log10(len(values))))

    observed, _ = np.histogram(values, bins=bins, range=(0.0, 1.0))
    expected = np.full(bins, len(values) / bins)

    chi2, p_value = stats.chisquare(observed, expected)

    return {
        'is_uniform': bool(p_value > alpha),
        'chi2': float(chi2),
        'p_value': float(p_value),
        'bins': bins,
        'observed': observed.tolist(),
    }


def analyze_parameters(params: GeneratorParams, samples: Sequence[Sample]) -> Dict[str, Any]:
    """Сводка по параметрам запуска: условия Халла, период, равномерность"""
    return {
        'hull': check_hull_conditions(params.multiplier, params.increment, params.modulus),
        'period': measure_actual_period(params),
        'uniformity': chi2_uniformity(samples),
    }


def format_analysis(params: GeneratorParams, analysis: Dict[str, Any]) -> str:
    """Текстовый отчёт по результату analyze_parameters"""
    hull = analysis['hull']
    uniformity = analysis['uniformity']
    period = analysis['period']

    lines = [
        f"Параметры: a = {params.multiplier}, c = {params.increment}, m = {params.modulus}",
        "Условия Халла:",
        f"  gcd(c, m) = 1: {hull['gcd_c_m']}",
        f"  Условие для простых делителей {hull['prime_factors']}: {hull['prime_factors_condition']}",
        f"  Условие mod 4: {hull['mod4_condition']}",
        f"  Все условия выполнены: {hull['all_conditions_met']}",
        f"Фактический период: {period if period != -1 else 'не найден'}",
    ]
    if 'reason' in uniformity:
        lines.append(f"Критерий хи-квадрат: {uniformity['reason']}")
    else:
        lines.append(
            f"Критерий хи-квадрат ({uniformity['bins']} интервалов): "
            f"chi2 = {uniformity['chi2']:.4f}, p = {uniformity['p_value']:.4f}, "
            f"равномерно: {uniformity['is_uniform']}"
        )
    return "\n".join(lines)
