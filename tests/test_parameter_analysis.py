from lcg_lab.parameter_analysis import (analyze_parameters, check_hull_conditions, chi2_uniformity,
                                       format_analysis, get_prime_factors, measure_actual_period)
from lcg_lab.utils.entities import GeneratorParams, LCGGenerator, Sample


def test_prime_factors():
    assert get_prime_factors(16) == [2]
    assert get_prime_factors(360) == [2, 3, 5]
    assert get_prime_factors(31) == [31]


def test_hull_conditions_good_parameters():
    conditions = check_hull_conditions(5, 3, 16)
    assert conditions['gcd_c_m']
    assert conditions['mod4_condition']
    assert conditions['all_conditions_met']


def test_hull_conditions_bad_parameters():
    conditions = check_hull_conditions(3, 5, 16)
    assert conditions['gcd_c_m']
    assert not conditions['mod4_condition']
    assert not conditions['all_conditions_met']

    assert not check_hull_conditions(5, 2, 16)['gcd_c_m']


def test_measured_period_matches_hull():
    assert measure_actual_period(GeneratorParams(5, 3, 16, 1)) == 16
    assert measure_actual_period(GeneratorParams(3, 5, 16, 1)) < 16


def test_full_period_is_uniform():
    params = GeneratorParams(multiplier=5, increment=3, modulus=16, seed=1)
    samples = LCGGenerator(params).generate_normalized(16)
    result = chi2_uniformity(samples, bins=4)
    assert result['observed'] == [4, 4, 4, 4]
    assert result['chi2'] == 0.0
    assert result['is_uniform']


def test_constant_sequence_is_not_uniform():
    samples = [Sample(raw=0, normalized=0.0)] * 50
    result = chi2_uniformity(samples, bins=5)
    assert not result['is_uniform']


def test_too_few_samples():
    assert chi2_uniformity([Sample(raw=1, normalized=0.5)])['reason']


def test_report():
    params = GeneratorParams(multiplier=5, increment=3, modulus=16, seed=1)
    samples = LCGGenerator(params).generate_normalized(10)
    report = format_analysis(params, analyze_parameters(params, samples))
    assert "m = 16" in report
    assert "Фактический период: 16" in report
