"""
Консольный запуск: таблица значений генератора и диаграмма рассеяния

Пример:
    lcg-lab --seed 1 --multiplier 5 --increment 3 --count 10 --output scatter.png
"""
import argparse
import sys

from lcg_lab.app import LCGApp
from lcg_lab.config import CONFIRM_THRESHOLD, DEFAULT_FIELDS
from lcg_lab.parameter_analysis import analyze_parameters, format_analysis
from lcg_lab.rendering import ScatterPlot, format_table, samples_to_frame
from lcg_lab.utils.logger import setup_logger
from lcg_lab.validation import Decision


def ask_confirmation(count: int) -> Decision:
    """Запрос подтверждения в консоли; закрытый stdin считается отказом"""
    try:
        answer = input(f"Будет сгенерировано {count} чисел (больше {CONFIRM_THRESHOLD}). Продолжить? [y/N] ")
    except EOFError:
        return Decision.CANCEL
    return Decision.PROCEED if answer.strip().lower() in ("y", "yes", "д", "да") else Decision.CANCEL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Линейный конгруэнтный генератор: таблица и диаграмма рассеяния"
    )
    parser.add_argument("--seed", default=DEFAULT_FIELDS["seed"], help="Начальное значение X0")
    parser.add_argument("--multiplier", "-a", default=DEFAULT_FIELDS["multiplier"], help="Множитель a")
    parser.add_argument("--increment", "-c", default=DEFAULT_FIELDS["increment"], help="Приращение c")
    parser.add_argument("--count", "-n", default=DEFAULT_FIELDS["count"], help="Количество чисел")
    parser.add_argument("--modulus", "-m", default=DEFAULT_FIELDS["modulus"],
                        help="Модуль m (используется только при --modulus-source fixed)")
    parser.add_argument("--modulus-source", choices=("derived", "fixed"), default="derived",
                        help="derived: m = наименьшая степень двойки >= count; fixed: m из --modulus")
    parser.add_argument("--yes", "-y", action="store_true", help="Не спрашивать подтверждение")
    parser.add_argument("--output", "-o", help="Сохранить диаграмму рассеяния в файл")
    parser.add_argument("--show", action="store_true", help="Показать диаграмму в окне")
    parser.add_argument("--analyze", action="store_true",
                        help="Проверить условия Халла, период и равномерность")
    parser.add_argument("--frame", action="store_true", help="Вывести значения таблицей pandas (i, raw, normalized)")
    parser.add_argument("--log-level", default=None, help="Уровень логирования")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(level=args.log_level)

    plot = ScatterPlot() if (args.output or args.show) else None
    try:
        return _run(args, plot)
    finally:
        if plot is not None:
            plot.close()


def _run(args: argparse.Namespace, plot: ScatterPlot = None) -> int:
    app = LCGApp(
        derive_modulus=args.modulus_source == "derived",
        confirm=None if args.yes else ask_confirmation,
        plot=plot,
    )

    result = app.handle_submit({
        "seed": args.seed,
        "multiplier": args.multiplier,
        "increment": args.increment,
        "modulus": args.modulus,
        "count": args.count,
    })

    if app.error_message:
        print(f"Ошибка: {app.error_message}", file=sys.stderr)
        return 1
    if result is None:
        # Отменено пользователем
        return 0

    print(f"Модуль m = {app.modulus_echo}")
    if args.frame:
        print(samples_to_frame(result.samples).to_string())
    else:
        print(format_table(result.samples))

    if args.analyze:
        print()
        print(format_analysis(result.params, analyze_parameters(result.params, result.samples)))

    if plot is not None:
        if args.output:
            plot.save(args.output)
            print(f"Диаграмма сохранена: {args.output}")
        if args.show:
            plot.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
