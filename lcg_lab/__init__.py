"""
Лабораторная работа: линейный конгруэнтный генератор и диаграмма рассеяния
его нормированных значений
"""

__version__ = "0.1.0"
