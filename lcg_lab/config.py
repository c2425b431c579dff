"""
Конфигурация лабораторной работы (LCG и диаграмма рассеяния)
"""
import os
from typing import Dict

from dotenv import load_dotenv

load_dotenv()


# --- ЗНАЧЕНИЯ ПОЛЕЙ ФОРМЫ ПО УМОЛЧАНИЮ (кнопка "сброс") ---
DEFAULT_FIELDS: Dict[str, str] = {
    "seed": "1",
    "multiplier": "5",
    "increment": "3",
    "modulus": "16",
    "count": "10",
}

# Выше этого количества чисел требуется подтверждение пользователя
CONFIRM_THRESHOLD = 100

# --- ОБЛАСТЬ РИСОВАНИЯ (в пикселях) ---
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 400
PLOT_PADDING = {
    "left": 40,
    "right": 20,
    "top": 20,
    "bottom": 30,
}

POINT_RADIUS = 4
POINT_COLOR = "#4a63e7"
AXES_COLOR = (15 / 255, 23 / 255, 42 / 255, 0.25)  # rgba(15, 23, 42, 0.25)
RENDER_DPI = 100

# Количество знаков после запятой для u(i) в таблице
NORMALIZED_DECIMALS = 5

# --- ЛОГИРОВАНИЕ И ГРАФИКА ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")  # Пусто - только консоль
MPL_BACKEND = os.getenv("MPL_BACKEND", "")  # Пусто - бэкенд matplotlib по умолчанию
