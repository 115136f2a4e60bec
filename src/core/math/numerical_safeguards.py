"""
Numerical Safeguards — проверки компонент и сравнение float

Модуль содержит численные примитивы, на которые опирается ComplexNumber:
- Проверка, что значение является числом (int/float, но не bool)
- Проверка конечности (NaN/Inf не допускаются)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в компоненты значения
   (int вне диапазона float тоже отклоняется)
2. bool не считается числом, хотя в Python это подкласс int
3. Float сравнения всегда учитывают машинную точность
"""

import math
import sys
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close и is_zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Максимальный модуль компоненты: int больше этого не представим как float
COMPONENT_ABS_MAX: Final[float] = sys.float_info.max


# =============================================================================
# ПРОВЕРКА ЧИСЕЛ
# =============================================================================


def is_number(value: Any) -> bool:
    """
    Проверка, что значение является числом (int или float).

    bool исключается явно: True/False не являются компонентами.

    Examples:
        >>> is_number(4)
        True
        >>> is_number(-1.5)
        True
        >>> is_number(True)
        False
        >>> is_number("4")
        False
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли число конечным (не NaN, не Inf).

    int считается конечным, только если представим как float:
    abs(value) <= COMPONENT_ABS_MAX. Такой int безопасно смешивается
    с float в арифметике, math.isclose и str().

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN, Inf или int вне диапазона float
    """
    if isinstance(value, int):
        return abs(value) <= COMPONENT_ABS_MAX
    return math.isfinite(value)


def validate_finite(value: Any, name: str, error_cls: type[ValueError] = ValueError) -> None:
    """
    Валидация компоненты: число и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        error_cls: Класс исключения (подкласс ValueError)

    Raises:
        error_cls: Если value не число, NaN/Inf или int вне диапазона float
    """
    if not is_number(value):
        raise error_cls(f"{name} must be a number (int or float), got {value!r}")

    if isinstance(value, int) and not is_valid_float(value):
        # repr огромного int может превысить лимит int->str, значение не выводим
        raise error_cls(f"{name} must be representable as float (abs <= {COMPONENT_ABS_MAX!r})")

    if not is_valid_float(value):
        raise error_cls(f"{name} must be finite (not NaN/Inf), got {value!r}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False

        # abs diff < abs_tol
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol
