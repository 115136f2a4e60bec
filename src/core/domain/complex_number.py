"""
ComplexNumber — Значение с перегруженной арифметикой

Пара числовых компонент (real, imaginary) с операциями сложения и вычитания.
Каждая операция возвращает НОВЫЙ экземпляр, операнды не изменяются.

Текстовое представление: "<real> i + <imaginary> j".
Метка "i" стоит у real, метка "j" у imaginary. Это нестандартная нотация,
но это документированный формат describe(), он сохраняется дословно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе компоненты конечные числа (int/float, не bool, не NaN/Inf)
2. Immutable (frozen=True): изменение компонент после создания запрещено
3. add/subtract чистые функции, результат всегда новый экземпляр
4. int компоненты остаются int: create(4, 3) → "4 i + 3 j"

Examples:
    >>> num1 = create(4, 3)
    >>> num2 = create(3, 4)
    >>> describe(num1)
    '4 i + 3 j'
    >>> describe(num1 + num2)
    '7 i + 7 j'
    >>> describe(num1 - num2)
    '1 i + -1 j'
"""

from typing import Any, Final, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.contracts.validators import validate_complex_number
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    validate_finite,
)
from src.core.math.numerical_safeguards import is_close as _is_close_float

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Метка компоненты real
REAL_UNIT_LABEL: Final[str] = "i"

# Метка компоненты imaginary
IMAGINARY_UNIT_LABEL: Final[str] = "j"

# Шаблон describe()
DESCRIBE_TEMPLATE: Final[str] = "{real} {real_label} + {imaginary} {imaginary_label}"

Component = Union[int, float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidValue(ValueError):
    """
    Невалидная компонента: не число, NaN/Inf или int вне диапазона float.

    Возникает в create() и во всех операциях, результат которых
    выходит за пределы конечных float (переполнение при сложении).
    """


# =============================================================================
# COMPLEX NUMBER MODEL
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Значение (real, imaginary) с операциями add/subtract.

    Immutable модель (frozen=True). Сравнение по содержимому,
    равные значения имеют равный hash.

    Операторы + и - являются алиасами add/subtract.
    """

    real: Component = Field(..., description="Действительная часть (метка 'i')")
    imaginary: Component = Field(..., description="Мнимая часть (метка 'j')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def validate_component(cls, v: Any, info: ValidationInfo) -> Any:
        """Компонента должна быть конечным числом (bool отклоняется)."""
        validate_finite(v, info.field_name, InvalidValue)
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, real: Component, imaginary: Component) -> "ComplexNumber":
        """
        Создание значения из двух компонент.

        Args:
            real: Действительная часть
            imaginary: Мнимая часть

        Returns:
            Новый ComplexNumber

        Raises:
            InvalidValue: Если компонента не число, NaN/Inf или int вне диапазона float
        """
        validate_finite(real, "real", InvalidValue)
        validate_finite(imaginary, "imaginary", InvalidValue)
        return cls(real=real, imaginary=imaginary)

    @classmethod
    def zero(cls) -> "ComplexNumber":
        """Аддитивная единица (0, 0)."""
        return cls.create(0, 0)

    @classmethod
    def from_builtin(cls, value: complex) -> "ComplexNumber":
        """
        Конверсия из встроенного complex.

        value.real → real, value.imag → imaginary (обе компоненты float).
        """
        return cls.create(value.real, value.imag)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComplexNumber":
        """
        Создание из dict по контракту complex_number.json.

        Raises:
            jsonschema.ValidationError: Если dict не соответствует контракту
            InvalidValue: Если компонента NaN/Inf (JSON Schema это не проверяет)
        """
        validate_complex_number(data)
        return cls.create(data["real"], data["imaginary"])

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        """
        Сложение: (a.real + b.real, a.imaginary + b.imaginary).

        Raises:
            InvalidValue: Если float результат переполнился до Inf
        """
        return self.create(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "ComplexNumber") -> "ComplexNumber":
        """
        Вычитание: (a.real - b.real, a.imaginary - b.imaginary).

        Не коммутативно: a - b != b - a в общем случае.
        """
        return self.create(self.real - other.real, self.imaginary - other.imaginary)

    def negate(self) -> "ComplexNumber":
        """Аддитивная инверсия: add(v, negate(v)) == zero()."""
        return self.create(-self.real, -self.imaginary)

    def __add__(self, other: Any) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "ComplexNumber":
        return self.negate()

    # -------------------------------------------------------------------------
    # Представление и конверсии
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """Текст вида "<real> i + <imaginary> j"."""
        return DESCRIBE_TEMPLATE.format(
            real=self.real,
            real_label=REAL_UNIT_LABEL,
            imaginary=self.imaginary,
            imaginary_label=IMAGINARY_UNIT_LABEL,
        )

    def __str__(self) -> str:
        return self.describe()

    def to_builtin(self) -> complex:
        return complex(self.real, self.imaginary)

    def to_dict(self) -> dict[str, Component]:
        """Сериализация по контракту complex_number.json."""
        return self.model_dump()

    def is_close(
        self,
        other: "ComplexNumber",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Для float результатов, где точное == не подходит
        (например, 0.1 + 0.2 против 0.3).
        """
        return _is_close_float(
            self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol
        ) and _is_close_float(self.imaginary, other.imaginary, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ API
# =============================================================================


def create(real: Component, imaginary: Component) -> ComplexNumber:
    """Создание значения. См. ComplexNumber.create."""
    return ComplexNumber.create(real, imaginary)


def add(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """Сложение двух значений, результат новый экземпляр."""
    return a.add(b)


def subtract(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """Вычитание b из a, результат новый экземпляр."""
    return a.subtract(b)


def negate(v: ComplexNumber) -> ComplexNumber:
    return v.negate()


def describe(v: ComplexNumber) -> str:
    """Текст вида "<real> i + <imaginary> j"."""
    return v.describe()


def is_close(
    a: ComplexNumber,
    b: ComplexNumber,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    return a.is_close(b, rel_tol=rel_tol, abs_tol=abs_tol)


def from_builtin(value: complex) -> ComplexNumber:
    return ComplexNumber.from_builtin(value)


def to_builtin(v: ComplexNumber) -> complex:
    return v.to_builtin()


def from_dict(data: dict[str, Any]) -> ComplexNumber:
    return ComplexNumber.from_dict(data)


def to_dict(v: ComplexNumber) -> dict[str, Component]:
    return v.to_dict()
