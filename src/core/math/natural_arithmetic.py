"""
Natural Arithmetic — LCM/GCD натуральных чисел произвольной точности

Модуль валидирует сырые строковые входы как натуральные числа и вычисляет
их наименьшее общее кратное:
- Строгая валидация: после trim (пробелы ECMAScript) только ASCII-цифры [0-9]
- Алгоритм Евклида (итеративный) для GCD
- LCM через (a // gcd) * b, только целочисленная арифметика
- Блочная конверсия str <-> int для чисел длиннее лимита интерпретатора

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль является натуральным числом; LCM(0, x) = LCM(x, 0) = LCM(0, 0) = 0
2. Float никогда не участвует в вычислениях
3. Результат calculate — либо строка цифр, либо NAN_SENTINEL; исключений нет
4. Все операции детерминированы и не имеют побочных эффектов
"""

import re
import sys
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Sentinel-результат для любого невалидного входа
NAN_SENTINEL: Final[str] = "NaN"

# Только ASCII-цифры: \d в Python совпадает и с не-ASCII цифрами
_DIGITS_PATTERN: Final[re.Pattern] = re.compile(r"[0-9]+")

# Пробелы и разделители строк ECMAScript (String.prototype.trim).
# str.strip() без аргументов отличается: режет \x1c-\x1f и \x85, но не U+FEFF
_TRIM_CHARS: Final[str] = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNaturalInput(ValueError):
    """
    Вход не является записью натурального числа.

    Используется parse_natural; calculate превращает его в NAN_SENTINEL.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _coerce_text(raw: object) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    return str(raw)


def strip_raw(text: str) -> str:
    """
    Обрезка пробелов по краям по правилам String.prototype.trim.

    Examples:
        >>> strip_raw("\\ufeff 12\\u2028")
        '12'
        >>> strip_raw("\\x1c12")
        '\\x1c12'
    """
    return text.strip(_TRIM_CHARS)


def is_natural_number(raw: object) -> bool:
    """
    Проверка, что вход — запись натурального числа (0, 1, 2, ...).

    Правила:
    - None, "" и строка из одних пробелов → False
    - После strip_raw() строка должна целиком состоять из ASCII-цифр:
      без знака, десятичной точки, экспоненты, пробелов внутри,
      разделителей разрядов и подчёркиваний
    - Ноль — натуральное число

    Args:
        raw: Сырой вход (строка, None или любой объект, приводимый через str())

    Returns:
        True если вход — натуральное число

    Examples:
        >>> is_natural_number("42")
        True
        >>> is_natural_number(" 7 ")
        True
        >>> is_natural_number("0")
        True
        >>> is_natural_number("-5")
        False
        >>> is_natural_number("5.0")
        False
        >>> is_natural_number(None)
        False
    """
    text = _coerce_text(raw)
    if not text:
        return False

    trimmed = strip_raw(text)
    if not trimmed:
        return False

    return _DIGITS_PATTERN.fullmatch(trimmed) is not None


def _validate_natural_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# КОНВЕРСИЯ str <-> int
# =============================================================================


def _int_max_str_digits() -> int:
    """Текущий лимит интерпретатора на конверсию str <-> int (0 = без лимита)."""
    getter = getattr(sys, "get_int_max_str_digits", None)
    if getter is None:
        return 0
    return getter()


def parse_natural(raw: object) -> int:
    """
    Разбор натурального числа произвольной длины.

    Строки длиннее sys.get_int_max_str_digits() разбираются блоками,
    поэтому верхней границы нет.

    Args:
        raw: Сырой вход

    Returns:
        Неотрицательное целое

    Raises:
        InvalidNaturalInput: Если вход не проходит is_natural_number

    Examples:
        >>> parse_natural(" 0012 ")
        12
    """
    if not is_natural_number(raw):
        raise InvalidNaturalInput(f"Not a natural number: {raw!r}")

    digits = strip_raw(_coerce_text(raw))

    block = _int_max_str_digits()
    if block == 0 or len(digits) <= block:
        return int(digits)

    value = 0
    for start in range(0, len(digits), block):
        chunk = digits[start : start + block]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def render_natural(value: int) -> str:
    """
    Каноническая десятичная запись натурального числа.

    Без знака, без ведущих нулей (кроме самого "0"). Числа длиннее
    лимита интерпретатора рендерятся блоками.

    Args:
        value: Неотрицательное целое

    Returns:
        Строка ASCII-цифр

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    _validate_natural_int(value, "value")

    block = _int_max_str_digits()
    if block == 0:
        return str(value)

    base = 10**block
    if value < base:
        return str(value)

    limbs = []
    while value:
        value, limb = divmod(value, base)
        limbs.append(limb)

    head = str(limbs[-1])
    tail = "".join(str(limb).zfill(block) for limb in reversed(limbs[:-1]))
    return head + tail


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида, итеративно).

    Работает по абсолютным значениям. gcd(0, 0) = 0.

    Args:
        a: Целое
        b: Целое

    Returns:
        GCD(|a|, |b|)

    Raises:
        TypeError: Если аргументы не int

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    for name, value in (("a", a), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be int, got {type(value).__name__}")

    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное двух натуральных чисел.

    LCM(0, 0) = 0, LCM(0, x) = 0. Деление выполняется до умножения:
    (a // gcd(a, b)) * b.

    Args:
        a: Натуральное число
        b: Натуральное число

    Returns:
        LCM(a, b)

    Raises:
        TypeError: Если аргументы не int
        ValueError: Если аргумент отрицательный

    Examples:
        >>> lcm(12, 18)
        36
        >>> lcm(0, 5)
        0
    """
    _validate_natural_int(a, "a")
    _validate_natural_int(b, "b")

    if a == 0 or b == 0:
        return 0

    return (a // gcd(a, b)) * b


# =============================================================================
# CALCULATE
# =============================================================================


def calculate(x_raw: object, y_raw: object) -> str:
    """
    LCM двух сырых входов как строка цифр, либо "NaN".

    Тотальная функция: никогда не бросает исключение.

    Args:
        x_raw: Сырой вход x
        y_raw: Сырой вход y

    Returns:
        Каноническая строка цифр или NAN_SENTINEL

    Examples:
        >>> calculate("12", "18")
        '36'
        >>> calculate("10asdad", "5")
        'NaN'
    """
    try:
        if not is_natural_number(x_raw) or not is_natural_number(y_raw):
            return NAN_SENTINEL

        x = parse_natural(x_raw)
        y = parse_natural(y_raw)
        return render_natural(lcm(x, y))
    except Exception:
        return NAN_SENTINEL
