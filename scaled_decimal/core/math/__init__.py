"""
Core math modules для scaled_decimal

Целочисленные ядра: конструирование nominator, арифметика и округление
half-away-from-zero. Никаких float в промежуточных вычислениях.
"""

# Numerical Safeguards
from scaled_decimal.core.math.numerical_safeguards import (
    MAX_DECIMAL_SHIFT,
    DecimalOverflowError,
    clamp,
    digit_count,
    drop_last_digit,
    is_in_range,
    power10,
    round_half_away_from_zero,
    shift_decimal,
    sign_of,
    trunc_div,
    validate_in_range,
)

# Construction
from scaled_decimal.core.math.construction import (
    DECIMAL_PATTERN,
    DecimalParseError,
    nominator_from_float,
    nominator_from_int,
    nominator_from_parts,
    nominator_from_string,
)

# Arithmetic
from scaled_decimal.core.math.arithmetic import (
    add,
    divide,
    multiply_cross,
    multiply_same,
    rescale,
    subtract,
)

__all__ = [
    # Numerical Safeguards — Constants / Exceptions
    "MAX_DECIMAL_SHIFT",
    "DecimalOverflowError",
    # Numerical Safeguards — Rounding
    "drop_last_digit",
    "round_half_away_from_zero",
    "trunc_div",
    # Numerical Safeguards — Utilities
    "clamp",
    "digit_count",
    "is_in_range",
    "power10",
    "shift_decimal",
    "sign_of",
    "validate_in_range",
    # Construction
    "DECIMAL_PATTERN",
    "DecimalParseError",
    "nominator_from_float",
    "nominator_from_int",
    "nominator_from_parts",
    "nominator_from_string",
    # Arithmetic
    "add",
    "divide",
    "multiply_cross",
    "multiply_same",
    "rescale",
    "subtract",
]
