"""Field validators shared by request DTOs."""

import re

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email.strip()))


def _cpf_check_digit(digits: list[int]) -> int:
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(cpf: str) -> bool:
    """
    Validate a CPF (Brazilian taxpayer id).

    Accepts the bare 11 digits or the punctuated form (123.456.789-09).
    Sequences of a single repeated digit are rejected even though their
    check digits add up.
    """
    normalized = re.sub(r"[.\-]", "", cpf.strip())
    if len(normalized) != 11 or not (normalized.isascii() and normalized.isdigit()):
        return False

    digits = [int(c) for c in normalized]
    if len(set(digits)) == 1:
        return False

    first = _cpf_check_digit(digits[:9])
    second = _cpf_check_digit(digits[:9] + [first])
    return digits[9] == first and digits[10] == second
