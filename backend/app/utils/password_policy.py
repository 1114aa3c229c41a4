"""
Password Policy Utilities
Provides the password validation rules and the validator that applies them.
"""

import re
from dataclasses import dataclass
from typing import AbstractSet, Callable, Tuple


MIN_LENGTH = 8
MAX_LENGTH = 64

SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

SEQUENTIAL_PATTERNS = re.compile(r"123456|abcdef|qwerty", re.IGNORECASE)


@dataclass(frozen=True)
class PasswordRule:
    """A named check plus the message reported when the check is violated."""

    name: str
    is_violated: Callable[[str, AbstractSet[str]], bool]
    message: str


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_single_repeated_character(password: str) -> bool:
    return len(password) > 1 and len(set(password)) == 1


DEFAULT_RULES: Tuple[PasswordRule, ...] = (
    PasswordRule(
        "min_length",
        lambda password, _: len(password) < MIN_LENGTH,
        f"Password must be at least {MIN_LENGTH} characters long",
    ),
    PasswordRule(
        "max_length",
        lambda password, _: len(password) > MAX_LENGTH,
        f"Password must not exceed {MAX_LENGTH} characters",
    ),
    PasswordRule(
        "has_lowercase",
        lambda password, _: not re.search(r"[a-z]", password),
        "Password must contain at least one lowercase letter",
    ),
    PasswordRule(
        "has_uppercase",
        lambda password, _: not re.search(r"[A-Z]", password),
        "Password must contain at least one uppercase letter",
    ),
    PasswordRule(
        "has_digit",
        lambda password, _: not re.search(r"[0-9]", password),
        "Password must contain at least one digit",
    ),
    PasswordRule(
        "has_special",
        lambda password, _: not any(char in SPECIAL_CHARACTERS for char in password),
        "Password must contain at least one special character",
    ),
    PasswordRule(
        "not_common",
        lambda password, common_passwords: password.lower() in common_passwords,
        "Password is too common and not allowed",
    ),
    PasswordRule(
        "not_repeated_char",
        lambda password, _: _is_single_repeated_character(password),
        "Password cannot be all the same character",
    ),
    PasswordRule(
        "no_sequential_pattern",
        lambda password, _: SEQUENTIAL_PATTERNS.search(password) is not None,
        "Password cannot contain common sequential patterns",
    ),
)


def validate_password(
    password: str,
    common_passwords: AbstractSet[str] = frozenset(),
    rules: Tuple[PasswordRule, ...] = DEFAULT_RULES,
) -> ValidationResult:
    """
    Validate password strength against every rule.

    All rules run regardless of earlier failures, and the messages keep the
    order of ``rules``. ``common_passwords`` must hold lowercase entries.
    """
    errors = [
        rule.message
        for rule in rules
        if rule.is_violated(password, common_passwords)
    ]
    return ValidationResult(errors=tuple(errors))
