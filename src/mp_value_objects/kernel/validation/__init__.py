"""Validation rules — the capability interface plus built-in rules."""

from mp_value_objects.kernel.validation.builtin import (
    FormatRule,
    InclusionRule,
    LengthRule,
    PresenceRule,
    is_blank,
)
from mp_value_objects.kernel.validation.delegation import ValidDelegationRule
from mp_value_objects.kernel.validation.rule import AttributeRule, ErrorPair, LambdaRule, Rule

__all__ = [
    "AttributeRule",
    "ErrorPair",
    "FormatRule",
    "InclusionRule",
    "LambdaRule",
    "LengthRule",
    "PresenceRule",
    "Rule",
    "ValidDelegationRule",
    "is_blank",
]
