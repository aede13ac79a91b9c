"""
clovo.policy
Password policy presets (NIST, PCI-DSS, basic, custom) and validation
against an analyzed password.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .evaluator import analyze_password

MAX_VIOLATIONS = 10


class PolicyType(Enum):
    CUSTOM = "CUSTOM"
    NIST = "NIST"
    PCI_DSS = "PCI-DSS"
    BASIC = "BASIC"


_ALIASES = {
    "custom": PolicyType.CUSTOM,
    "nist": PolicyType.NIST,
    "pci": PolicyType.PCI_DSS,
    "pci-dss": PolicyType.PCI_DSS,
    "basic": PolicyType.BASIC,
}


def parse_policy_type(name: str) -> PolicyType:
    """Map a user-supplied name to a PolicyType; unknown names are CUSTOM."""
    return _ALIASES.get((name or "").strip().lower(), PolicyType.CUSTOM)


def policy_type_to_string(policy_type: PolicyType) -> str:
    return policy_type.value


@dataclass
class PasswordPolicy:
    min_length: int = 8
    max_length: int = 0  # 0 means unbounded
    require_lowercase: bool = False
    require_uppercase: bool = False
    require_digits: bool = False
    require_symbols: bool = False
    allow_common_passwords: bool = True
    allow_sequential_patterns: bool = True
    allow_repeated_chars: bool = True
    min_entropy: int = 0


@dataclass
class PolicyResult:
    passed: bool = False
    violations: List[str] = field(default_factory=list)


def init_policy(policy_type: PolicyType) -> PasswordPolicy:
    if policy_type is PolicyType.NIST:
        return PasswordPolicy(
            min_length=8,
            max_length=128,
            allow_common_passwords=False,
            allow_sequential_patterns=False,
            allow_repeated_chars=False,
        )
    if policy_type is PolicyType.PCI_DSS:
        return PasswordPolicy(
            min_length=7,
            require_lowercase=True,
            require_uppercase=True,
            require_digits=True,
            allow_common_passwords=False,
            allow_sequential_patterns=False,
            allow_repeated_chars=False,
        )
    if policy_type is PolicyType.BASIC:
        return PasswordPolicy(min_length=8, require_lowercase=True)
    return PasswordPolicy()


def validate_policy(password: Optional[str], policy: Optional[PasswordPolicy]) -> PolicyResult:
    """
    Check a password against a policy. Violations are reported in a fixed
    order and capped at MAX_VIOLATIONS.
    """
    if password is None or policy is None:
        return PolicyResult(passed=False, violations=["Invalid input"])

    analysis = analyze_password(password)
    violations: List[str] = []
    length = len(password)

    if policy.min_length > 0 and length < policy.min_length:
        violations.append(f"Password too short (minimum {policy.min_length} characters)")
    if policy.max_length > 0 and length > policy.max_length:
        violations.append(f"Password too long (maximum {policy.max_length} characters)")

    if policy.require_lowercase and not analysis.has_lower:
        violations.append("Missing lowercase letters")
    if policy.require_uppercase and not analysis.has_upper:
        violations.append("Missing uppercase letters")
    if policy.require_digits and not analysis.has_digit:
        violations.append("Missing digits")
    if policy.require_symbols and not analysis.has_symbol:
        violations.append("Missing symbols")

    if not policy.allow_sequential_patterns and analysis.has_sequential_pattern:
        violations.append("Contains sequential patterns")
    if not policy.allow_repeated_chars and analysis.has_repeated_chars:
        violations.append("Contains repeated characters")
    if not policy.allow_common_passwords and analysis.contains_dictionary_word:
        violations.append("Contains common dictionary word")

    if policy.min_entropy > 0 and analysis.entropy < policy.min_entropy:
        violations.append(f"Entropy too low (minimum {float(policy.min_entropy):.1f} bits)")

    violations = violations[:MAX_VIOLATIONS]
    return PolicyResult(passed=not violations, violations=violations)
