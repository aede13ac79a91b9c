from clovo.policy import (
    MAX_VIOLATIONS,
    PasswordPolicy,
    PolicyType,
    init_policy,
    parse_policy_type,
    policy_type_to_string,
    validate_policy,
)


def test_parse_policy_type():
    assert parse_policy_type("nist") is PolicyType.NIST
    assert parse_policy_type("PCI") is PolicyType.PCI_DSS
    assert parse_policy_type("pci-dss") is PolicyType.PCI_DSS
    assert parse_policy_type("basic") is PolicyType.BASIC
    assert parse_policy_type("whatever") is PolicyType.CUSTOM
    assert policy_type_to_string(PolicyType.PCI_DSS) == "PCI-DSS"


def test_nist_rejects_common_word():
    result = validate_policy("password", init_policy(PolicyType.NIST))
    assert not result.passed
    assert "Contains common dictionary word" in result.violations


def test_nist_length_bounds():
    policy = init_policy(PolicyType.NIST)
    assert "Password too short (minimum 8 characters)" in validate_policy("Zq7", policy).violations
    assert "Password too long (maximum 128 characters)" in validate_policy("Zq7!" * 40, policy).violations


def test_pci_requires_composition():
    result = validate_policy("abcdefg", init_policy(PolicyType.PCI_DSS))
    assert not result.passed
    assert result.violations == [
        "Missing uppercase letters",
        "Missing digits",
        "Contains sequential patterns",
    ]


def test_basic_is_permissive():
    assert validate_policy("longpassword", init_policy(PolicyType.BASIC)).passed
    assert not validate_policy("LONGPASS", init_policy(PolicyType.BASIC)).passed


def test_custom_default():
    assert validate_policy("aaaaaaaa", init_policy(PolicyType.CUSTOM)).passed


def test_invalid_input():
    result = validate_policy(None, init_policy(PolicyType.NIST))
    assert not result.passed
    assert result.violations == ["Invalid input"]


def test_min_entropy_and_violation_cap():
    strict = PasswordPolicy(
        min_length=20,
        require_lowercase=True,
        require_uppercase=True,
        require_digits=True,
        require_symbols=True,
        allow_common_passwords=False,
        allow_sequential_patterns=False,
        allow_repeated_chars=False,
        min_entropy=100,
    )
    result = validate_policy("", strict)
    assert not result.passed
    assert "Entropy too low (minimum 100.0 bits)" in result.violations
    assert len(result.violations) <= MAX_VIOLATIONS
