"""
clovo.evaluator

Password strength analyzer:
- weakness detectors: sequential runs, keyboard patterns, repeated
  characters, repeated blocks, dictionary words, leetspeak-disguised
  dictionary words, personal info
- calculate_entropy / estimate_crack_time / score_strength
- analyze_password(password, user_info=None): returns an immutable StrengthResult
"""

import math
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Dict, Optional

# normalized copies handed to the substring detectors never exceed this
MAX_ANALYZED_LENGTH = 255

COMMON_WORDS = (
    "password", "admin", "welcome", "login", "qwerty", "abc123",
    "monkey", "dragon", "master", "letmein", "trustno1", "sunshine",
    "princess", "football", "baseball", "shadow", "superman", "batman",
    "computer", "internet", "hello", "love", "secret", "test",
    "user", "root", "guest", "system", "service", "account",
    "access", "security",
)

# horizontal keyboard runs
KEYBOARD_PATTERNS = (
    "qwerty", "asdfgh", "zxcvbn", "qwertyuiop", "asdfghjkl",
    "zxcvbnm", "123456", "654321", "qwerty123", "1qaz2wsx",
    "1q2w3e4r", "qwe123",
)

LEET_MAP = str.maketrans("013457@$!", "oleastasi")

POOL_LOWER = 26
POOL_UPPER = 26
POOL_DIGIT = 10
POOL_SYMBOL = 32

GUESSES_PER_SECOND = 1e9
INSTANT_CRACK_SECONDS = 0.001

PENALTY_SEQUENTIAL = 15
PENALTY_KEYBOARD = 20
PENALTY_REPEATED_CHARS = 10
PENALTY_REPEATED_PATTERN = 15
PENALTY_DICTIONARY = 25
PENALTY_LEETSPEAK = 15
PENALTY_PERSONAL_INFO = 20


class StrengthLevel(IntEnum):
    NO_PASSWORD = 0
    VERY_WEAK = 1
    WEAK = 2
    MEDIUM = 3
    STRONG = 4
    VERY_STRONG = 5

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS = {
    StrengthLevel.NO_PASSWORD: "No Password",
    StrengthLevel.VERY_WEAK: "Very Weak",
    StrengthLevel.WEAK: "Weak",
    StrengthLevel.MEDIUM: "Medium",
    StrengthLevel.STRONG: "Strong",
    StrengthLevel.VERY_STRONG: "Very Strong",
}


@dataclass(frozen=True)
class StrengthResult:
    """
    Outcome of a single analyze_password() call.

    raw_score is the points total before clamping and can be negative;
    strength_score is max(0, raw_score) and level is derived from it.
    """
    length: int = 0
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    entropy: float = 0.0
    raw_score: int = 0
    strength_score: int = 0
    level: StrengthLevel = StrengthLevel.NO_PASSWORD
    has_sequential_pattern: bool = False
    has_keyboard_pattern: bool = False
    has_repeated_chars: bool = False
    has_repeated_pattern: bool = False
    contains_dictionary_word: bool = False
    contains_leetspeak: bool = False
    contains_personal_info: bool = False
    pattern_penalty: int = 0
    crack_time_seconds: float = 0.0

    def to_dict(self) -> Dict:
        out = asdict(self)
        out["level"] = self.level.label
        return out


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return _is_lower(c) or _is_upper(c)


def _normalize(s: str) -> str:
    """Lowercased copy, truncated to MAX_ANALYZED_LENGTH."""
    return s[:MAX_ANALYZED_LENGTH].lower()


def has_sequential(password: str) -> bool:
    """
    True for any window of three digits stepping +1 or -1 ('123', '987'),
    or three letters stepping +1 ignoring case ('abc', 'XyZ').
    """
    for i in range(len(password) - 2):
        a, b, c = password[i], password[i + 1], password[i + 2]
        if _is_digit(a) and _is_digit(b) and _is_digit(c):
            d1 = ord(b) - ord(a)
            d2 = ord(c) - ord(b)
            if d1 == d2 and d1 in (1, -1):
                return True
        if _is_alpha(a) and _is_alpha(b) and _is_alpha(c):
            a, b, c = a.lower(), b.lower(), c.lower()
            if ord(b) - ord(a) == 1 and ord(c) - ord(b) == 1:
                return True
    return False


def has_keyboard_pattern(password: str) -> bool:
    lower = _normalize(password)
    return any(pattern in lower for pattern in KEYBOARD_PATTERNS)


def has_repeated_chars(password: str) -> bool:
    """Three identical characters in a row ('aaa', '111')."""
    for i in range(len(password) - 2):
        if password[i] == password[i + 1] == password[i + 2]:
            return True
    return False


def has_repeated_pattern(password: str) -> bool:
    """
    Two adjacent identical blocks of length 2..6 ('abab', 'x123123').
    Blocks never exceed half the password.
    """
    n = len(password)
    for block in range(2, min(6, n // 2) + 1):
        for start in range(n - 2 * block + 1):
            if password[start:start + block] == password[start + block:start + 2 * block]:
                return True
    return False


def contains_dictionary_word(password: str) -> bool:
    lower = _normalize(password)
    return any(word in lower for word in COMMON_WORDS)


def normalize_leet(password: str) -> str:
    """Return a "de-leeted" lowercase copy ('P@ssw0rd' -> 'password')."""
    return _normalize(password).translate(LEET_MAP)


def contains_leetspeak(password: str) -> bool:
    return contains_dictionary_word(normalize_leet(password))


def contains_personal_info(password: str, user_info: Optional[str]) -> bool:
    if not user_info:
        return False
    return _normalize(user_info) in _normalize(password)


def calculate_entropy(
    length: int,
    has_lower: bool,
    has_upper: bool,
    has_digit: bool,
    has_symbol: bool,
) -> float:
    """
    Entropy bits = length * log2(pool_size), where the pool is the sum of
    the alphabet sizes of the character classes actually present.
    """
    pool = 0
    if has_upper:
        pool += POOL_UPPER
    if has_lower:
        pool += POOL_LOWER
    if has_digit:
        pool += POOL_DIGIT
    if has_symbol:
        pool += POOL_SYMBOL
    if pool <= 0:
        return 0.0
    return length * math.log2(pool)


def estimate_crack_time(entropy: float) -> float:
    """
    Average seconds to brute-force at GUESSES_PER_SECOND; on average the
    password is found halfway through the keyspace.
    """
    if entropy < 10:
        return INSTANT_CRACK_SECONDS
    try:
        combinations = 2.0 ** entropy
    except OverflowError:
        return math.inf
    return combinations / (2.0 * GUESSES_PER_SECOND)


def score_strength(length: int, class_count: int, entropy: float, penalty: int) -> int:
    """Unclamped score: length points + variety points + entropy points - penalty."""
    score = 0

    if length >= 16:
        score += 40
    elif length >= 12:
        score += 30
    elif length >= 8:
        score += 20
    elif length >= 6:
        score += 10
    else:
        score += 5

    score += class_count * 10

    if entropy >= 60:
        score += 20
    elif entropy >= 40:
        score += 15
    elif entropy >= 28:
        score += 10
    elif entropy >= 20:
        score += 5

    return score - penalty


def determine_strength_level(strength_score: int) -> StrengthLevel:
    if strength_score >= 85:
        return StrengthLevel.VERY_STRONG
    if strength_score >= 70:
        return StrengthLevel.STRONG
    if strength_score >= 50:
        return StrengthLevel.MEDIUM
    if strength_score >= 30:
        return StrengthLevel.WEAK
    return StrengthLevel.VERY_WEAK


def level_to_string(level: StrengthLevel) -> str:
    return StrengthLevel(level).label


def format_crack_time(seconds: float) -> str:
    if math.isinf(seconds):
        return "effectively forever"
    if seconds < 1.0:
        return "instant"
    if seconds < 60.0:
        return f"{seconds:.1f} seconds"
    minutes = seconds / 60.0
    if minutes < 60.0:
        return f"{minutes:.1f} minutes"
    hours = minutes / 60.0
    if hours < 24.0:
        return f"{hours:.1f} hours"
    days = hours / 24.0
    if days < 365.0:
        return f"{days:.1f} days"
    years = days / 365.0
    if years < 1000.0:
        return f"{years:.1f} years"
    millennia = years / 1000.0
    if millennia < 1_000_000.0:
        return f"{millennia:.1f} millennia"
    return f"{years:.2e} years"


def analyze_password(password: Optional[str], user_info: Optional[str] = None) -> StrengthResult:
    """
    Analyze a password and return a StrengthResult.

    None yields level NO_PASSWORD with every other field zeroed; any string,
    including "", is classified, run through every detector and scored.
    """
    if password is None:
        return StrengthResult()

    has_lower = has_upper = has_digit = has_symbol = False
    for c in password:
        if _is_upper(c):
            has_upper = True
        elif _is_digit(c):
            has_digit = True
        elif _is_lower(c):
            has_lower = True
        else:
            has_symbol = True
    length = len(password)

    penalty = 0

    sequential = has_sequential(password)
    if sequential:
        penalty += PENALTY_SEQUENTIAL
    keyboard = has_keyboard_pattern(password)
    if keyboard:
        penalty += PENALTY_KEYBOARD
    repeated_chars = has_repeated_chars(password)
    if repeated_chars:
        penalty += PENALTY_REPEATED_CHARS
    repeated_pattern = has_repeated_pattern(password)
    if repeated_pattern:
        penalty += PENALTY_REPEATED_PATTERN
    dictionary = contains_dictionary_word(password)
    if dictionary:
        penalty += PENALTY_DICTIONARY
    leet = contains_leetspeak(password)
    if leet:
        penalty += PENALTY_LEETSPEAK
    personal = contains_personal_info(password, user_info)
    if personal:
        penalty += PENALTY_PERSONAL_INFO

    entropy = calculate_entropy(length, has_lower, has_upper, has_digit, has_symbol)
    class_count = sum((has_lower, has_upper, has_digit, has_symbol))
    raw_score = score_strength(length, class_count, entropy, penalty)
    strength_score = max(0, raw_score)

    return StrengthResult(
        length=length,
        has_lower=has_lower,
        has_upper=has_upper,
        has_digit=has_digit,
        has_symbol=has_symbol,
        entropy=entropy,
        raw_score=raw_score,
        strength_score=strength_score,
        level=determine_strength_level(strength_score),
        has_sequential_pattern=sequential,
        has_keyboard_pattern=keyboard,
        has_repeated_chars=repeated_chars,
        has_repeated_pattern=repeated_pattern,
        contains_dictionary_word=dictionary,
        contains_leetspeak=leet,
        contains_personal_info=personal,
        pattern_penalty=penalty,
        crack_time_seconds=estimate_crack_time(entropy),
    )
