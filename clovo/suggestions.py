"""
clovo.suggestions

Turn an analysis result into concrete, prioritized suggestions and produce
example replacement passwords (using generator) to demonstrate stronger choices.
"""

import math
from typing import Dict, List, Optional

from .blocklist import BlocklistStore
from .errors import GeneratorError
from .evaluator import (
    POOL_DIGIT,
    POOL_LOWER,
    POOL_SYMBOL,
    POOL_UPPER,
    StrengthLevel,
    StrengthResult,
)
from .generator import HARD_MAX_LENGTH, GeneratorOptions, generate_password


def _bits_per_char(result: StrengthResult) -> float:
    """Bits-per-char using the same pool logic as the evaluator."""
    pool = 0
    if result.has_lower: pool += POOL_LOWER
    if result.has_upper: pool += POOL_UPPER
    if result.has_digit: pool += POOL_DIGIT
    if result.has_symbol: pool += POOL_SYMBOL
    return math.log2(pool) if pool > 1 else 0.0


def suggest_improvements(
    result: StrengthResult,
    target_bits: int = 60,
    store: Optional[BlocklistStore] = None,
) -> Dict:
    """
    Return a suggestion object derived from the analysis.
    {
        "score": int,
        "label": str,
        "suggestions": [str],  # human-readable prioritized suggestions
        "examples": [str],     # generated example passwords
        "chars_needed": Optional[int]  # approx chars to add to reach target_bits
    }
    """
    suggestions: List[str] = []

    if result.contains_dictionary_word or result.contains_leetspeak:
        suggestions.append("Avoid common words, even with letters swapped for look-alike digits or symbols (e.g. 'P@ssw0rd').")
    if result.contains_personal_info:
        suggestions.append("Do not include your name, username or other personal details.")
    if result.has_keyboard_pattern or result.has_sequential_pattern:
        suggestions.append("Avoid keyboard sequences like 'qwerty' or runs like 'abc' and '123'.")
    if result.has_repeated_chars or result.has_repeated_pattern:
        suggestions.append("Break repeated characters and blocks such as 'aaa' or 'abab'.")

    if result.length < 8:
        suggestions.append("Use at least 8 characters for basic security.")
    elif result.length < 12:
        suggestions.append("Consider using 12+ characters for better security.")
    if not result.has_upper:
        suggestions.append("Add uppercase letters (A-Z).")
    if not result.has_lower:
        suggestions.append("Add lowercase letters (a-z).")
    if not result.has_digit:
        suggestions.append("Add numbers (0-9).")
    if not result.has_symbol:
        suggestions.append("Add symbols (!@#$%^&* etc.).")

    chars_needed = None
    if result.entropy < target_bits:
        bpc = _bits_per_char(result)
        if bpc > 0:
            chars_needed = math.ceil((target_bits - result.entropy) / bpc)
            suggestions.append(f"Add about {chars_needed} random characters to raise entropy toward {target_bits} bits.")
        else:
            suggestions.append("Increase length and add character types (upper/lower/digits/symbols) to raise entropy.")

    examples: List[str] = []
    if result.level < StrengthLevel.STRONG:
        length = min(max(16, result.length + 4), HARD_MAX_LENGTH)
        opts = GeneratorOptions(max_length=HARD_MAX_LENGTH)
        try:
            examples.append(generate_password(length, opts, store=store))
        except GeneratorError:
            examples = []

    return {
        "score": result.strength_score,
        "label": result.level.label,
        "suggestions": suggestions,
        "examples": examples,
        "chars_needed": chars_needed,
    }
