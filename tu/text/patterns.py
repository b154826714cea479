"""Compiled pattern table for title-case classification.

Responsibilities:
- Define the small-word list and punctuation set shared by all rules.
- Compile every classification pattern once at import time.

All patterns are module-level constants and are only ever read, so they can be
shared across threads and calls.
"""

from __future__ import annotations

import re

SMALL = r"a|an|and|as|at|but|by|en|for|if|in|of|on|or|the|to|v\.?|via|vs\.?"
PUNCT = "!\"#$%&'‘()*+,-./:;?@[]_`{|}~"

_P = "".join(re.escape(character) for character in PUNCT)

# Token patterns.
SMALL_WORDS = re.compile(rf"(?:{SMALL})", re.IGNORECASE)
INLINE_PERIOD = re.compile(r"[a-z][.][a-z]", re.IGNORECASE)
UC_ELSEWHERE = re.compile(rf"[{_P}]*?[a-zA-Z]+[A-Z]+?")
CAPFIRST = re.compile(rf"^[{_P}]*?([^\W\d_])")
APOS_SECOND = re.compile(r"[dol]['‘][a-z]+", re.IGNORECASE)
UC_INITIALS = re.compile(r"(?:[A-Z]\.|[A-Z]\.[A-Z])+")
MAC_MC = re.compile(r"^(Mc|mc)(\w+)")

# Line patterns.
# ASCII blanks and digits only; NBSP or Arabic-Indic digits disable folding.
ALL_CAPS = re.compile(rf"[A-Z \t\n\f\r0-9{_P}]+")
SMALL_FIRST = re.compile(rf"^([{_P}]*)({SMALL})\b", re.IGNORECASE)
SMALL_LAST = re.compile(rf"\b({SMALL})[{_P}]?$", re.IGNORECASE)
SUBPHRASE = re.compile(rf"([:.;?!] )({SMALL})")

# Splitters.
LINES = re.compile(r"[\r\n]+")
WORDS = re.compile(r"[^\t ]+")


def is_all_caps(line: str) -> bool:
    """Return whether a line holds only uppercase letters, digits, blanks and punctuation."""

    return ALL_CAPS.fullmatch(line) is not None


def title_character(character: str) -> str:
    """Return the title-case form of one character, or the character itself.

    Characters whose title case expands to several code points (`ß` -> `Ss`,
    `ŉ` -> `ʼN`) are left unchanged so a token never grows in length.
    """

    titled = character.title()
    return titled if len(titled) == 1 else character


def capitalize_words(text: str) -> str:
    """Raise the first character of every word in `text`, leaving the rest untouched.

    A word starts at the beginning of the text or after any character that is
    neither alphanumeric nor an underscore. Unlike `str.title`, letters inside a
    word keep their case, so `mcTAVISH` pieces are not flattened.
    """

    characters: list[str] = []
    previous = " "
    for character in text:
        if not (previous.isalnum() or previous == "_"):
            characters.append(title_character(character))
        else:
            characters.append(character)
        previous = character
    return "".join(characters)
