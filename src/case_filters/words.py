"""Word splitting and case styles.

Self-contained: nothing here knows about filters, registries or template
engines.  Every public function is a pure ``str -> str`` transform.

Word boundaries
---------------
1. Any character that is neither alphabetic nor numeric separates words
   (``"hello world"``, ``"hello_world"``, ``"hello-world"``).
2. A lowercase letter followed by an uppercase letter ends a word
   (``"helloWorld"`` → ``hello`` / ``World``).  Digits and uncased letters
   inherit the case of what precedes them, so ``"Version2Update"`` splits as
   ``Version2`` / ``Update``.
3. An uppercase run followed by a lowercase letter keeps its last capital for
   the next word (``"XMLHttp"`` → ``XML`` / ``Http``).

Digits never open a word on their own: ``"HelloWorld21"`` → ``Hello`` /
``World21``.

A capital sigma ending a word lowers to final sigma (``"ΟΔΟΣ"`` → ``"οδος"``,
``"1Σ"`` → ``"1ς"``).

Exports
-------
split_words
    Return the detected words of a string.
kebab_case, lower_camel_case, shouty_kebab_case, shouty_snake_case,
snake_case, title_case, train_case, upper_camel_case
    The eight styles.
"""

from __future__ import annotations

from typing import Callable, List

import regex

_SEPARATOR = regex.compile(r"[^\p{Alphabetic}\p{N}]+")
_LOWER = regex.compile(r"\p{Lowercase}")
_UPPER = regex.compile(r"\p{Uppercase}")

# word modes
_BOUNDARY = 0
_LOWERCASE = 1
_UPPERCASE = 2


def _is_lower(ch: str) -> bool:
    return _LOWER.match(ch) is not None


def _is_upper(ch: str) -> bool:
    return _UPPER.match(ch) is not None


def _split_piece(piece: str) -> List[str]:
    """Split a separator-free run of characters on case transitions."""
    words: List[str] = []
    start = 0
    mode = _BOUNDARY

    for i, ch in enumerate(piece[:-1]):
        nxt = piece[i + 1]
        if _is_lower(ch):
            next_mode = _LOWERCASE
        elif _is_upper(ch):
            next_mode = _UPPERCASE
        else:
            next_mode = mode

        if next_mode == _LOWERCASE and _is_upper(nxt):
            words.append(piece[start:i + 1])
            start = i + 1
            mode = _BOUNDARY
        elif mode == _UPPERCASE and _is_upper(ch) and _is_lower(nxt):
            words.append(piece[start:i])
            start = i
            mode = _BOUNDARY
        else:
            mode = next_mode

    words.append(piece[start:])
    return words


def split_words(text: str) -> List[str]:
    """Return the words of *text* in order.

    ::

        split_words("hello_world 21")   # ["hello", "world", "21"]
        split_words("XMLHttpRequest")   # ["XML", "Http", "Request"]
        split_words("--")               # []
    """
    words: List[str] = []
    for piece in _SEPARATOR.split(text):
        if piece:
            words.extend(_split_piece(piece))
    return words


# ─────────────────────────────────────────────────────────────────────────────
# Word casing
# ─────────────────────────────────────────────────────────────────────────────


def _lower(word: str) -> str:
    # a capital sigma ending the word always becomes final sigma, whatever
    # precedes it; elsewhere each character is lowered on its own
    if word.endswith("Σ"):
        return "".join(ch.lower() for ch in word[:-1]) + "ς"
    return "".join(ch.lower() for ch in word)


def _upper(word: str) -> str:
    return word.upper()


def _capitalize(word: str) -> str:
    # str.capitalize() title-cases digraphs such as "ǆ"; keep a plain upper
    return word[:1].upper() + _lower(word[1:])


def _join(text: str, case: Callable[[str], str], separator: str) -> str:
    return separator.join(case(w) for w in split_words(text))


# ─────────────────────────────────────────────────────────────────────────────
# Styles
# ─────────────────────────────────────────────────────────────────────────────


def snake_case(text: str) -> str:
    """``"Hello World"`` → ``"hello_world"``."""
    return _join(text, _lower, "_")


def kebab_case(text: str) -> str:
    """``"Hello World"`` → ``"hello-world"``."""
    return _join(text, _lower, "-")


def shouty_snake_case(text: str) -> str:
    """``"Hello World"`` → ``"HELLO_WORLD"``."""
    return _join(text, _upper, "_")


def shouty_kebab_case(text: str) -> str:
    """``"Hello World"`` → ``"HELLO-WORLD"``."""
    return _join(text, _upper, "-")


def title_case(text: str) -> str:
    """``"hello_world"`` → ``"Hello World"``."""
    return _join(text, _capitalize, " ")


def train_case(text: str) -> str:
    """``"hello world"`` → ``"Hello-World"``."""
    return _join(text, _capitalize, "-")


def upper_camel_case(text: str) -> str:
    """``"hello world"`` → ``"HelloWorld"``."""
    return _join(text, _capitalize, "")


def lower_camel_case(text: str) -> str:
    """``"hello world"`` → ``"helloWorld"``."""
    words = split_words(text)
    if not words:
        return ""
    return _lower(words[0]) + "".join(_capitalize(w) for w in words[1:])
