"""Instruction tokenizer.

Whitespace is a fixed character set, not str.isspace(): characters outside the
set stay inside tokens.
"""

from typing import List

WHITESPACE_CHARACTERS = (
    # Zs category
    "\N{SPACE}",
    "\N{NO-BREAK SPACE}",
    "\N{OGHAM SPACE MARK}",
    "\N{EN QUAD}",
    "\N{EM QUAD}",
    "\N{EN SPACE}",
    "\N{EM SPACE}",
    "\N{THREE-PER-EM SPACE}",
    "\N{FOUR-PER-EM SPACE}",
    "\N{SIX-PER-EM SPACE}",
    "\N{FIGURE SPACE}",
    "\N{PUNCTUATION SPACE}",
    "\N{THIN SPACE}",
    "\N{HAIR SPACE}",
    "\N{NARROW NO-BREAK SPACE}",
    "\N{MEDIUM MATHEMATICAL SPACE}",
    "\N{IDEOGRAPHIC SPACE}",
    # Cc category
    "\t",
    "\n",
    "\v",
    "\f",
    "\r",
    # Language-specific
    "\N{ETHIOPIC WORDSPACE}",
)

_TO_SPACE = str.maketrans({ch: " " for ch in WHITESPACE_CHARACTERS})


def normalize_whitespace(instruction: str) -> str:
    return instruction.translate(_TO_SPACE)


def tokenize(instruction: str) -> List[str]:
    """Split an instruction into tokens on the fixed whitespace set, dropping empties."""
    return [token for token in normalize_whitespace(instruction).split(" ") if token]
