"""Instruction text handling: tokenizing and grammar parsing."""

from payinstruct.instruction.tokenizer import tokenize, normalize_whitespace
from payinstruct.instruction.grammar import parse_instruction, parse_instruction_tokens, parse_amount

__all__ = [
    "tokenize",
    "normalize_whitespace",
    "parse_instruction",
    "parse_instruction_tokens",
    "parse_amount",
]
