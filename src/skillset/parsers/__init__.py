"""Text parsers for prompts and skill documents."""

from .skill_markdown import read_skill_from_path
from .tokens import parse_invocation, strip_code_blocks, tokenize_prompt

__all__ = ["parse_invocation", "read_skill_from_path", "strip_code_blocks", "tokenize_prompt"]
