"""Prompt tokenizer for ``$alias`` skill and set references.

Fenced code blocks are dropped and inline code spans are blanked before
scanning, so references inside code never resolve.
"""

from __future__ import annotations

from skillset.constants.naming import REF_SEPARATOR
from skillset.constants.tokens import (
    FENCE_PATTERN,
    INLINE_CODE_MARKER,
    KIND_PREFIX_PATTERN,
    LEFT_BOUNDARY_CHARS,
    LINE_SPLIT_PATTERN,
    RIGHT_BOUNDARY_CHARS,
    TOKEN_PATTERN,
    TOKEN_SIGIL,
)
from skillset.model import InvocationKind, InvocationToken
from skillset.utils import normalize_ref


def tokenize_prompt(text: str) -> list[InvocationToken]:
    """Return every accepted invocation token in ``text`` in order of appearance."""
    tokens: list[InvocationToken] = []
    for segment in strip_code_blocks(text):
        for match in TOKEN_PATTERN.finditer(segment):
            start, end = match.span()
            before = segment[start - 1] if start > 0 else None
            after = segment[end] if end < len(segment) else None
            if not (_is_left_boundary(before) and _is_right_boundary(after)):
                continue

            ref = normalize_ref(match.group("ref"))
            if not ref:
                continue
            kind_text = match.group("kind")
            kind: InvocationKind | None = kind_text.lower() if kind_text else None  # type: ignore[assignment]
            namespace, alias = _split_ref(ref)
            tokens.append(InvocationToken(raw=match.group(0), alias=alias, namespace=namespace, kind=kind))
    return tokens


def parse_invocation(text: str, kind: InvocationKind | None = None) -> InvocationToken:
    """Build a token from a single CLI-style argument such as ``set:frontend`` or ``$p:api``.

    An explicit ``skill:``/``set:`` prefix in ``text`` wins over ``kind``.
    """
    trimmed = text.strip()
    has_sigil = trimmed.startswith(TOKEN_SIGIL)
    cleaned = trimmed[1:] if has_sigil else trimmed

    explicit_kind: InvocationKind | None = None
    kind_match = KIND_PREFIX_PATTERN.match(cleaned)
    if kind_match:
        explicit_kind = kind_match.group(1).lower()  # type: ignore[assignment]
        cleaned = cleaned[kind_match.end() :]

    namespace, alias = _split_ref(normalize_ref(cleaned))
    if has_sigil:
        raw = trimmed
    else:
        prefix = f"{explicit_kind}:" if explicit_kind else ""
        raw = f"{TOKEN_SIGIL}{prefix}{cleaned}"
    return InvocationToken(raw=raw, alias=alias, namespace=namespace, kind=explicit_kind or kind)


def strip_code_blocks(text: str) -> list[str]:
    """Split ``text`` into scannable segments with code removed.

    Lines inside fences are dropped and each fence closes a segment. Inline
    code spans are replaced by spaces so offsets within a line are kept.
    """
    segments: list[str] = []
    buffer: list[str] = []
    in_fence = False

    for line in LINE_SPLIT_PATTERN.split(text):
        stripped = line.strip()
        fence_match = FENCE_PATTERN.match(stripped)
        if fence_match:
            if in_fence:
                segments.append("\n".join(buffer))
                buffer = []
                in_fence = False
                fence = fence_match.group(0)
                remainder = line[line.index(fence) + len(fence) :]
                if remainder.strip():
                    buffer.append(_blank_inline_code(remainder))
            else:
                in_fence = True
            continue

        if in_fence:
            continue
        buffer.append(_blank_inline_code(line))

    if buffer:
        segments.append("\n".join(buffer))
    return segments


def _blank_inline_code(line: str) -> str:
    # Only a closed pair of backticks is code; a lone backtick is plain text.
    chars = list(line)
    start = line.find(INLINE_CODE_MARKER)
    while start != -1:
        end = line.find(INLINE_CODE_MARKER, start + 1)
        if end == -1:
            break
        chars[start : end + 1] = " " * (end - start + 1)
        start = line.find(INLINE_CODE_MARKER, end + 1)
    return "".join(chars)


def _split_ref(ref: str) -> tuple[str | None, str]:
    parts = [part for part in ref.split(REF_SEPARATOR) if part]
    if len(parts) > 1:
        return parts[0], REF_SEPARATOR.join(parts[1:])
    return None, parts[0] if parts else ""


def _is_left_boundary(char: str | None) -> bool:
    return char is None or char.isspace() or char in LEFT_BOUNDARY_CHARS


def _is_right_boundary(char: str | None) -> bool:
    return char is None or char.isspace() or char in RIGHT_BOUNDARY_CHARS
