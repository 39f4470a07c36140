"""Reader for Contao's PHP bootstrap files.

Contao 2.x/3.x keep their version constants and ``TL_CONFIG`` settings in
plain PHP files. Instead of executing them, the files are tokenized and
two statement shapes are extracted:

    define('VERSION', '3.5');
    $GLOBALS['TL_CONFIG']['websiteTitle'] = 'Contao Open Source CMS';

Values are reduced to Python literals (str, int, float, bool, None, list,
dict). Anything that is not a literal, such as function calls or constant
references, is kept as a :class:`RawExpression`. Every other statement is
skipped.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from contao_composer.core.exceptions import LegacyConfigError
from contao_composer.core.legacy.models import LegacySource, RawExpression

logger = logging.getLogger(__name__)

CONFIG_GLOBAL = "TL_CONFIG"

_TOKEN_RE = re.compile(
    r"""
      (?P<ws>\s+)
    | (?P<comment>//[^\n]*|\#[^\n]*|/\*.*?\*/)
    | (?P<open_tag><\?php|<\?=?)
    | (?P<close_tag>\?>)
    | (?P<sq>'(?:[^'\\]|\\.)*')
    | (?P<dq>"(?:[^"\\]|\\.)*")
    | (?P<number>0[xX][0-9a-fA-F]+|(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?)
    | (?P<variable>\$[A-Za-z_][A-Za-z0-9_]*)
    | (?P<ident>[A-Za-z_\\][A-Za-z0-9_\\]*)
    | (?P<arrow>=>)
    | (?P<op>===|!==|==|!=|\.=|[()\[\],;=.?:+*/<>!&|-])
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_SKIPPED = {"ws", "comment", "open_tag"}

_DQ_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "f": "\f",
    "e": "\x1b",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "$": "$",
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    start: int
    end: int

    def is_op(self, text: str) -> bool:
        return self.kind == "op" and self.text == text

    def is_ident(self, name: str) -> bool:
        return self.kind == "ident" and self.text.lower() == name.lower()


class _Unparseable(Exception):
    """Internal signal: the expression is not a literal."""


def tokenize(source: str) -> list[Token]:
    """Split PHP source into significant tokens.

    Whitespace, comments and the opening tag are dropped; a closing tag is
    turned into a statement terminator.
    """
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup or "other"
        if kind in _SKIPPED:
            continue
        if kind == "close_tag":
            tokens.append(Token("op", ";", match.start(), match.end()))
            continue
        tokens.append(Token(kind, match.group(), match.start(), match.end()))
    return tokens


def split_statements(tokens: Sequence[Token]) -> list[list[Token]]:
    """Group tokens into statements terminated by a top-level ``;``."""
    statements: list[list[Token]] = []
    current: list[Token] = []
    depth = 0
    for token in tokens:
        if token.kind == "op" and token.text in "([":
            depth += 1
        elif token.kind == "op" and token.text in ")]":
            depth = max(0, depth - 1)
        if token.is_op(";") and depth == 0:
            if current:
                statements.append(current)
            current = []
            continue
        current.append(token)
    if current:
        statements.append(current)
    return statements


def _split_top_level(tokens: Sequence[Token], separator: str = ",") -> list[list[Token]]:
    parts: list[list[Token]] = [[]]
    depth = 0
    for token in tokens:
        if token.kind == "op" and token.text in "([":
            depth += 1
        elif token.kind == "op" and token.text in ")]":
            depth -= 1
        if token.is_op(separator) and depth == 0:
            parts.append([])
            continue
        parts[-1].append(token)
    return parts


def _unquote_single(text: str) -> str:
    body = text[1:-1]
    return re.sub(r"\\([\\'])", r"\1", body)


def _unquote_double(text: str) -> str:
    body = text[1:-1]

    def _replace(match: re.Match[str]) -> str:
        char = match.group(1)
        return _DQ_ESCAPES.get(char, "\\" + char)

    return re.sub(r"\\(.)", _replace, body, flags=re.DOTALL)


def _number(text: str) -> int | float:
    lowered = text.lower()
    if lowered.startswith("0x"):
        return int(lowered, 16)
    if any(c in lowered for c in ".e"):
        return float(lowered)
    return int(lowered)


def _php_string(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else ""
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise _Unparseable()


class _ExpressionParser:
    """Recursive-descent reducer for PHP literal expressions."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.pos = 0

    def parse(self) -> Any:
        if not self.tokens:
            raise _Unparseable()
        value = self._expression()
        if self.pos != len(self.tokens):
            raise _Unparseable()
        return value

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _take(self) -> Token:
        token = self._peek()
        if token is None:
            raise _Unparseable()
        self.pos += 1
        return token

    def _expect_op(self, text: str) -> None:
        if not self._take().is_op(text):
            raise _Unparseable()

    def _expression(self) -> Any:
        parts = [self._term()]
        while (token := self._peek()) is not None and token.is_op("."):
            self.pos += 1
            parts.append(self._term())
        if len(parts) == 1:
            return parts[0]
        return "".join(_php_string(p) for p in parts)

    def _term(self) -> Any:
        token = self._take()
        if token.kind == "sq":
            return _unquote_single(token.text)
        if token.kind == "dq":
            if "$" in token.text.replace("\\$", ""):
                # Interpolated variables are not literals.
                raise _Unparseable()
            return _unquote_double(token.text)
        if token.kind == "number":
            return _number(token.text)
        if token.is_op("-") or token.is_op("+"):
            operand = self._term()
            if isinstance(operand, bool) or not isinstance(operand, (int, float)):
                raise _Unparseable()
            return -operand if token.text == "-" else operand
        if token.is_op("("):
            value = self._expression()
            self._expect_op(")")
            return value
        if token.is_op("["):
            return self._array("]")
        if token.kind == "ident":
            lowered = token.text.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
            if lowered == "null":
                return None
            if lowered == "array":
                self._expect_op("(")
                return self._array(")")
        raise _Unparseable()

    def _array(self, closer: str) -> list[Any] | dict[Any, Any]:
        items: list[tuple[Any, Any]] = []
        keyed = False
        while True:
            token = self._peek()
            if token is None:
                raise _Unparseable()
            if token.is_op(closer):
                self.pos += 1
                break
            first = self._expression()
            nxt = self._peek()
            if nxt is not None and nxt.kind == "arrow":
                self.pos += 1
                if isinstance(first, (list, dict)):
                    raise _Unparseable()
                items.append((first, self._expression()))
                keyed = True
            else:
                items.append((_NO_KEY, first))
            nxt = self._peek()
            if nxt is not None and nxt.is_op(","):
                self.pos += 1
            elif nxt is None or not nxt.is_op(closer):
                raise _Unparseable()

        if not keyed:
            return [value for _, value in items]

        result: dict[Any, Any] = {}
        next_index = 0
        for key, value in items:
            if key is _NO_KEY:
                key = next_index
            elif isinstance(key, bool):
                key = int(key)
            elif isinstance(key, str) and re.fullmatch(r"-?[1-9]\d*|0", key):
                key = int(key)
            if isinstance(key, int) and key >= next_index:
                next_index = key + 1
            result[key] = value
        return result


_NO_KEY = object()


def evaluate(tokens: Sequence[Token], source: str) -> Any:
    """Reduce an expression to a Python literal, or a RawExpression."""
    try:
        return _ExpressionParser(tokens).parse()
    except _Unparseable:
        text = source[tokens[0].start:tokens[-1].end] if tokens else ""
        logger.debug("Keeping non-literal PHP expression as raw text: %s", text)
        return RawExpression(text)


def _parse_define(statement: list[Token], source: str) -> tuple[str, Any] | None:
    if len(statement) < 4 or not statement[1].is_op("(") or not statement[-1].is_op(")"):
        return None
    args = _split_top_level(statement[2:-1])
    if len(args) < 2 or len(args[0]) != 1 or args[0][0].kind not in ("sq", "dq"):
        return None
    name_token = args[0][0]
    name = _unquote_single(name_token.text) if name_token.kind == "sq" else _unquote_double(name_token.text)
    if not args[1]:
        return None
    return name, evaluate(args[1], source)


def _parse_config_assignment(statement: list[Token], source: str) -> tuple[tuple[str, ...], Any] | None:
    if statement[0].text != "$GLOBALS":
        return None
    keys: list[str] = []
    pos = 1
    while pos + 2 < len(statement) and statement[pos].is_op("["):
        key_token = statement[pos + 1]
        if not statement[pos + 2].is_op("]"):
            return None
        if key_token.kind == "sq":
            keys.append(_unquote_single(key_token.text))
        elif key_token.kind == "dq":
            keys.append(_unquote_double(key_token.text))
        elif key_token.kind == "number":
            keys.append(str(_number(key_token.text)))
        else:
            return None
        pos += 3
    if len(keys) < 2 or keys[0] != CONFIG_GLOBAL:
        return None
    if pos >= len(statement) or not statement[pos].is_op("="):
        return None
    value_tokens = statement[pos + 1:]
    if not value_tokens:
        return None
    return tuple(keys[1:]), evaluate(value_tokens, source)


def parse_legacy_source(source: str, path: Path) -> LegacySource:
    """Extract constants and TL_CONFIG assignments from PHP source text."""
    result = LegacySource(path=path)
    for statement in split_statements(tokenize(source)):
        head = statement[0]
        if head.is_ident("define"):
            parsed = _parse_define(statement, source)
            if parsed is not None:
                name, value = parsed
                result.constants.setdefault(name, value)
        elif head.kind == "variable":
            assignment = _parse_config_assignment(statement, source)
            if assignment is not None:
                result.assignments.append(assignment)
    return result


def parse_legacy_file(path: Path) -> LegacySource:
    """Read and parse a legacy PHP bootstrap file.

    Args:
        path: File to read

    Returns:
        LegacySource with the file's constants and config assignments

    Raises:
        LegacyConfigError: If the file cannot be read
    """
    try:
        source = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise LegacyConfigError(
            f"Could not read legacy file {path}: {exc}",
            context={"path": str(path)},
        ) from exc
    parsed = parse_legacy_source(source, path)
    logger.debug(
        "Parsed %s: %d constants, %d config assignments",
        path,
        len(parsed.constants),
        len(parsed.assignments),
    )
    return parsed


__all__ = [
    "CONFIG_GLOBAL",
    "Token",
    "tokenize",
    "split_statements",
    "evaluate",
    "parse_legacy_source",
    "parse_legacy_file",
]
