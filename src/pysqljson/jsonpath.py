"""JSON path segments and the dotted-path scanner."""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from pysqljson._constants import DEFAULT_MAX_PATH_DEPTH, MAX_INDEX_DIGITS
from pysqljson._errors import (
    ERR_MSG_INVALID_INDEX,
    ERR_MSG_INVALID_KEY,
    ERR_MSG_INVALID_PATH,
    ERR_MSG_PATH_TOO_DEEP,
    ERR_MSG_UNTERMINATED_INDEX,
    ERR_MSG_UNTERMINATED_QUOTE,
    InvalidIndexError,
    InvalidJSONPathError,
    MaxPathDepthExceededError,
    UnterminatedIndexError,
    UnterminatedQuoteError,
)

logger = logging.getLogger(__name__)

_INDEX_SEGMENT_RE = re.compile(r"^\[([0-9]+)\]$")

_DIGITS = frozenset("0123456789")

# Characters that end a bare key outside of quotes
_SEPARATORS = frozenset(".$")

# Text between a pair of quotes is written outside the MySQL path literal
_QUOTED_KEY_RE = re.compile(r"[\w .\[\]*$@:+-]+")


def _validate_key(name: str) -> None:
    """Reject keys that could end a SQL string literal early.

    Quotes must come in pairs and the text inside each pair is limited to
    word characters, spaces and path punctuation.
    """
    if "\\" in name or "\x00" in name:
        raise InvalidJSONPathError(
            ERR_MSG_INVALID_KEY,
            f"key {name!r} contains a backslash or null byte",
        )
    pieces = name.split('"')
    if len(pieces) % 2 == 0:
        raise InvalidJSONPathError(
            ERR_MSG_INVALID_KEY,
            f"key {name!r} has an unpaired quote",
        )
    for quoted in pieces[1::2]:
        if not _QUOTED_KEY_RE.fullmatch(quoted) or "--" in quoted:
            raise InvalidJSONPathError(
                ERR_MSG_INVALID_KEY,
                f"quoted key {quoted!r} in {name!r} is empty or has disallowed characters",
            )


def _to_index(digits: str, context: str) -> Index:
    if len(digits) > MAX_INDEX_DIGITS:
        raise InvalidIndexError(
            ERR_MSG_INVALID_INDEX,
            f"index of {len(digits)} digits in {context!r} exceeds {MAX_INDEX_DIGITS}",
        )
    return Index(int(digits))


@dataclass(frozen=True)
class Key:
    """Object member access. Quoted keys keep their quote characters."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"key name must be a string, got {type(self.name).__name__}")
        _validate_key(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """Array element access."""

    n: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError(f"index must be an int, got {type(self.n).__name__}")
        if self.n < 0:
            raise ValueError(f"index must be non-negative, got {self.n}")

    def __str__(self) -> str:
        return f"[{self.n}]"


Segment = Key | Index


@dataclass(frozen=True)
class Path:
    """An immutable, ordered sequence of path segments.

    An empty path is valid: it addresses the JSON document itself.
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def from_segments(cls, parts: Iterable[str | Segment]) -> Path:
        """Build a path taking each element verbatim as one segment.

        Strings of the form ``[N]`` become :class:`Index` segments; every
        other string, including pre-quoted ones, becomes a :class:`Key`.
        """
        segments: list[Segment] = []
        for part in parts:
            if isinstance(part, (Key, Index)):
                segments.append(part)
                continue
            if not isinstance(part, str):
                raise TypeError(
                    f"path segment must be a string, got {type(part).__name__}"
                )
            m = _INDEX_SEGMENT_RE.match(part)
            if m:
                segments.append(_to_index(m.group(1), part))
            else:
                segments.append(Key(part))
        return cls(tuple(segments))

    def parts(self) -> list[str]:
        """Return the textual form of each segment, e.g. ``["a", "[1]"]``."""
        return [str(s) for s in self.segments]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, i: int) -> Segment:
        return self.segments[i]


def path(*parts: str | Segment) -> Path:
    """Shorthand for :meth:`Path.from_segments`: ``path("b", "[1]", "d")``."""
    return Path.from_segments(parts)


class _ScanState(enum.Enum):
    PLAIN = "plain"
    QUOTED = "quoted"
    INDEX = "index"


class _Scanner:
    """Single-pass scanner state: the current mode plus an accumulator."""

    def __init__(self, text: str, max_depth: int) -> None:
        self.text = text
        self.max_depth = max_depth
        self.state = _ScanState.PLAIN
        self.buf: list[str] = []
        self.segments: list[Segment] = []
        self.index_start = 0

    def _append(self, segment: Segment) -> None:
        if len(self.segments) >= self.max_depth:
            raise MaxPathDepthExceededError(
                ERR_MSG_PATH_TOO_DEEP,
                f"path {self.text!r} exceeds {self.max_depth} segments",
            )
        self.segments.append(segment)

    def flush(self) -> None:
        if self.buf:
            self._append(Key("".join(self.buf)))
            self.buf.clear()

    def feed(self, pos: int, ch: str) -> None:
        if self.state is _ScanState.QUOTED:
            self.buf.append(ch)
            if ch == '"':
                self.state = _ScanState.PLAIN
        elif self.state is _ScanState.INDEX:
            if ch == "]":
                digits = "".join(self.buf)
                if not digits:
                    raise InvalidIndexError(
                        ERR_MSG_INVALID_INDEX,
                        f"empty index at offset {self.index_start} in {self.text!r}",
                    )
                self.buf.clear()
                self._append(_to_index(digits, self.text))
                self.state = _ScanState.PLAIN
            elif ch in _DIGITS:
                self.buf.append(ch)
            else:
                raise InvalidIndexError(
                    ERR_MSG_INVALID_INDEX,
                    f"unexpected {ch!r} at offset {pos} inside index in {self.text!r}",
                )
        elif ch == '"':
            self.buf.append(ch)
            self.state = _ScanState.QUOTED
        elif ch in _SEPARATORS:
            self.flush()
        elif ch == "[":
            self.flush()
            self.index_start = pos
            self.state = _ScanState.INDEX
        else:
            self.buf.append(ch)

    def finish(self) -> Path:
        if self.state is _ScanState.QUOTED:
            raise UnterminatedQuoteError(
                ERR_MSG_UNTERMINATED_QUOTE,
                f"no closing quote in {self.text!r}",
            )
        if self.state is _ScanState.INDEX:
            raise UnterminatedIndexError(
                ERR_MSG_UNTERMINATED_INDEX,
                f"index opened at offset {self.index_start} is never closed in {self.text!r}",
            )
        self.flush()
        return Path(tuple(self.segments))


def parse_path(text: str, *, max_depth: int = DEFAULT_MAX_PATH_DEPTH) -> Path:
    """Parse a dotted JSON path such as ``b.c[1].d`` or ``a."b.c[0]".d``.

    Args:
        text: The dotted path. A leading ``$`` root marker is accepted.
        max_depth: Maximum number of segments. Defaults to 64.

    Returns:
        The parsed Path. Input made only of separators yields an empty Path.

    Raises:
        UnterminatedQuoteError: If a quoted key is never closed.
        UnterminatedIndexError: If a ``[`` is never closed.
        InvalidIndexError: If an index is not an unsigned decimal integer.
        MaxPathDepthExceededError: If the path has more than max_depth segments.
        InvalidJSONPathError: If the path contains a null byte or a key
            with unpaired quotes, a backslash, or unsafe quoted text.
    """
    if "\x00" in text:
        raise InvalidJSONPathError(
            ERR_MSG_INVALID_PATH,
            f"null byte found in path: {text!r}",
        )
    scanner = _Scanner(text, max_depth)
    for pos, ch in enumerate(text):
        scanner.feed(pos, ch)
    result = scanner.finish()
    logger.debug("parsed JSON path %r into %d segments", text, len(result))
    return result


def dot_path(text: str) -> Path:
    """Parse a dotted path string; reads naturally at predicate call sites."""
    return parse_path(text)


def to_path(source: str | Path | Iterable[str | Segment]) -> Path:
    """Normalize a path argument: dotted string, Path, or segment sequence."""
    if isinstance(source, Path):
        return source
    if isinstance(source, str):
        return parse_path(source)
    return Path.from_segments(source)
