""" Lexical analysis for shell commands. """
from enum import Enum, auto

from minish.command import Token, TokenKind
from minish.constants import DOUBLE_QUOTE_ESCAPABLE, STDOUT_MARKER


class LexState(Enum):
    NORMAL = auto()
    IN_SINGLE = auto()
    IN_DOUBLE = auto()
    ESCAPE = auto()
    ESCAPE_IN_DOUBLE = auto()

    @property
    def escaping(self) -> bool:
        return self in (LexState.ESCAPE, LexState.ESCAPE_IN_DOUBLE)

    @property
    def return_state(self) -> "LexState":
        """ State to resume once the escaped character is consumed. """
        if self is LexState.ESCAPE_IN_DOUBLE:
            return LexState.IN_DOUBLE
        return LexState.NORMAL


def tokenize(line: str) -> list[Token]:
    """
    Split a line into words and redirect operators.

    Quotes and escaping backslashes are removed; only their payload reaches
    the word text. Input ending inside a quote yields whatever was
    accumulated, and a trailing lone backslash is dropped.
    """
    tokens: list[Token] = []
    buf: list[str] = []
    state = LexState.NORMAL

    def flush():
        if buf:
            tokens.append(Token(TokenKind.WORD, "".join(buf)))
            buf.clear()

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        i += 1

        if state.escaping:
            if state is LexState.ESCAPE_IN_DOUBLE and ch not in DOUBLE_QUOTE_ESCAPABLE:
                buf.append("\\")
            buf.append(ch)
            state = state.return_state
            continue

        if ch == "'" and state is not LexState.IN_DOUBLE:
            state = LexState.NORMAL if state is LexState.IN_SINGLE else LexState.IN_SINGLE
            continue

        if ch == '"' and state is not LexState.IN_SINGLE:
            state = LexState.NORMAL if state is LexState.IN_DOUBLE else LexState.IN_DOUBLE
            continue

        if ch == "\\" and state is not LexState.IN_SINGLE:
            state = LexState.ESCAPE_IN_DOUBLE if state is LexState.IN_DOUBLE else LexState.ESCAPE
            continue

        if state is LexState.NORMAL:
            if ch == ">":
                if i < n and line[i] == ">":
                    i += 1
                    flush()
                    tokens.append(Token(TokenKind.REDIRECT_APPEND, ">>"))
                else:
                    # `1>` is an explicit stdout redirect, not an argument
                    if "".join(buf) == STDOUT_MARKER:
                        buf.clear()
                    flush()
                    tokens.append(Token(TokenKind.REDIRECT_OUT, ">"))
                continue

            if ch == " ":
                flush()
                continue

        buf.append(ch)

    flush()
    return tokens
