""" Tokens and parsed commands. """
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class TokenKind(Enum):
    WORD = auto()
    REDIRECT_OUT = auto()
    REDIRECT_APPEND = auto()


class Descriptor(Enum):
    """ Output stream a redirect applies to. """
    STDOUT = 1
    STDERR = 2


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    @property
    def is_redirect(self) -> bool:
        return self.kind in (TokenKind.REDIRECT_OUT, TokenKind.REDIRECT_APPEND)


@dataclass(frozen=True)
class RedirectSpec:
    descriptor: Descriptor
    path: str
    append: bool = False

    @property
    def mode(self) -> str:
        return "a" if self.append else "w"


@dataclass
class ParsedCommand:
    """ A single command line after tokenizing and redirect resolution. """
    name: str
    args: list[str] = field(default_factory=list)
    redirect: Optional[RedirectSpec] = None
