""" Resolve output redirection and build the command to dispatch. """
from typing import Optional

from minish.command import Descriptor, ParsedCommand, RedirectSpec, Token, TokenKind
from minish.constants import STDERR_MARKER
from minish.exceptions import ShellSyntaxError
from minish.lexer import tokenize


def find_redirect(tokens: list[Token]) -> Optional[int]:
    """ Index of the first redirect operator after the command name. """
    for i in range(1, len(tokens)):
        if tokens[i].is_redirect:
            return i
    return None


def resolve(tokens: list[Token]) -> Optional[ParsedCommand]:
    """
    Split tokens into command name, arguments and an optional redirect.

    Only the first operator is honored and anything after its filename is
    ignored. A trailing operator with no filename is inert and stays in the
    arguments. A "2" token right before the operator selects stderr.
    """
    if not tokens:
        return None

    first = tokens[0]
    if first.kind is not TokenKind.WORD:
        raise ShellSyntaxError(f"syntax error near unexpected token `{first.text}'")

    i = find_redirect(tokens)
    if i is None or i == len(tokens) - 1:
        return ParsedCommand(first.text, [tok.text for tok in tokens[1:]])

    end = i
    descriptor = Descriptor.STDOUT
    if tokens[i - 1].text == STDERR_MARKER:
        descriptor = Descriptor.STDERR
        end = i - 1

    redirect = RedirectSpec(
        descriptor=descriptor,
        path=tokens[i + 1].text,
        append=tokens[i].kind is TokenKind.REDIRECT_APPEND,
    )
    return ParsedCommand(first.text, [tok.text for tok in tokens[1:end]], redirect)


def parse_line(line: str) -> Optional[ParsedCommand]:
    return resolve(tokenize(line))
