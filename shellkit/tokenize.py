"""Split a raw input line into argument tokens."""

import re

# A quoted span runs to the matching quote, or to end of line when the quote
# is never closed. Anything else is a run of non-whitespace.
_TOKEN_RE = re.compile(r"""'([^']*)'?|"([^"]*)"?|(\S+)""")


def tokenize(line: str) -> list[str]:
    """Return the whitespace/quote-delimited tokens of line, quotes stripped.

    No escapes and no nesting: this is not a shell grammar. An unterminated
    quote swallows the rest of the line rather than raising.
    """
    tokens = []
    for m in _TOKEN_RE.finditer(line):
        single, double, bare = m.groups()
        if bare is not None:
            tokens.append(bare)
        elif single is not None:
            tokens.append(single)
        else:
            tokens.append(double)
    return tokens
