"""
Clappers parser: configure, parse once, then query.

What this module provides
- Clappers: fluent builder over a Config registry; parse() fills a Values
  store from an argument vector; get_* accessors query it by any alias.
- parse(...): one-call shortcut building, parsing and returning a Clappers.

Parsing rules
- argv[0] (the program path) is always discarded.
- A token starting with "-" loses one leading dash, and a second one if present,
  so "-name" and "--name" both look up "name". The name is resolved against
  flags, then singles, then multiples.
  • flag: marked present.
  • single: takes the next token as its value unless there is none or it starts
    with "-"; in that case nothing is recorded and the dash token is parsed next.
  • multiple: takes every following token up to the next "-" token or the end.
  • unknown: dropped; the tokens after it are parsed normally.
- Any other token is a leftover.
- "--" is not special: it resolves the empty name and is normally dropped.

Queries never fail: unknown or unset arguments give False, "" or [].

Quick start
    from clappers import Clappers

    clappers = (
        Clappers.build()
        .add_flags(["h|help", "v|verbose"])
        .add_singles(["o|output"])
        .add_multiples(["i|input", "I"])
        .parse()
    )

    if clappers.get_flag("help"):
        ...
    output = clappers.get_single("output")
    inputs = clappers.get_multiple("input")
    files = clappers.get_leftovers()
"""
import logging
import shlex
import sys
from collections import deque
from collections.abc import Iterable

from .config import ArgumentKind, Config
from .utils import *
from .values import Values

logger = logging.getLogger(__name__)

# Marks a token as an option name rather than a value.
PREFIX = "-"


def _normalize(token):
    """
    Strip up to two leading PREFIX characters from an option token.
    """
    token = token.removeprefix(PREFIX)
    return token.removeprefix(PREFIX)


def _tokenize(argv):
    """
    Turn the parse() argument into a list of tokens, program path included.

    - Unset: a copy of sys.argv.
    - str: split shell-style with shlex.split; unbalanced quotes are a TypeError.
    - Iterable[str]: materialized as-is (tokens are not trimmed).
    """
    if argv is Unset:
        return list(sys.argv)
    if isinstance(argv, str):
        try:
            return shlex.split(argv)
        except ValueError as error:
            raise TypeError("parse() argument must be a well-formed command line (%s)" % str(error).lower()) from None
    if not isinstance(argv, Iterable):
        raise TypeError("parse() argument must be a string or an iterable of strings")

    tokens = list(argv)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError("parse() argument must be a string or an iterable of strings")
    return tokens


class Clappers(metaclass=IntrospectableType):
    """
    Command line argument parser: a Config registry paired with a Values store.

    Lifecycle
    - build() (or Clappers()) creates an empty parser.
    - add_flags/add_singles/add_multiples register specs; each returns self.
    - parse() runs exactly once and returns self.
    - get_flag/get_single/get_multiple/get_leftovers query the results.

    Properties
    - config: the Config registry (frozen once parse() starts).
    - values: the Values store.
    - parsed: whether parse() has run.
    """

    __introspectable__ = (
        "config",
        "values",
        "parsed",
    )

    def __init__(self):
        self._config = Config()
        self._values = Values()
        self._parsed = False

    @classmethod
    def build(cls):
        """
        Return an empty parser ready to be configured by chaining.
        """
        return cls()

    def add_flags(self, specs, /):
        """
        Register presence-only arguments, e.g. ["h|help", "v|verbose"].
        """
        self._config.register(ArgumentKind.FLAG, specs)
        return self

    def add_singles(self, specs, /):
        """
        Register arguments taking one value, e.g. ["o|output"].
        """
        self._config.register(ArgumentKind.SINGLE, specs)
        return self

    def add_multiples(self, specs, /):
        """
        Register arguments accumulating values, e.g. ["i|input", "I"].
        """
        self._config.register(ArgumentKind.MULTIPLE, specs)
        return self

    def parse(self, argv=Unset, /):
        """
        Parse an argument vector against the registered configuration.

        Parameters
        - argv:
          • Unset: read sys.argv.
          • str: a shell-like command line, split via shlex.split.
          • Iterable[str]: pre-tokenized vector.
          In every form the first token is the program path and is discarded,
          strings included:
              parse("tool -h")  # sees "-h"
              parse("-h")       # "-h" is taken as the program path; sees nothing

        Returns
        - self, for chaining into the accessors.

        Raises
        - TypeError: when called twice, when argv is not a string or an
          iterable of strings, or when a string argv has unbalanced quotes.
          A rejected argv leaves the parser unparsed and usable.
        """
        if self._parsed:
            raise TypeError("parse() must be called only once")

        tokens = deque(_tokenize(argv))
        self._config.freeze()
        self._parsed = True

        # discard argv[0]
        if tokens:
            tokens.popleft()

        while tokens:
            token = tokens.popleft()

            if not token.startswith(PREFIX):
                self._values._add_leftover(token)
                continue

            match self._config.lookup(name := _normalize(token)):
                case (ArgumentKind.FLAG, canonical):
                    self._values._set_flag(canonical)
                case (ArgumentKind.SINGLE, canonical):
                    if not tokens:
                        logger.debug("single %r at end of input has no value", canonical)
                    elif tokens[0].startswith(PREFIX):
                        logger.debug("single %r followed by option %r gets no value", canonical, tokens[0])
                    else:
                        self._values._set_single(canonical, tokens.popleft())
                case (ArgumentKind.MULTIPLE, canonical):
                    values = self._values._open_multiple(canonical)
                    while tokens and not tokens[0].startswith(PREFIX):
                        values.append(tokens.popleft())
                case None:
                    logger.debug("dropping unknown option %r (resolved as %r)", token, name)

        logger.debug(
            "parsed %d flag(s), %d single(s), %d multiple(s), %d leftover(s)",
            len(self._values._flags),
            len(self._values._singles),
            len(self._values._multiples),
            len(self._values._leftovers),
        )
        return self

    def get_flag(self, alias, /):
        """
        Return True if the flag known as `alias` was present, False otherwise.
        """
        if (canonical := self._config.resolve(ArgumentKind.FLAG, alias)) is None:
            return False
        return canonical in self._values._flags

    def get_single(self, alias, /):
        """
        Return the value of the single known as `alias`, or "" when unset.
        """
        if (canonical := self._config.resolve(ArgumentKind.SINGLE, alias)) is None:
            return ""
        return self._values._singles.get(canonical, "")

    def get_multiple(self, alias, /):
        """
        Return a new list with the values of the multiple known as `alias`.
        """
        if (canonical := self._config.resolve(ArgumentKind.MULTIPLE, alias)) is None:
            return []
        return list(self._values._multiples.get(canonical, ()))

    def get_leftovers(self):
        """
        Return a new list with every unassociated token, in command line order.
        """
        return list(self._values._leftovers)


def parse(flags=(), singles=(), multiples=(), argv=Unset):
    """
    Build a Clappers parser from the given specs and parse `argv` with it.

    Example
        clappers = parse(flags=["h|help"], singles=["o|output"], argv="ls -h -o out")

    Note that a string argv starts with the program name: argv="-h" alone
    consumes "-h" as the program path and leaves get_flag("h") False.
    """
    return (
        Clappers.build()
        .add_flags(flags)
        .add_singles(singles)
        .add_multiples(multiples)
        .parse(argv)
    )


__all__ = (
    "Clappers",
    "parse",
    "PREFIX",
)
