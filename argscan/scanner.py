"""
argscan scanner: the single-pass, ambiguity-resolving token iterator.

The scanner walks the argument vector left to right exactly once. For every
argument it decides a token role from three sources, in priority order:

1. a sticky "everything is unnamed" mode, entered after the terminator or after
   the first positional argument; it never reverts, even across another '--'
   or flag-shaped text.
2. a one-shot "next is a flag value" expectation, armed by the previous flag.
3. the lexical classification of the argument (argscan.tokens.classify), plus
   the registry of known flags.

Ambiguity
- a flag that is not registered, has no inline value and is not the last flag
  (last argument, or followed by a literal '--') cannot be classified alone:
  it may be a bool flag or a flag waiting for its value.
- the scanner yields such a token as FlagToken with token.ambiguous == True and
  lets the consumer decide by sending an Instruction back:
  • Instruction.NEXT (or None): the flag is complete, continue normally.
  • Instruction.EXPECT_VALUE: the next argument is the flag's value.
  • Instruction.STOP: end the traversal, no further tokens.
- an unknown flag in the last position defaults to bool, so a missing trailing
  value never leaves the consumer hanging.
- when the vector ends while a value is expected, the expectation is dropped
  silently; reporting it is the downstream binder's job.

Drivers
- scan(args, known_flags): the raw generator (send protocol).
- walk(args, known_flags, callback): drives scan() with a per-token callback.
- resolve(args, known_flags, ambiguous_as_bool): applies a fixed policy to
  ambiguous flags for consumers that only iterate.

Example
    >>> scanner = scan(["--x", "1"], {})
    >>> next(scanner).ambiguous
    True
    >>> scanner.send(Instruction.EXPECT_VALUE)
    flag-value-token(arg='1', known=False)
"""
from enum import IntEnum

from .tokens import *
from .utils import Unset


class Instruction(IntEnum):
    """
    consumer decision returned for each token.
    """
    NEXT = 1
    EXPECT_VALUE = 2
    STOP = 3


def _is_last(args, index):
    return index == len(args) - 1 or args[index + 1] == "--"


def scan(args, known_flags, /):
    """
    Yield a token per argument, receiving an Instruction after each one.

    Parameters
    - args: Sequence[str]
      the raw arguments (indexable; the next argument is peeked for '--').
    - known_flags: Mapping[str, bool]
      registry of flag name -> "is bool".

    Protocol
    - start with next(scanner), then answer each token with scanner.send(instruction).
      plain iteration sends None, which behaves like Instruction.NEXT.
    - Instruction.STOP finishes the generator (StopIteration on send).
    """
    expecting = None
    expecting_known = False

    for index, arg in enumerate(args):
        if expecting is Role.UNNAMED:
            if (yield UnnamedToken(arg)) is Instruction.STOP:
                return
            continue

        if expecting is Role.FLAG_VALUE:
            expecting = None
            if (yield FlagValueToken(arg, known=expecting_known)) is Instruction.STOP:
                return
            continue

        parsed = classify(arg)

        if parsed.terminator:
            expecting = Role.UNNAMED
            if (yield TerminatorToken(arg)) is Instruction.STOP:
                return
            continue

        if not parsed.flag:
            # the first positional freezes the rest of the vector
            expecting = Role.UNNAMED
            if (yield UnnamedToken(arg)) is Instruction.STOP:
                return
            continue

        known = parsed.name in known_flags
        bool = known_flags.get(parsed.name, False)
        if not known and parsed.value is None and _is_last(args, index):
            bool = True

        instruction = yield FlagToken(
            arg,
            parsed.name,
            parsed.value,
            bool=bool,
            known=known,
            double_dashed=parsed.double_dashed,
        )
        if instruction is Instruction.STOP:
            return

        if parsed.value is None and not bool and (known or instruction is Instruction.EXPECT_VALUE):
            expecting = Role.FLAG_VALUE
            expecting_known = known


def walk(args, known_flags, callback, /):
    """
    Drive scan() with a callback deciding the Instruction for every token.

    The callback is invoked synchronously; returning None means Instruction.NEXT.
    Exceptions raised by the callback propagate and end the traversal.
    """
    scanner = scan(args, known_flags)
    token = next(scanner, Unset)
    while token is not Unset:
        instruction = callback(token)
        try:
            token = scanner.send(instruction)
        except StopIteration:
            break


def resolve(args, known_flags, /, ambiguous_as_bool=False):
    """
    Iterate tokens with a fixed policy for ambiguous flags.

    Policy
    - ambiguous_as_bool=True: the ambiguous flag is yielded resolved as bool
      (token.bool is True) and the next argument is classified on its own.
    - ambiguous_as_bool=False: the ambiguous flag is yielded as is and takes the
      next argument as its value.

    Stopping
    - leave the loop (break) or close() the generator; the underlying scanner
      is closed with it.
    """
    scanner = scan(args, known_flags)
    try:
        token = next(scanner, Unset)
        while token is not Unset:
            instruction = Instruction.NEXT
            if isinstance(token, FlagToken) and token.ambiguous:
                if ambiguous_as_bool:
                    token = token.as_bool()
                else:
                    instruction = Instruction.EXPECT_VALUE
            yield token
            try:
                token = scanner.send(instruction)
            except StopIteration:
                return
    finally:
        scanner.close()


__all__ = (
    "Instruction",
    "scan",
    "walk",
    "resolve",
)
