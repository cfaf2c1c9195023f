"""Line-based prompting for the interactive admin helpers."""

from __future__ import annotations

import contextlib
import os
import sys
from typing import Dict, Iterator, Mapping, NamedTuple, Optional, Sequence, TextIO


class UserInputError(RuntimeError):
    """Raised when an answer cannot be read from the operator."""


class PromptField(NamedTuple):
    """A single answer requested from the operator."""

    key: str
    prompt: str


ADMIN_ACCOUNT_FIELDS: tuple[PromptField, ...] = (
    PromptField("user_id", "Enter your Firebase User ID (UID): "),
    PromptField("email", "Enter your email: "),
    PromptField("name", "Enter your name: "),
)


def _read_answer(
    prompt: str,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Write ``prompt`` and read one line, without its terminator."""

    if stdin is None and stdout is None:
        return input(prompt)

    target = stdout or sys.stdout
    target.write(prompt)
    target.flush()

    line = (stdin or sys.stdin).readline()
    if not line:
        raise EOFError
    return line[:-1] if line.endswith("\n") else line


@contextlib.contextmanager
def prompt_streams() -> Iterator[tuple[TextIO, TextIO]]:
    """Yield ``(answers, prompts)`` streams for the collector.

    Answers are always read from standard input, piped or typed. Prompts go to
    standard output unless an operator is typing at a terminal while standard
    output is redirected; then they are written to the controlling terminal so
    the redirected output holds only the record and the command.
    """

    if not sys.stdin.isatty() or sys.stdout.isatty():
        yield sys.stdin, sys.stdout
        return

    try:
        tty_out = open("CONOUT$" if os.name == "nt" else "/dev/tty", "w", encoding="utf-8", buffering=1)
    except OSError:
        yield sys.stdin, sys.stdout
        return

    try:
        yield sys.stdin, tty_out
    finally:
        tty_out.close()


def collect_responses(
    fields: Sequence[PromptField],
    *,
    preset: Mapping[str, Optional[str]] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Dict[str, str]:
    """Ask for every field in order and return the answers keyed by field.

    Answers are returned verbatim, including empty strings. Fields with a
    non-``None`` value in ``preset`` are not asked.
    """

    supplied = dict(preset or {})
    responses: Dict[str, str] = {}
    for field in fields:
        value = supplied.get(field.key)
        if value is not None:
            responses[field.key] = value
            continue
        try:
            responses[field.key] = _read_answer(field.prompt, stdin=stdin, stdout=stdout)
        except EOFError as exc:
            raise UserInputError(
                f"Input stream closed while waiting for {field.key.replace('_', ' ')}."
            ) from exc
    return responses


__all__ = [
    "ADMIN_ACCOUNT_FIELDS",
    "PromptField",
    "UserInputError",
    "collect_responses",
    "prompt_streams",
]
