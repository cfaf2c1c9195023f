"""Tests for the ordered prompt step."""

from __future__ import annotations

import io

import pytest

from admintools.prompts import (
    ADMIN_ACCOUNT_FIELDS,
    PromptField,
    UserInputError,
    collect_responses,
    prompt_streams,
)


def test_admin_account_fields_order() -> None:
    assert [field.key for field in ADMIN_ACCOUNT_FIELDS] == ["user_id", "email", "name"]


def test_collect_responses_reads_fields_in_order() -> None:
    stdin = io.StringIO("abc123\na@b.com\nAlice\n")
    stdout = io.StringIO()

    answers = collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=stdin, stdout=stdout)

    assert answers == {"user_id": "abc123", "email": "a@b.com", "name": "Alice"}
    prompts = stdout.getvalue()
    uid_pos = prompts.index("Enter your Firebase User ID (UID): ")
    email_pos = prompts.index("Enter your email: ")
    name_pos = prompts.index("Enter your name: ")
    assert uid_pos < email_pos < name_pos


def test_collect_responses_accepts_empty_answers() -> None:
    stdin = io.StringIO("\n\n\n")

    answers = collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=stdin, stdout=io.StringIO())

    assert answers == {"user_id": "", "email": "", "name": ""}


def test_collect_responses_does_not_strip_whitespace() -> None:
    stdin = io.StringIO(" uid \n\ta@b.com\nAlice Smith \n")

    answers = collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=stdin, stdout=io.StringIO())

    assert answers == {"user_id": " uid ", "email": "\ta@b.com", "name": "Alice Smith "}


def test_collect_responses_skips_preset_fields() -> None:
    stdin = io.StringIO("Alice\n")
    stdout = io.StringIO()

    answers = collect_responses(
        ADMIN_ACCOUNT_FIELDS,
        preset={"user_id": "abc123", "email": "a@b.com", "name": None},
        stdin=stdin,
        stdout=stdout,
    )

    assert answers == {"user_id": "abc123", "email": "a@b.com", "name": "Alice"}
    assert "Enter your email: " not in stdout.getvalue()
    assert "Enter your name: " in stdout.getvalue()


def test_collect_responses_raises_on_eof() -> None:
    stdin = io.StringIO("abc123\n")

    with pytest.raises(UserInputError) as excinfo:
        collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=stdin, stdout=io.StringIO())

    assert "email" in str(excinfo.value)


def test_collect_responses_uses_builtin_input(monkeypatch) -> None:
    answers = iter(["first", "second"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))

    fields = (PromptField("a", "A: "), PromptField("b", "B: "))
    assert collect_responses(fields) == {"a": "first", "b": "second"}


class _Stream(io.StringIO):
    def __init__(self, text: str = "", *, tty: bool) -> None:
        super().__init__(text)
        self._tty = tty
        self.was_closed = False

    def isatty(self):
        return self._tty

    def close(self):
        self.was_closed = True


def test_prompt_streams_reads_piped_stdin_even_with_a_terminal(monkeypatch) -> None:
    piped = _Stream("abc123\na@b.com\nAlice\n", tty=False)
    terminal = _Stream("TTY-UID\ntty@example.com\nTTY\n", tty=True)
    opened = []

    def fake_open(*args, **_kwargs):
        opened.append(args)
        return terminal

    monkeypatch.setattr("admintools.prompts.sys.stdin", piped)
    monkeypatch.setattr("admintools.prompts.sys.stdout", _Stream(tty=True))
    monkeypatch.setattr("admintools.prompts.open", fake_open, raising=False)

    with prompt_streams() as (answers_in, prompts_out):
        answers = collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=answers_in, stdout=prompts_out)

    assert answers == {"user_id": "abc123", "email": "a@b.com", "name": "Alice"}
    assert opened == []


def test_prompt_streams_uses_standard_streams_for_terminals(monkeypatch) -> None:
    fake_stdin = _Stream(tty=True)
    fake_stdout = _Stream(tty=True)
    monkeypatch.setattr("admintools.prompts.sys.stdin", fake_stdin)
    monkeypatch.setattr("admintools.prompts.sys.stdout", fake_stdout)

    with prompt_streams() as streams:
        assert streams == (fake_stdin, fake_stdout)


def test_prompt_streams_sends_prompts_to_terminal_when_stdout_redirected(monkeypatch) -> None:
    typed = _Stream("abc123\na@b.com\nAlice\n", tty=True)
    redirected = _Stream(tty=False)
    terminal = _Stream(tty=True)

    monkeypatch.setattr("admintools.prompts.sys.stdin", typed)
    monkeypatch.setattr("admintools.prompts.sys.stdout", redirected)
    monkeypatch.setattr("admintools.prompts.open", lambda *_a, **_k: terminal, raising=False)

    with prompt_streams() as (answers_in, prompts_out):
        assert answers_in is typed
        assert prompts_out is terminal
        answers = collect_responses(ADMIN_ACCOUNT_FIELDS, stdin=answers_in, stdout=prompts_out)

    assert answers["user_id"] == "abc123"
    assert "Enter your email: " in terminal.getvalue()
    assert redirected.getvalue() == ""
    assert terminal.was_closed


def test_prompt_streams_falls_back_without_terminal(monkeypatch) -> None:
    typed = _Stream(tty=True)
    redirected = _Stream(tty=False)

    def fake_open(*_args, **_kwargs):  # pragma: no cover - simple fallback path
        raise OSError("no controlling terminal")

    monkeypatch.setattr("admintools.prompts.sys.stdin", typed)
    monkeypatch.setattr("admintools.prompts.sys.stdout", redirected)
    monkeypatch.setattr("admintools.prompts.open", fake_open, raising=False)

    with prompt_streams() as streams:
        assert streams == (typed, redirected)
