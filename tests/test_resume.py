import pytest

from split_tui.resume import exec_argv, extract_resume_command, find_token


def test_extracts_codex_resume_line():
    rows = [
        "Bye!",
        "To resume this session, run `codex resume abc-123-def`.",
        "",
    ]
    assert extract_resume_command("codex", rows) == "codex resume abc-123-def"


def test_extracts_pi_session_line():
    rows = ["Session saved.", "Resume with: pi --session 9f8e7d6c"]
    assert extract_resume_command("pi", rows) == "pi --session 9f8e7d6c"


def test_ignores_substring_matches():
    assert extract_resume_command("pi", ["pipe --continue"]) is None


def test_requires_resume_keyword():
    assert extract_resume_command("codex", ["codex hello world"]) is None


def test_prefers_most_recent_match():
    rows = ["old: codex resume aaaa", "new: codex resume bbbb", ""]
    assert extract_resume_command("codex", rows) == "codex resume bbbb"


def test_keeps_original_case_of_hint():
    rows = ["Run CODEX resume ID-42 now"]
    assert extract_resume_command("codex", rows) == "CODEX resume ID-42 now"


def test_strips_quotes_and_brackets():
    rows = ['(see "opencode --continue sess-1")']
    assert extract_resume_command("opencode", rows) == "opencode --continue sess-1"


def test_short_flag_keyword():
    assert extract_resume_command("agent", ["  agent -r 77  "]) == "agent -r 77"


def test_empty_rows_yield_nothing():
    assert extract_resume_command("codex", []) is None
    assert extract_resume_command("codex", ["", "   "]) is None


def test_find_token_respects_word_boundaries():
    assert find_token("pipe pi", "pi") == 5
    assert find_token("pipe", "pi") is None
    assert find_token("xpi", "pi") is None
    assert find_token("pi", "pi") == 0
    assert find_token("run: pi-x", "pi") == 5


def test_find_token_empty_needle():
    assert find_token("anything", "") is None


def test_exec_argv_single_word_runs_directly():
    assert exec_argv("codex") == ["codex"]


def test_exec_argv_multi_word_uses_shell():
    assert exec_argv("codex resume abc") == ["/bin/sh", "-c", "codex resume abc"]


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_exec_argv_rejects_blank(line):
    with pytest.raises(ValueError):
        exec_argv(line)