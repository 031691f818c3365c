"""Unit tests for the shellword codec.

WHY: The string form of the database is only usable if every argument
list survives join followed by split unchanged. A lost quote silently
changes a compiler flag.

HOW: Tests exercise join and split separately on concrete inputs, then
check the round trip on argument lists with shell metacharacters.
"""

import pytest

from compilation_db.core.shellwords import ShellwordsError, join, split


class TestJoin:

    def test_safe_tokens_stay_bare(self):
        assert join(["cc", "-c", "a.c"]) == "cc -c a.c"

    def test_token_with_space_is_quoted(self):
        joined = join(["cc", "-c", "a b.c"])
        assert joined != "cc -c a b.c"
        assert "a b.c" in joined

    def test_empty_argument_is_quoted(self):
        assert join(["cc", ""]) == "cc ''"

    def test_empty_list_is_empty_string(self):
        assert join([]) == ""


class TestSplit:

    def test_plain_words(self):
        assert split("cc -c a.c") == ["cc", "-c", "a.c"]

    def test_double_quotes_and_escapes(self):
        assert split('cc "-DMSG=\\"hi there\\"" a\\ b.c') == ["cc", '-DMSG="hi there"', "a b.c"]

    def test_hash_is_not_a_comment(self):
        assert split("cc -DX=#1 a.c") == ["cc", "-DX=#1", "a.c"]

    def test_empty_string(self):
        assert split("") == []

    @pytest.mark.parametrize("text", ["cc 'a.c", 'cc "a.c', "cc a.c\\"])
    def test_malformed_input_raises(self, text):
        with pytest.raises(ShellwordsError):
            split(text)

    def test_shellwords_error_is_value_error(self):
        with pytest.raises(ValueError):
            split("cc 'unterminated")

    def test_rejects_none(self):
        with pytest.raises(TypeError):
            split(None)


class TestRoundTrip:

    @pytest.mark.parametrize(
        "argv",
        [
            ["cc", "-c", "a b.c"],
            ["cc", "-DMSG=\"hello world\"", "-c", "x.c"],
            ["cc", "-I", "it's here", "-o", "$HOME/out.o"],
            ["sh", "-c", "echo `date` && ls | wc -l; true"],
            ["cc", "", "  ", "\t", "line\nbreak"],
            ["gcc", "-DNAME=café", "文件.c"],
            [],
        ],
    )
    def test_split_inverts_join(self, argv):
        assert split(join(argv)) == argv
