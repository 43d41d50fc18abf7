"""Tests for the argument normalizer (core/normalizer.py).

Pure transformation — no I/O, no fixtures.

Coverage:
* Short-flag clusters expand one flag per token.
* Value-taking ``-L`` swallows the rest of its cluster.
* ``--name=value`` splits in two.
* ``--`` becomes the end-of-options marker; the tail is verbatim.
* Everything else passes through.
"""

from __future__ import annotations

import pytest

from boil.core.models import END_OF_OPTIONS, EndOfOptions
from boil.core.normalizer import normalize


class TestShortClusters:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (["-hv"], ["-h", "-v"]),
            (["-vh"], ["-v", "-h"]),
            (["-abc"], ["-a", "-b", "-c"]),
        ],
    )
    def test_cluster_expands_in_order(self, raw: list[str], expected: list[str]) -> None:
        assert normalize(raw) == expected

    def test_single_short_flag_untouched(self) -> None:
        assert normalize(["-L", "2"]) == ["-L", "2"]

    def test_value_flag_takes_remainder(self) -> None:
        assert normalize(["-L2"]) == ["-L", "2"]

    def test_value_flag_takes_remainder_even_if_letters(self) -> None:
        assert normalize(["-Lv"]) == ["-L", "v"]

    def test_value_flag_after_boolean_flag(self) -> None:
        assert normalize(["-vL3"]) == ["-v", "-L", "3"]

    def test_value_flag_last_in_cluster(self) -> None:
        assert normalize(["-vL", "3"]) == ["-v", "-L", "3"]

    def test_lone_dash_passes_through(self) -> None:
        assert normalize(["-"]) == ["-"]


class TestLongOptions:
    def test_equals_form_splits(self) -> None:
        assert normalize(["--level=2"]) == ["--level", "2"]

    def test_splits_on_first_equals_only(self) -> None:
        assert normalize(["--name=a=b"]) == ["--name", "a=b"]

    def test_empty_value_kept(self) -> None:
        assert normalize(["--level="]) == ["--level", ""]

    def test_plain_long_option_untouched(self) -> None:
        assert normalize(["--debug"]) == ["--debug"]


class TestEndOfOptions:
    def test_marker_replaces_double_dash(self) -> None:
        tokens = normalize(["ls", "--", "-Lv", "--x=y", "--"])
        assert tokens[0] == "ls"
        assert tokens[1] is END_OF_OPTIONS
        assert tokens[2:] == ["-Lv", "--x=y", "--"]

    def test_marker_is_not_a_string(self) -> None:
        (marker,) = normalize(["--"])
        assert isinstance(marker, EndOfOptions)
        assert not isinstance(marker, str)


class TestPassThrough:
    def test_commands_and_operands_unchanged(self) -> None:
        raw = ["generate", "files/file.txt", "new-file.txt"]
        assert normalize(raw) == raw

    def test_empty_argv(self) -> None:
        assert normalize([]) == []

    def test_accepts_any_iterable(self) -> None:
        assert normalize(iter(["-hv"])) == ["-h", "-v"]
