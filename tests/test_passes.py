"""
Tests for the group splitting pass.
"""
from __future__ import annotations

import pytest

from memaddr_parser.passes.group_split import GroupSplitPass


class TestGroupSplitPass:
    @pytest.fixture
    def splitter(self):
        return GroupSplitPass()

    def test_single_group(self, splitter):
        assert splitter.run("0xH1234=5") == ["0xH1234=5"]

    def test_two_groups(self, splitter):
        assert splitter.run("0xH1234=5S0xH5678=10") == ["0xH1234=5", "0xH5678=10"]

    def test_empty_string_is_one_group(self, splitter):
        assert splitter.run("") == [""]

    def test_lone_separator(self, splitter):
        assert splitter.run("S") == ["", ""]

    def test_separators_only(self, splitter):
        assert splitter.run("SSS") == ["", "", "", ""]

    def test_bit6_size_not_a_separator(self, splitter):
        assert splitter.run("0xS1234=5") == ["0xS1234=5"]

    def test_bit6_size_with_uppercase_x(self, splitter):
        assert splitter.run("0XS1234=5") == ["0XS1234=5"]

    def test_bit6_size_inside_alt_group(self, splitter):
        assert splitter.run("0xH1=1S0xS2=1") == ["0xH1=1", "0xS2=1"]

    def test_lowercase_s_never_splits(self, splitter):
        assert splitter.run("0xH1234=5s") == ["0xH1234=5s"]

    def test_core_group_empty_alt_groups_present(self, splitter):
        groups = splitter.run("S0xH1=1S0xH2=2")
        assert groups == ["", "0xH1=1", "0xH2=2"]
