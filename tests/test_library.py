"""Tests for loading named fractal rules from YAML."""

from drawmodes.patterns import library
from drawmodes.patterns.fractal import PAPERFOLD


class TestBundledRules:

    def test_bundled_rules_present(self):
        assert {"paperfold", "paperfold-alt", "levy", "staircase"} <= set(library.rule_names())

    def test_bundled_paperfold_matches_builtin(self):
        assert library.get_rule("paperfold").templates == PAPERFOLD.templates

    def test_unknown_rule_falls_back(self, caplog):
        with caplog.at_level("WARNING", logger="drawmodes"):
            rule = library.get_rule("no-such-rule")
        assert rule is PAPERFOLD
        assert "no-such-rule" in caplog.text


class TestLoadRules:

    def test_missing_file(self, tmp_path):
        rules = library.load_rules(tmp_path / "absent.yaml")
        assert list(rules) == ["paperfold"]

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("levy: [unclosed\n", encoding="utf-8")
        assert list(library.load_rules(path)) == ["paperfold"]

    def test_bad_entry_skipped(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "good:\n"
            "  templates:\n"
            "    - [[0, 0], [1, 1]]\n"
            "empty:\n"
            "  templates: []\n"
            "broken:\n"
            "  templates:\n"
            "    - [[0, 0]]\n",
            encoding="utf-8",
        )
        rules = library.load_rules(path)
        assert "good" in rules
        assert "empty" not in rules
        assert "broken" not in rules
        assert rules["good"].templates == (((0.0, 0.0), (1.0, 1.0)),)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        assert list(library.load_rules(path)) == ["paperfold"]
