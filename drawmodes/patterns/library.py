"""Named fractal rules, loaded from content/fractal_rules.yaml."""
from __future__ import annotations

import logging
import pathlib
from typing import Any, Dict, Optional, Tuple

import yaml

from drawmodes.patterns.fractal import PAPERFOLD, FractalRule, Template

logger = logging.getLogger(__name__)

RULES_PATH = pathlib.Path(__file__).resolve().parent.parent / "content" / "fractal_rules.yaml"


def _parse_template(raw: Any) -> Template:
    (sx, sy), (ex, ey) = raw
    return ((float(sx), float(sy)), (float(ex), float(ey)))


def _parse_rule(name: str, entry: Any) -> FractalRule:
    if not isinstance(entry, dict):
        raise ValueError(f"rule {name!r} must be a mapping")
    templates: Tuple[Template, ...] = tuple(
        _parse_template(t) for t in entry.get("templates", []) or []
    )
    return FractalRule(name=name, templates=templates, description=str(entry.get("description", "")))


def load_rules(path: Optional[pathlib.Path] = None) -> Dict[str, FractalRule]:
    """
    Read every rule in the YAML file. Malformed entries are skipped with a
    warning; the built-in paperfold rule is always present.
    """
    path = path or RULES_PATH
    rules: Dict[str, FractalRule] = {PAPERFOLD.name: PAPERFOLD}
    if not path.exists():
        logger.warning("No fractal rule file at %s; using built-in %s only.", path, PAPERFOLD.name)
        return rules
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        logger.warning("Could not parse %s: %s", path, exc)
        return rules
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping of rule names.", path)
        return rules
    for name, entry in data.items():
        try:
            rules[str(name)] = _parse_rule(str(name), entry)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping fractal rule %r from %s: %s", name, path, exc)
    logger.debug("Loaded %d fractal rules from %s.", len(rules), path)
    return rules


RULES: Dict[str, FractalRule] = load_rules()


def get_rule(name: str) -> FractalRule:
    rule = RULES.get(name)
    if rule is None:
        logger.warning(
            "Unknown fractal rule %r (known: %s); falling back to %s.",
            name, ", ".join(rule_names()), PAPERFOLD.name,
        )
        return PAPERFOLD
    return rule


def rule_names() -> list[str]:
    return sorted(RULES)
