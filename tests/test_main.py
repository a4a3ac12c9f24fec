"""
Tests for the root demo driver.
"""
from pathlib import Path

import main


def test_default_config_demo():
    """The bundled weather config runs until the table's lifetime ends."""
    records = main.main(Path(__file__).parent.parent / "config" / "weather_table.yaml")

    assert [r["percept"] for r in records] == ["sunny", "rainy", "rainy", "sunny"]
    assert [r["table"] for r in records] == ["open", "close", "close", None]
    assert [r["reflex"] for r in records] == ["open", "close", "close", "open"]


def test_explicit_override_visible(tmp_path):
    """Overridden entries diverge from the reflex rule."""
    path = tmp_path / "cfg.yaml"
    path.write_text(
        """
alphabet: [sunny, rainy]
generate:
  horizon: 3
  rules: {sunny: open, rainy: close}
table:
  - percepts: [rainy, rainy, sunny]
    action: close
demo:
  percepts: [rainy, rainy, sunny]
""",
        encoding="utf-8",
    )

    records = main.main(path)

    assert records[-1]["table"] == "close"
    assert records[-1]["reflex"] == "open"


def test_table_only_config(tmp_path):
    """Without rules only the table agent runs."""
    path = tmp_path / "cfg.yaml"
    path.write_text(
        """
table:
  - percepts: [a]
    action: 1
demo:
  percepts: [a, b]
""",
        encoding="utf-8",
    )

    records = main.main(path)

    assert [r["table"] for r in records] == [1, None]
    assert all(r["reflex"] is None for r in records)


def test_find_config_prefers_existing_file():
    """find_config points into the project's config directory."""
    assert main.find_config().parent.name == "config"
