import pytest

from timeflow_engine.config import ScoringConfig, config_from_mapping, load_config
from timeflow_engine.lexicon import Category


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "missing.yaml") == ScoringConfig()


def test_shipped_config_matches_defaults():
    assert load_config() == ScoringConfig()


def test_yaml_overrides(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("quality_cap: 30\nfocus_categories:\n  - Business\n  - fitness\n", encoding="utf-8")
    config = load_config(path)
    assert config.quality_cap == 30.0
    assert config.focus_categories == frozenset({Category.BUSINESS, Category.FITNESS})
    assert config.task_cap == 25.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ScoringConfig()


def test_invalid_configs_are_rejected(tmp_path):
    with pytest.raises(ValueError):
        config_from_mapping({"quality_kap": 30})
    with pytest.raises(ValueError):
        config_from_mapping({"unproductive_categories": ["Gardening"]})
    with pytest.raises(ValueError):
        config_from_mapping({"water_target": "eight"})
    with pytest.raises(ValueError):
        config_from_mapping({"heavy_penalty": -1})
    with pytest.raises(ValueError):
        config_from_mapping(["quality_cap"])

    path = tmp_path / "broken.yaml"
    path.write_text("quality_cap: [30\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_bonus_cap_sums_both_bonuses():
    assert ScoringConfig().bonus_cap == 10.0


def test_whole_number_fields_reject_fractions():
    with pytest.raises(ValueError):
        config_from_mapping({"water_target": 7.5})
    with pytest.raises(ValueError):
        config_from_mapping({"fitness_target_seconds": 0.5})

    config = config_from_mapping({"water_target": 8.0, "quality_cap": 32.5})
    assert config.water_target == 8
    assert isinstance(config.water_target, int)
    assert config.quality_cap == 32.5
