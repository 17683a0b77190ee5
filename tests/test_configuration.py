import pytest
from pydantic import ValidationError

from ai_text_detector.configuration import Configuration, load_configuration


class TestLoadConfiguration:
    def test_missing_file_gives_defaults(self, tmp_path):
        configuration = load_configuration(tmp_path / "config.toml")
        assert configuration == Configuration()
        assert configuration.min_text_length == 50
        assert configuration.scoring_strategy == "adaptive"
        assert configuration.literary_fixture_patterns is True

    def test_values_from_file(self, tmp_path):
        configuration_file = tmp_path / "config.toml"
        configuration_file.write_text(
            'scoring_strategy = "normalised-weighted"\n'
            "min_text_length = 20\n"
            "literary_fixture_patterns = false\n"
            'log_level = "DEBUG"\n'
        )
        configuration = load_configuration(configuration_file)
        assert configuration.scoring_strategy == "normalised-weighted"
        assert configuration.min_text_length == 20
        assert configuration.literary_fixture_patterns is False
        assert configuration.log_level == "DEBUG"

    def test_invalid_minimum_length(self, tmp_path):
        configuration_file = tmp_path / "config.toml"
        configuration_file.write_text("min_text_length = 0\n")
        with pytest.raises(ValidationError):
            load_configuration(configuration_file)
