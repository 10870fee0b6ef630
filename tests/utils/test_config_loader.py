import pytest

from knight_tour.core.exceptions import ConfigurationError
from knight_tour.utils.config_loader import (
    DEFAULT_CONFIG_PATH,
    LimitsConfig,
    TourConfig,
    _load_yaml_file,
    _parse_tour_cfg_from_dict,
    clear_config_cache,
    get_config,
    load_config,
)


class TestTourConfig:
    def test_tour_config_immutable(self):
        cfg = TourConfig(board_size=8, start=None, limits=LimitsConfig())
        with pytest.raises(AttributeError):
            cfg.board_size = 5

    def test_with_board_size(self):
        cfg = TourConfig(board_size=8, start="a1", limits=LimitsConfig())
        resized = cfg.with_board_size(5)

        assert resized.board_size == 5
        assert resized.start == "a1"
        assert cfg.board_size == 8

    @pytest.mark.parametrize("size", [1, 15, 0, -3])
    def test_with_board_size_outside_limits(self, size):
        cfg = TourConfig(board_size=8, start=None, limits=LimitsConfig())
        with pytest.raises(ConfigurationError) as excinfo:
            cfg.with_board_size(size)
        assert excinfo.value.config_key == "board_size"


class TestLoadConfig:
    def test_bundled_defaults(self):
        cfg = load_config()

        assert cfg.board_size == 8
        assert cfg.start is None
        assert cfg.limits == LimitsConfig(min_board_size=2, max_board_size=14)
        assert DEFAULT_CONFIG_PATH.exists()

    def test_load_valid_file(self, write_yaml, valid_tour_config_dict):
        cfg = load_config(write_yaml(valid_tour_config_dict))

        assert cfg.board_size == 6
        assert cfg.start == "c4"
        assert cfg.limits.min_board_size == 3
        assert cfg.limits.max_board_size == 10

    def test_empty_file_uses_defaults(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")
        cfg = load_config(temp_yaml_file)

        assert cfg.board_size == 8
        assert cfg.start is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("board_size: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_top_level_must_be_mapping(self, write_yaml):
        with pytest.raises(ConfigurationError):
            load_config(write_yaml([1, 2, 3]))


class TestParseTourConfig:
    def test_start_is_normalised(self):
        cfg = _parse_tour_cfg_from_dict({"start": " E4 "})
        assert cfg.start == "e4"

    def test_blank_start_means_default(self):
        cfg = _parse_tour_cfg_from_dict({"start": ""})
        assert cfg.start is None

    def test_board_size_outside_limits(self):
        with pytest.raises(ConfigurationError) as excinfo:
            _parse_tour_cfg_from_dict({"board_size": 20})
        assert excinfo.value.details == {"board_size": 20}

    def test_board_size_not_a_number(self):
        with pytest.raises(ConfigurationError):
            _parse_tour_cfg_from_dict({"board_size": "big"})

    @pytest.mark.parametrize(
        "limits",
        [
            {"min_board_size": 0},
            {"min_board_size": 6, "max_board_size": 4},
            {"max_board_size": 30},
        ],
    )
    def test_invalid_limits(self, limits):
        with pytest.raises(ConfigurationError):
            _parse_tour_cfg_from_dict({"board_size": 5, "limits": limits})

    def test_custom_limits_allow_larger_boards(self):
        cfg = _parse_tour_cfg_from_dict({"board_size": 20, "limits": {"max_board_size": 26}})
        assert cfg.board_size == 20


class TestConfigCache:
    def test_get_config_caches(self, write_yaml, valid_tour_config_dict):
        clear_config_cache()
        path = write_yaml(valid_tour_config_dict)

        first = get_config(path)
        assert get_config(path) is first

        clear_config_cache()
        assert get_config(path) is not first
        assert get_config(path) == first
        clear_config_cache()

    def test_default_config_cached(self):
        clear_config_cache()
        assert get_config() is get_config()
        clear_config_cache()
