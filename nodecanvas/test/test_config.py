import pytest

from nodecanvas.config import EditorConfig, load_config


class TestConfig:

    def test_defaults(self):
        config = load_config({})
        assert config == EditorConfig()
        assert config.canvas_size(1280, 800) == (880, 752)

    def test_env_overrides(self):
        config = load_config({
            "NODECANVAS_PORT": "8080",
            "NODECANVAS_LOG_LEVEL": "debug",
            "NODECANVAS_TOOLBAR_HEIGHT": "60",
            "NODECANVAS_OUTPUT_PANEL_WIDTH": " ",
        })
        assert config.port == 8080
        assert config.log_level == "DEBUG"
        assert config.toolbar_height == 60.0
        assert config.output_panel_width == 400.0

    def test_invalid_value(self):
        with pytest.raises(ValueError, match="NODECANVAS_PORT"):
            load_config({"NODECANVAS_PORT": "eighty"})
