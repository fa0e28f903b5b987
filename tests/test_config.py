"""Tests for PlantUML settings loading."""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from wiki.markdown.config import PlantUMLConfig, get_pandoc_config, get_plantuml_config


class TestPlantUMLConfig:
    def test_defaults_when_setting_missing(self):
        with override_settings(PLANTUML=None):
            config = get_plantuml_config()
        assert config == PlantUMLConfig()
        assert config.enabled is False
        assert config.image_format == "svg"

    def test_reads_settings(self):
        with override_settings(
            PLANTUML={
                "ENABLE": True,
                "SERVER_URL": "https://plantuml.example.com/plantuml/",
                "IMAGE_FORMAT": "png",
                "DARK": True,
                "TIMEOUT": 3,
                "MAX_WORKERS": 0,
            }
        ):
            config = get_plantuml_config()

        assert config.enabled is True
        assert config.server_url == "https://plantuml.example.com/plantuml"
        assert config.image_format == "png"
        assert config.dark is True
        assert config.timeout == 3
        assert config.max_workers == 1

    def test_rejects_non_dict_setting(self):
        with override_settings(PLANTUML=["ENABLE"]):
            with pytest.raises(ImproperlyConfigured):
                get_plantuml_config()

    def test_rejects_non_integer_max_workers(self):
        with override_settings(PLANTUML={"MAX_WORKERS": "many"}):
            with pytest.raises(ImproperlyConfigured):
                get_plantuml_config()

    def test_sanitize_is_opt_in(self):
        with override_settings(PLANTUML={"ENABLE": True}):
            assert get_plantuml_config().sanitize is False
        with override_settings(PLANTUML={"ENABLE": True, "SANITIZE": True}):
            assert get_plantuml_config().sanitize is True


def test_pandoc_keeps_raw_html():
    """Placeholders are HTML comments and must survive conversion"""
    from_arg = get_pandoc_config()["extra_args"][0]
    assert "+raw_html" in from_arg
