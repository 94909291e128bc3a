import pytest

from days_core.config import (
    DaysConfigService,
    load_caption_settings,
    load_image_settings,
    load_limits,
    load_output_settings,
    load_palette_defaults,
    load_runtime_paths,
)
from days_core.constants import (
    DEFAULT_CAPTION_SETTINGS,
    DEFAULT_IMAGE_SETTINGS,
    DEFAULT_LIMITS,
    DEFAULT_OUTPUT_SETTINGS,
    DEFAULT_PALETTE,
    DEFAULT_RUNTIME_PATHS,
)


def test_empty_config_uses_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_image_settings(config_file) == DEFAULT_IMAGE_SETTINGS
    assert load_limits(config_file) == DEFAULT_LIMITS
    assert load_palette_defaults(config_file) == DEFAULT_PALETTE
    assert load_caption_settings(config_file) == DEFAULT_CAPTION_SETTINGS
    assert load_runtime_paths(config_file) == DEFAULT_RUNTIME_PATHS
    assert load_output_settings(config_file) == DEFAULT_OUTPUT_SETTINGS


def test_days_config_service_delegates_loaders(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "image:\n"
        "  width: 1200\n"
        "  height: 630\n"
        "palette:\n"
        "  accent: '00FF00'\n"
        "runtime_paths:\n"
        "  out_dir: images\n"
    )

    service = DaysConfigService(config_file)
    assert service.load_image_settings() == {'width': 1200, 'height': 630}
    assert service.load_palette_defaults()['accent'] == '00ff00'
    assert service.load_runtime_paths() == {'out_dir': 'images'}

    defaults = service.load_request_defaults()
    assert defaults['width'] == 1200
    assert defaults['bgColor'] == DEFAULT_PALETTE['bgColor']


def test_palette_accepts_leading_hash(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("palette:\n  primary: '#ABCDEF'\n")
    assert load_palette_defaults(config_file)['primary'] == 'abcdef'


def test_palette_invalid_colour_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("palette:\n  secondary: 'blue'\n")
    with pytest.raises(ValueError) as exc_info:
        load_palette_defaults(config_file)
    assert "palette.secondary" in str(exc_info.value)


@pytest.mark.parametrize("value", ["0", "-5", "'wide'", "true"])
def test_image_invalid_dimension_raises(tmp_path, value):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"image:\n  width: {value}\n")
    with pytest.raises(ValueError):
        load_image_settings(config_file)


def test_limits_min_above_max_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("limits:\n  min_width: 500\n  max_width: 400\n")
    with pytest.raises(ValueError):
        load_limits(config_file)


def test_section_must_be_mapping(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("limits: [1, 2]\n")
    with pytest.raises(ValueError) as exc_info:
        load_limits(config_file)
    assert "expected mapping" in str(exc_info.value)


def test_caption_template_unknown_placeholder_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("caption:\n  template: '{month} days'\n")
    with pytest.raises(ValueError):
        load_caption_settings(config_file)


def test_caption_template_custom(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("caption:\n  template: '{year}: {percent:.0f}%'\n  font_family: monospace\n")
    settings = load_caption_settings(config_file)
    assert settings['template'] == '{year}: {percent:.0f}%'
    assert settings['font_family'] == 'monospace'


def test_output_filename_unknown_placeholder_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output:\n  filename: '{place}.png'\n")
    with pytest.raises(ValueError):
        load_output_settings(config_file)


def test_runtime_paths_empty_value_raises(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("runtime_paths:\n  out_dir: '  '\n")
    with pytest.raises(ValueError):
        load_runtime_paths(config_file)


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image_settings(tmp_path / "missing.yaml")
