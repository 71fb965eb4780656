from pathlib import Path

from shaderlab.services import Settings


def test_defaults_without_file(tmp_path: Path):
    settings = Settings(tmp_path / "settings.ini")
    assert settings.get_sample_image() == Settings.DEFAULT_SAMPLE_IMAGE
    assert settings.get_categories() == ["blur"]
    assert settings.get_log_level() == "INFO"
    # Nothing is written
    assert not (tmp_path / "settings.ini").exists()


def test_bundled_sample_exists():
    assert Settings.DEFAULT_SAMPLE_IMAGE.is_file()


def test_values_from_file(tmp_path: Path):
    path = tmp_path / "settings.ini"
    path.write_text(
        "[preferences]\n"
        "sample_image = images/photo.png\n"
        "categories = blur, color_effect ,,\n"
        "log_level = debug\n",
        encoding="utf-8",
    )
    settings = Settings(path)
    assert settings.get_sample_image() == tmp_path / "images" / "photo.png"
    assert settings.get_categories() == ["blur", "color_effect"]
    assert settings.get_log_level() == "DEBUG"


def test_absolute_sample_path(tmp_path: Path):
    image = tmp_path / "abs.png"
    path = tmp_path / "settings.ini"
    path.write_text(f"[preferences]\nsample_image = {image}\n", encoding="utf-8")
    assert Settings(path).get_sample_image() == image


def test_empty_values_fall_back(tmp_path: Path):
    path = tmp_path / "settings.ini"
    path.write_text("[preferences]\ncategories =\nlog_level =\n", encoding="utf-8")
    settings = Settings(path)
    assert settings.get_categories() == ["blur"]
    assert settings.get_log_level() == "INFO"


def test_malformed_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "settings.ini"
    path.write_text("categories = stylize\n", encoding="utf-8")
    settings = Settings(path)
    assert settings.get_categories() == ["blur"]
