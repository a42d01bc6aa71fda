import os

import eveplanner_api
from eveplanner_api.app.core.config import PACKAGE_DIR, Settings, resolve_path


def test_relative_paths_resolve_inside_the_package_directory():
    package_dir = os.path.dirname(os.path.realpath(eveplanner_api.__file__))
    assert str(PACKAGE_DIR) == package_dir
    assert resolve_path("uploads") == os.path.join(package_dir, "uploads")


def test_absolute_paths_are_kept(tmp_path):
    assert resolve_path(str(tmp_path / "data.db")) == str(tmp_path / "data.db")


def test_cors_origin_list_splits_and_trims():
    settings = Settings(cors_origins="https://a.example, https://b.example ,")
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]
