from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def load():
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)


class TestPackaging:
    def test_installs_only_the_pagesim_package(self):
        setuptools = load()["tool"]["setuptools"]
        assert "py-modules" not in setuptools
        assert all(name.split(".")[0] == "pagesim" for name in setuptools["packages"])

    def test_console_script_entry_point(self):
        assert load()["project"]["scripts"] == {"pagesim": "pagesim.cli:main"}
