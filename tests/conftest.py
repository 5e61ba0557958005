import pytest

from helpers import CONFIG, FakeRunner, write


@pytest.fixture
def project(tmp_path):
    write(tmp_path / "pybuildj.toml", CONFIG)
    (tmp_path / "src").mkdir()
    (tmp_path / "lib").mkdir()
    return tmp_path


@pytest.fixture
def runner():
    return FakeRunner()
