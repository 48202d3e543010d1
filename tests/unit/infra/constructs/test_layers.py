import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from infra.constructs.layers import PythonLocalBundling, _installer_commands


@pytest.fixture
def layer_source(tmp_path: Path) -> Path:
    """requirements.txt を持つレイヤーのソースディレクトリ"""
    source_path = tmp_path / "common_layer"
    source_path.mkdir()
    (source_path / "requirements.txt").write_text("pydantic>=2\nargon2-cffi\n")
    return source_path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "asset-output"
    path.mkdir()
    return path


class TestInstallerCommands:
    def test_uv_first_then_pip_into_python_dir(self, tmp_path: Path):
        requirements = tmp_path / "requirements.txt"
        target = tmp_path / "python"

        uv, pip = _installer_commands(requirements, target)

        assert uv[:3] == ["uv", "pip", "install"]
        assert pip[:2] == ["pip", "install"]
        assert str(target) in uv
        assert str(target) in pip


class TestPythonLocalBundling:
    """PythonLocalBundlingのテスト"""

    def test_bundles_with_uv(self, layer_source, output_dir):
        bundling = PythonLocalBundling(str(layer_source))

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0][0] == "uv"

    @pytest.mark.parametrize(
        "uv_failure",
        [FileNotFoundError("uv not found"), subprocess.CalledProcessError(1, "uv")],
    )
    def test_falls_back_to_pip(self, layer_source, output_dir, uv_failure):
        bundling = PythonLocalBundling(str(layer_source))

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [uv_failure, MagicMock(returncode=0)]
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        assert mock_run.call_args_list[1][0][0][0] == "pip"

    def test_docker_fallback_when_both_fail(self, layer_source, output_dir):
        bundling = PythonLocalBundling(str(layer_source))

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                FileNotFoundError("uv not found"),
                subprocess.CalledProcessError(1, "pip"),
            ]
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        assert mock_run.call_count == 2

    def test_missing_requirements(self, tmp_path: Path, output_dir):
        bundling = PythonLocalBundling(str(tmp_path / "empty"))

        with patch("subprocess.run") as mock_run:
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        mock_run.assert_not_called()
