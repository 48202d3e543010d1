import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"
LAYER_RUNTIME = _lambda.Runtime.PYTHON_3_14


def _installer_commands(requirements_path: Path, target_dir: Path) -> list[list[str]]:
    """ローカルで試すインストールコマンド（uv → pip の順）"""
    return [
        [
            "uv",
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "--target",
            str(target_dir),
            "--quiet",
        ],
        [
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "-t",
            str(target_dir),
            "--quiet",
        ],
    ]


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存ライブラリをインストールする Bundling クラス

    ローカルのインストールが全て失敗した場合は Docker にフォールバックする。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        target_dir = Path(output_dir) / "python"
        for command in _installer_commands(requirements_path, target_dir):
            if self._run(command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _run(self, command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False
        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    pydantic / argon2-cffi などハンドラーが使う依存ライブラリをまとめる。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=LAYER_RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[LAYER_RUNTIME],
            description="Flight reservation dependencies",
        )
