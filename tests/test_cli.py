import shutil
from pathlib import Path
from unittest.mock import call, patch

from click.testing import CliRunner

from cosmos_swagger_gen.cli import main
from cosmos_swagger_gen.errors import FetchError

FIXTURES = Path(__file__).parent / "fixtures"
CHAINS = FIXTURES / "chains"


class TestCliGenerate:
    def test_generate_from_chain_dir(self, tmp_path):
        output_file = tmp_path / "src" / "types" / "rest.ts"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(CHAINS), "-o", str(output_file)])

        assert result.exit_code == 0, result.output
        assert "Found 2 chains: kyve, osmosis" in result.output
        assert "Generated 4 operations for 2 chains" in result.output
        content = output_file.read_text(encoding="utf-8")
        assert content.startswith("// DO NOT EDIT THIS FILE MANUALLY")
        assert "export type ChainName = 'kyve' | 'osmosis'" in content
        assert "PaginationResponse" not in content

    def test_generate_from_environment(self, tmp_path):
        output_file = tmp_path / "rest.ts"
        runner = CliRunner()
        result = runner.invoke(
            main, ["generate"],
            env={"INPUT_FOLDER_PATH": str(CHAINS), "OUT_FILE_PATH": str(output_file)},
        )

        assert result.exit_code == 0, result.output
        assert output_file.exists()

    def test_generate_with_options(self, tmp_path):
        output_file = tmp_path / "rest.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(CHAINS), "-o", str(output_file),
            "--body-params", "body", "--resolve-refs", "--pagination",
        ])

        assert result.exit_code == 0, result.output
        content = output_file.read_text(encoding="utf-8")
        assert "export interface PaginationResponse {" in content
        assert "& PaginationResponse" in content
        assert "tx_bytes: string" in content

    def test_generate_rejects_openapi3(self, tmp_path):
        shutil.copy(FIXTURES / "openapi3.yaml", tmp_path / "kyve.yaml")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(tmp_path), "-o", str(tmp_path / "out.ts")])

        assert result.exit_code == 1
        assert "Swagger 2.0" in result.output
        assert not (tmp_path / "out.ts").exists()

    def test_generate_rejects_duplicate_chain(self, tmp_path):
        shutil.copy(CHAINS / "kyve.yaml", tmp_path / "kyve.yaml")
        shutil.copy(CHAINS / "kyve.yaml", tmp_path / "kyve.yml")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(tmp_path), "-o", str(tmp_path / "out.ts")])

        assert result.exit_code == 1
        assert "more than once" in result.output

    def test_generate_empty_dir(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(tmp_path), "-o", str(tmp_path / "out.ts")])

        assert result.exit_code == 1
        assert "There isn't any Swagger file" in result.output

    def test_generate_missing_operation_id(self, tmp_path):
        (tmp_path / "kyve.yaml").write_text(
            "swagger: '2.0'\npaths:\n  /health:\n    get:\n      summary: no id\n", encoding="utf-8"
        )
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(tmp_path), "-o", str(tmp_path / "out.ts")])

        assert result.exit_code == 1
        assert "'/health'" in result.output
        assert "'kyve'" in result.output

    @patch("cosmos_swagger_gen.cli._configure_logging")
    def test_generate_accepts_verbose(self, mock_configure, tmp_path):
        output_file = tmp_path / "rest.ts"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(CHAINS), "-o", str(output_file), "-v"])

        assert result.exit_code == 0, result.output
        assert call(True) in mock_configure.call_args_list


class TestCliFetch:
    @patch("cosmos_swagger_gen.cli.fetch_document")
    def test_fetch_saves_document(self, mock_fetch, tmp_path):
        mock_fetch.return_value = "swagger: '2.0'\npaths: {}\n"
        output_file = tmp_path / "inputs" / "kyve.yaml"

        runner = CliRunner()
        result = runner.invoke(main, ["fetch", "https://example.com/kyve.yaml", "-o", str(output_file)])

        assert result.exit_code == 0, result.output
        mock_fetch.assert_called_once_with("https://example.com/kyve.yaml")
        assert output_file.read_text(encoding="utf-8") == "swagger: '2.0'\npaths: {}\n"

    @patch("cosmos_swagger_gen.cli.fetch_document")
    def test_fetch_failure(self, mock_fetch, tmp_path):
        mock_fetch.side_effect = FetchError("URL cannot be fetched https://example.com/kyve.yaml.")

        runner = CliRunner()
        result = runner.invoke(main, ["fetch", "https://example.com/kyve.yaml", "-o", str(tmp_path / "kyve.yaml")])

        assert result.exit_code == 1
        assert "URL cannot be fetched" in result.output
