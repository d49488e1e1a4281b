import json

from click.testing import CliRunner

from restline._cli import cli

INTERFACE_MODULE = '''
from typing import Annotated

from restline import Param, body, headers, request_line


@headers("Accept: application/json")
class GitHub:
    @request_line("GET /repos/{owner}/{repo}/contributors?anon")
    def contributors(
        self,
        owner: Annotated[str, Param("owner")],
        repo: Annotated[str, Param("repo")],
    ) -> list: ...

    @request_line("POST /markdown")
    @body("# hello")
    def render(self) -> str: ...
'''

BROKEN_MODULE = '''
from restline import request_line


class Broken:
    @request_line("GET /users/{id}")
    def get(self) -> None: ...
'''


class TestInspect:
    def test_inspect_prints_metadata(self, runner: CliRunner, temp_dir: str) -> None:
        with runner.isolated_filesystem(temp_dir=temp_dir):
            with open("github_client.py", "w") as f:
                f.write(INTERFACE_MODULE)

            result = runner.invoke(cli, ["inspect", "github_client:GitHub"])

            assert result.exit_code == 0, result.output
            output = json.loads(result.output)

        assert list(output) == [
            "GitHub#contributors(str,str)",
            "GitHub#render()",
        ]
        contributors = output["GitHub#contributors(str,str)"]
        assert contributors["method"] == "GET"
        assert contributors["url"] == "/repos/{owner}/{repo}/contributors"
        assert contributors["queries"] == {"anon": [None]}
        assert contributors["headers"] == {"Accept": ["application/json"]}
        assert contributors["indexToName"] == {"0": ["owner"], "1": ["repo"]}
        assert contributors["formParams"] == []

        render = output["GitHub#render()"]
        assert render["body"] == "# hello"
        assert render["headers"]["Content-Length"] == ["7"]

    def test_inspect_reports_contract_errors(
        self, runner: CliRunner, temp_dir: str
    ) -> None:
        with runner.isolated_filesystem(temp_dir=temp_dir):
            with open("broken_client.py", "w") as f:
                f.write(BROKEN_MODULE)

            result = runner.invoke(cli, ["inspect", "broken_client:Broken"])

        assert result.exit_code == 1
        assert "Placeholder {id} is not bound to any parameter" in result.output

    def test_inspect_rejects_bad_target(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", "no_colon_here"])

        assert result.exit_code == 2
        assert "expected 'module:ClassName'" in result.output

    def test_inspect_rejects_missing_class(
        self, runner: CliRunner, temp_dir: str
    ) -> None:
        with runner.isolated_filesystem(temp_dir=temp_dir):
            with open("empty_client.py", "w") as f:
                f.write("VALUE = 1\n")

            result = runner.invoke(cli, ["inspect", "empty_client:Missing"])

        assert result.exit_code == 2
        assert "is not a class" in result.output
