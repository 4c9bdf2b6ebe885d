"""Tests for the local runner."""

import json
from dataclasses import dataclass
from unittest.mock import patch

import pytest

from get_weather import handler as weather_handler
from llm_sfn.context import FunctionCall
from llm_sfn.handler import SfnHandler
from llm_sfn.runner import build_message, main, run
from llm_sfn_host.http import Response


@dataclass
class Echo:
    message: str


class TestRunner:
    """Test running functions without the host."""

    def test_build_message(self):
        """Test the synthetic function-call envelope."""
        call = FunctionCall.from_bytes(build_message("echo", '{"message": "hi"}'))
        assert call.function_name == "echo"
        assert call.arguments == '{"message": "hi"}'
        assert call.req_id
        assert call.tool_call_id.startswith("call_")

    def test_run_single_function(self):
        """Test running a handler's only function."""
        handler = SfnHandler("runner-test")

        @handler.function(arguments=Echo, tags=[0x40])
        def echo(args: Echo) -> str:
            return args.message

        assert run(handler, '{"message": "hello"}') == "hello"

    def test_run_requires_name_with_several_functions(self):
        """Test that an ambiguous handler needs a function name."""
        handler = SfnHandler("runner-test")

        @handler.function(name="a", arguments=Echo, tags=[0x41])
        def a(args: Echo) -> str:
            return "a"

        @handler.function(name="b", arguments=Echo, tags=[0x42])
        def b(args: Echo) -> str:
            return "b"

        with pytest.raises(ValueError, match="pick one by name"):
            run(handler, '{"message": "x"}')
        assert run(handler, '{"message": "x"}', name="b") == "b"

    def test_run_on_unsubscribed_tag(self):
        """Test that nothing comes back on a tag nobody listens to."""
        handler = SfnHandler("runner-test")

        @handler.function(arguments=Echo, tags=[0x43])
        def echo(args: Echo) -> str:
            return args.message

        assert run(handler, '{"message": "x"}', tag=0x7F) is None


class TestMain:
    """Test the command line."""

    @patch("llm_sfn_host.http.send")
    def test_main_prints_result(self, mock_send, api_key, capsys, tmp_path):
        """Test a weather lookup from the command line."""
        mock_send.return_value = Response(200, {}, b'{"weather":"clear"}')

        code = main(weather_handler, [
            "--env-file", str(tmp_path / "missing.env"),
            "--arguments", '{"city": "London", "latitude": 51.5074, "longitude": -0.1278}',
        ])

        assert code == 0
        assert capsys.readouterr().out.strip() == '{"weather":"clear"}'

    def test_main_env_file(self, monkeypatch, capsys, tmp_path):
        """Test that the API key can come from an env file."""
        monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "unset")
        monkeypatch.delenv("OPENWEATHERMAP_API_KEY")
        env_file = tmp_path / ".env"
        env_file.write_text("OPENWEATHERMAP_API_KEY=from-file\n")

        with patch("llm_sfn_host.http.send") as mock_send:
            mock_send.return_value = Response(200, {}, b"{}")
            code = main(weather_handler, [
                "--env-file", str(env_file),
                "--arguments", '{"latitude": 1, "longitude": 2}',
            ])

        assert code == 0
        assert "appid=from-file" in mock_send.call_args[0][0].url

    def test_main_env_file_in_working_directory(self, monkeypatch, capsys, tmp_path):
        """Test that a .env in the working directory is found without --env-file."""
        monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "unset")
        monkeypatch.delenv("OPENWEATHERMAP_API_KEY")
        (tmp_path / ".env").write_text("OPENWEATHERMAP_API_KEY=from-cwd\n")
        monkeypatch.chdir(tmp_path)

        with patch("llm_sfn_host.http.send") as mock_send:
            mock_send.return_value = Response(200, {}, b"{}")
            code = main(weather_handler, ["--arguments", '{"latitude": 1, "longitude": 2}'])

        assert code == 0
        assert "appid=from-cwd" in mock_send.call_args[0][0].url

    def test_main_list(self, capsys, tmp_path):
        """Test printing the registration records."""
        code = main(weather_handler, ["--env-file", str(tmp_path / "none.env"), "--list"])

        assert code == 0
        records = json.loads(capsys.readouterr().out)
        assert "get-weather" in [r["name"] for r in records]

    def test_main_tag_option(self, api_key, capsys, tmp_path):
        """Test that a tag without subscribers reports no result."""
        code = main(weather_handler, [
            "--env-file", str(tmp_path / "none.env"),
            "--tag", "0x7f",
            "--arguments", '{"latitude": 1, "longitude": 2}',
        ])

        assert code == 1
        assert "no result" in capsys.readouterr().err
