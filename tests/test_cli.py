from smp.cli import app


def _lines(result):
    return result.stdout.splitlines()


def test_cli_help_lists_commands(cli_runner):
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    for name in ("simple", "complex", "pipe", "output", "args", "retry", "dataprocess"):
        assert name in result.stdout


def test_cli_simple(cli_runner):
    result = cli_runner.invoke(app, ["simple"])
    assert result.exit_code == 0, result.stdout
    assert "Hello, world" in _lines(result)


def test_cli_complex(cli_runner):
    result = cli_runner.invoke(app, ["complex"])
    assert result.exit_code == 0, result.stdout
    assert "Current directory:" in result.stdout
    assert "Current user:" in result.stdout


def test_cli_output_counts_words(cli_runner):
    result = cli_runner.invoke(app, ["output"])
    assert result.exit_code == 0, result.stdout
    assert "Command output: 7 words" in _lines(result)


def test_cli_args_basic(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing"])
    assert result.exit_code == 0, result.stdout
    assert _lines(result) == ["testing"]


def test_cli_args_with_count(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing", "--count", "3"])
    assert result.exit_code == 0, result.stdout
    assert _lines(result) == ["testing testing testing"]


def test_cli_args_with_uppercase(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing", "--uppercase"])
    assert result.exit_code == 0, result.stdout
    assert _lines(result) == ["TESTING"]


def test_cli_args_with_multiple_options(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing", "-c", "2", "-u"])
    assert result.exit_code == 0, result.stdout
    assert _lines(result) == ["TESTING TESTING"]


def test_cli_args_zero_count_prints_nothing(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing", "-c", "0"])
    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == ""


def test_cli_args_rejects_negative_count(cli_runner):
    result = cli_runner.invoke(app, ["args", "testing", "-c", "-1"])
    assert result.exit_code != 0


def test_cli_args_propagates_exit_code(cli_runner):
    # /bin/false ignores "-c <command>" and exits 1 without output.
    result = cli_runner.invoke(app, ["--shell", "/bin/false", "args", "testing"])
    assert result.exit_code == 1


def test_cli_args_missing_shell_exits_1(cli_runner):
    result = cli_runner.invoke(app, ["--shell", "/nonexistent/shell", "args", "testing"])
    assert result.exit_code == 1


def test_cli_shell_from_config(cli_runner, tmp_path):
    cfg_path = tmp_path / "smp.yaml"
    cfg_path.write_text("executor:\n  shell: /bin/false\n")

    result = cli_runner.invoke(app, ["--config", str(cfg_path), "args", "testing"])
    assert result.exit_code == 1

    result = cli_runner.invoke(
        app, ["--config", str(cfg_path), "--shell", "/bin/sh", "args", "testing"]
    )
    assert result.exit_code == 0
    assert _lines(result) == ["testing"]


def test_cli_retry_success(cli_runner):
    result = cli_runner.invoke(app, ["retry", "echo fine"])
    assert result.exit_code == 0, result.stdout
    assert "fine" in _lines(result)


def test_cli_retry_failure_uses_command_exit_code(cli_runner):
    result = cli_runner.invoke(app, ["retry", "echo boom >&2; exit 3", "-n", "2"])
    assert result.exit_code == 3
    assert "boom" in result.stdout


def test_cli_retry_with_mock_backend(cli_runner):
    result = cli_runner.invoke(app, ["--backend", "mock", "retry", "rm -rf /tmp/nothing"])
    assert result.exit_code == 0, result.stdout
    assert "Mock output for: rm -rf /tmp/nothing" in _lines(result)


def test_cli_args_rejects_mock_backend(cli_runner):
    result = cli_runner.invoke(app, ["--backend", "mock", "args", "testing"])
    assert result.exit_code == 1


def test_cli_timeout_exits_1(cli_runner):
    result = cli_runner.invoke(app, ["--timeout", "0.2", "retry", "sleep 2", "-n", "1"])
    assert result.exit_code == 1


def test_cli_retry_signal_death_exits_128_plus_signal(cli_runner):
    result = cli_runner.invoke(app, ["retry", "kill -9 $$", "-n", "1"])
    assert result.exit_code == 137


def test_exit_status_maps_signals():
    from smp.cli import _exit_status

    assert _exit_status(-9) == 137
    assert _exit_status(-15) == 143
    assert _exit_status(3) == 3


def test_cli_retry_rejects_zero_attempts(cli_runner):
    result = cli_runner.invoke(app, ["retry", "echo hi", "-n", "0"])
    assert result.exit_code != 0


def test_cli_config_with_list_root_exits_1(cli_runner, tmp_path):
    cfg_path = tmp_path / "smp.yaml"
    cfg_path.write_text("- a\n- b\n")
    result = cli_runner.invoke(app, ["--config", str(cfg_path), "args", "testing"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_cli_config_with_bad_max_retries_exits_1(cli_runner, tmp_path):
    cfg_path = tmp_path / "smp.yaml"
    cfg_path.write_text("retry:\n  max_retries: lots\n")
    result = cli_runner.invoke(app, ["--config", str(cfg_path), "retry", "echo hi"])
    assert result.exit_code == 1


def test_cli_config_with_broken_yaml_exits_1(cli_runner, tmp_path):
    cfg_path = tmp_path / "smp.yaml"
    cfg_path.write_text("executor: [unclosed\n")
    result = cli_runner.invoke(app, ["--config", str(cfg_path), "simple"])
    assert result.exit_code == 1
