from pathlib import Path

import pytest
from typer.testing import CliRunner

from github_workflows import cli


def _tree(root: Path) -> dict[str, str]:
    return {
        str(path.relative_to(root)): path.read_text(encoding="utf-8")
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_missing_directory_exits_with_message(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli.app, ["-c", "--generate-documentation"])

    assert result.exit_code == 1
    assert "No directory provided. Exiting..." in result.stdout
    assert list(tmp_path.iterdir()) == []


def test_unknown_flag_is_usage_error(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, ["-d", str(project_dir), "--bogus"])

    assert result.exit_code == 2
    assert not (project_dir / ".github").exists()


def test_flag_value_is_rejected(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, ["-d", str(project_dir), "--continuous-integration=false"])

    assert result.exit_code == 2
    assert not (project_dir / ".github").exists()


def test_no_generators_creates_empty_workflow_dir(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, ["--directory", str(project_dir)])

    assert result.exit_code == 0, result.output
    workflow_dir = project_dir / ".github" / "workflows"
    assert workflow_dir.is_dir()
    assert list(workflow_dir.iterdir()) == []
    assert not (project_dir / ".jazzy.yml").exists()


def test_ci_flag_writes_only_main_yml(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, [f"--directory={project_dir}", "-c"])

    assert result.exit_code == 0, result.output
    workflow_dir = project_dir / ".github" / "workflows"
    assert [path.name for path in workflow_dir.iterdir()] == ["main.yml"]
    assert not (project_dir / ".jazzy.yml").exists()

    content = (workflow_dir / "main.yml").read_text(encoding="utf-8")
    assert "xcodebuild -project proj.xcodeproj" in content
    assert "-scheme proj-Package" in content


def test_docs_flag_writes_jazzy_and_publish_workflow(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(
        cli.app,
        [
            f"--directory={project_dir}",
            "--generate-documentation",
            "-p",
            "MyLib",
            "-g",
            "https://github.com/x/y",
        ],
    )

    assert result.exit_code == 0, result.output
    jazzy = (project_dir / ".jazzy.yml").read_text(encoding="utf-8")
    assert "module: MyLib" in jazzy
    assert "github_url: https://github.com/x/y" in jazzy
    assert "build_tool_arguments: [-target, MyLib]" in jazzy

    workflow_dir = project_dir / ".github" / "workflows"
    assert sorted(path.name for path in workflow_dir.iterdir()) == ["docsGen.yml"]
    publish = (workflow_dir / "docsGen.yml").read_text(encoding="utf-8")
    assert "types: [published]" in publish
    assert "${{ secrets.ACCESS_TOKEN }}" in publish


def test_repeated_runs_leave_same_tree(runner: CliRunner, project_dir: Path) -> None:
    args = ["-d", str(project_dir), "-c", "--generate-documentation", "-g", "https://github.com/x/y"]

    first = runner.invoke(cli.app, args)
    assert first.exit_code == 0, first.output
    snapshot = _tree(project_dir)

    second = runner.invoke(cli.app, args)
    assert second.exit_code == 0, second.output
    assert _tree(project_dir) == snapshot
    assert sorted(snapshot) == [
        ".github/workflows/docsGen.yml",
        ".github/workflows/main.yml",
        ".jazzy.yml",
    ]


def test_relative_directory_resolves_against_cwd(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli.app, ["-d", "nested/app", "-c"])

    assert result.exit_code == 0, result.output
    main_yml = tmp_path / "nested" / "app" / ".github" / "workflows" / "main.yml"
    assert main_yml.exists()
    assert "-scheme app-Package" in main_yml.read_text(encoding="utf-8")


def test_config_file_sets_docs_defaults(runner: CliRunner, project_dir: Path, docs_config: Path) -> None:
    result = runner.invoke(
        cli.app,
        ["-d", str(project_dir), "--generate-documentation", "--config", str(docs_config)],
    )

    assert result.exit_code == 0, result.output
    jazzy = (project_dir / ".jazzy.yml").read_text(encoding="utf-8")
    assert "author: Config Author" in jazzy
    assert "theme: apple" in jazzy


def test_cli_author_overrides_config_file(runner: CliRunner, project_dir: Path, docs_config: Path) -> None:
    result = runner.invoke(
        cli.app,
        [
            "-d",
            str(project_dir),
            "--generate-documentation",
            "--config",
            str(docs_config),
            "--author",
            "Someone Else",
        ],
    )

    assert result.exit_code == 0, result.output
    jazzy = (project_dir / ".jazzy.yml").read_text(encoding="utf-8")
    assert "author: Someone Else" in jazzy
    assert "theme: apple" in jazzy


def test_invalid_config_file_exits(runner: CliRunner, project_dir: Path, tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[docs]\nunexpected = 1\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["-d", str(project_dir), "--config", str(bad)])

    assert result.exit_code == 1
    assert "Configuration error" in result.stdout
    assert not (project_dir / ".github").exists()


def test_missing_config_file_is_usage_error(runner: CliRunner, project_dir: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["-d", str(project_dir), "--config", str(tmp_path / "absent.toml")])

    assert result.exit_code == 2


def test_dry_run_touches_nothing(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, ["-d", str(project_dir), "-c", "--generate-documentation", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Dry run complete." in result.stdout
    assert list(project_dir.iterdir()) == []


def test_version_flag(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert "github-workflows" in result.stdout


def test_parent_directory_value_uses_real_project_name(runner: CliRunner, project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = project_dir / "sub"
    nested.mkdir()
    monkeypatch.chdir(nested)

    result = runner.invoke(cli.app, ["-d", "..", "-c"])

    assert result.exit_code == 0, result.output
    content = (project_dir / ".github" / "workflows" / "main.yml").read_text(encoding="utf-8")
    assert "xcodebuild -project proj.xcodeproj" in content
    assert "-scheme proj-Package" in content


def test_filesystem_error_stops_generation(runner: CliRunner, tmp_path: Path) -> None:
    not_a_dir = tmp_path / "proj"
    not_a_dir.write_text("plain file\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["-d", str(not_a_dir), "-c", "--generate-documentation"])

    assert result.exit_code != 0
    assert isinstance(result.exception, OSError)
    assert [path.name for path in tmp_path.iterdir()] == ["proj"]
    assert not_a_dir.read_text(encoding="utf-8") == "plain file\n"


def test_empty_project_name_is_usage_error(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(cli.app, ["-d", str(project_dir), "-p", "", "-c"])

    assert result.exit_code == 2
    assert not (project_dir / ".github").exists()
