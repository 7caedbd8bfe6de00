"""Tests for the install command."""

from pathlib import Path

from click.testing import CliRunner

from starter_kit.cli import cli
from tests.helpers import KIT_PACKAGE, build_kit, make_context, set_kit_config


def test_install_command(cli_runner: CliRunner, project_dir: Path, kit_root: Path) -> None:
    """Test installing a kit from vendor/."""
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Preparing starter kit..." in result.output
    assert "Installing files..." in result.output
    assert "  Copied 3 files" in result.output
    assert f"✓ Starter kit [{KIT_PACKAGE}] installed" in result.output
    assert (project_dir / "copied.md").exists()


def test_install_command_with_options(
    cli_runner: CliRunner, project_dir: Path, tmp_path: Path
) -> None:
    """Test --kit-path, --with-config and --clear-site together."""
    checkout = build_kit(tmp_path / "cool-runnings")
    old_post = project_dir / "content" / "collections" / "blog" / "post.md"
    old_post.parent.mkdir(parents=True)
    old_post.write_text("Old", encoding="utf-8")
    ctx, package_installer, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli,
        [
            "install",
            KIT_PACKAGE,
            "--project-dir",
            str(project_dir),
            "--kit-path",
            str(checkout),
            "--with-config",
            "--clear-site",
        ],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert "  Copied starter-kit.yaml" in result.output
    assert (project_dir / "starter-kit.yaml").exists()
    assert not old_post.exists()
    assert package_installer.removed == []


def test_install_command_reports_dependencies(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test the dependency summary lines."""
    set_kit_config(
        kit_root,
        {
            "export_paths": ["copied.md"],
            "dependencies": {
                "statamic/seo-pro": "^0.2.0",
                "bobsled/speed-calculator": "^1.0.0",
                "bobsled/nowhere": "^1.0.0",
            },
        },
    )
    ctx, _, _ = make_context(
        project_dir,
        responses={"repo.packagist.org/p2/statamic/*": 200, "github.com/bobsled/speed-*": 200},
    )

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Installing dependencies..." in result.output
    assert "  Added repository https://github.com/bobsled/speed-calculator" in result.output
    assert "  Required statamic/seo-pro" in result.output
    assert "[bobsled/nowhere] was not found" in result.output


def test_install_command_dependency_failure_exits_1(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test that a failed dependency makes the command exit 1."""
    set_kit_config(
        kit_root,
        {"export_paths": ["copied.md"], "dependencies": {"statamic/seo-pro": "^0.2.0"}},
    )
    ctx, _, _ = make_context(
        project_dir,
        responses={"repo.packagist.org/*": 200},
        failing_packages={"statamic/seo-pro"},
    )

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error installing dependency [statamic/seo-pro]" in result.output
    assert "installed with errors." in result.output
    assert (project_dir / "copied.md").exists()


def test_install_command_missing_export_path(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test that validation errors are shown without a traceback."""
    set_kit_config(kit_root, {"export_paths": ["config", "does_not_exist"]})
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error: Starter kit path [does_not_exist] does not exist" in result.output
    assert "Traceback" not in result.output
    assert "Installing files..." not in result.output


def test_install_command_kit_not_found(cli_runner: CliRunner, project_dir: Path) -> None:
    """Test installing a kit that composer hasn't downloaded."""
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 1
    assert f"Error: Starter kit [{KIT_PACKAGE}] not found" in result.output


def test_install_command_unreadable_descriptor(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test that a non UTF-8 starter-kit.yaml gives a clean error naming the file."""
    (kit_root / "starter-kit.yaml").write_bytes(b"export_paths:\n  - caf\xe9\n")
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error: Invalid starter kit config" in result.output
    assert "starter-kit.yaml" in result.output


def test_install_command_group_debug_flag(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test that --debug is accepted on the group ahead of install."""
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["--debug", "install", KIT_PACKAGE, "--project-dir", str(project_dir)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert f"✓ Starter kit [{KIT_PACKAGE}] installed" in result.output


def test_install_command_debug_after_subcommand_rejected(
    cli_runner: CliRunner, project_dir: Path, kit_root: Path
) -> None:
    """Test that --debug is not an install option."""
    ctx, _, _ = make_context(project_dir)

    result = cli_runner.invoke(
        cli, ["install", KIT_PACKAGE, "--project-dir", str(project_dir), "--debug"], obj=ctx
    )

    assert result.exit_code == 2
    assert "No such option: --debug" in result.output
