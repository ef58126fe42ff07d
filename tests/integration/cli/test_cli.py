"""Integration tests for the list and show commands"""

from typer.testing import CliRunner

from mdblog.cli.cli import app


runner = CliRunner()


def test_list_cmd(posts_dir, write_post):
    write_post("older.md", title="Older", date="2020-01-01")
    write_post("newer.md", title="Newer", date="2021-01-01")
    result = runner.invoke(app, ["list", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "newer" in lines[0] and "Newer" in lines[0]
    assert "older" in lines[1]
    assert "Page 1/1 (2 posts)" in result.output


def test_list_cmd_page_size_from_env(posts_dir, write_post, monkeypatch):
    for name in ("a.md", "b.md", "c.md"):
        write_post(name)
    monkeypatch.setenv("MDBLOG_POSTS_DIRECTORY", str(posts_dir))
    monkeypatch.setenv("MDBLOG_PAGE_SIZE", "2")
    result = runner.invoke(app, ["list", "--page", "2"])
    assert result.exit_code == 0, result.output
    assert "Page 2/2 (3 posts)" in result.output


def test_list_cmd_empty_page(posts_dir):
    result = runner.invoke(app, ["list", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 0
    assert "No posts on this page." in result.output


def test_list_cmd_without_posts_dir():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 1
    assert "posts_directory is required" in result.output


def test_list_cmd_missing_directory(tmp_path):
    result = runner.invoke(app, ["list", "--posts-dir", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "DirectoryNotFoundError" in result.output


def test_show_cmd(posts_dir, write_post):
    write_post("hello.md", "# Hello\n")
    result = runner.invoke(app, ["show", "hello", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 0, result.output
    assert "<h1>Hello</h1>" in result.output


def test_show_cmd_not_found(posts_dir):
    result = runner.invoke(app, ["show", "missing", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 1
    assert "Not found: missing" in result.output


def test_config_yaml_is_used(tmp_path, posts_dir, write_post):
    write_post("from-yaml.md")
    (tmp_path / "config.yaml").write_text(f"posts_directory: {posts_dir}\n")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "from-yaml" in result.output
