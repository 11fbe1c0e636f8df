"""CLI tests for the unpack, route and pack commands."""

import base64
import json

from llmarkup.cli import cli
from llmarkup.errors import MissingRequiredAttribute


def test_unpack_writes_manifest(runner, write_file, tmp_path, project_files_output):
    path = write_file("out.txt", project_files_output)
    result = runner.invoke(cli, ["unpack", "--output-dir", str(tmp_path / "gen"), str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "gen" / "a.ts").read_text() == "console.log(1);"
    assert (tmp_path / "gen" / "src" / "b.ts").read_text() == "export const b = 2;"
    assert "Wrote" in result.output


def test_unpack_uses_configured_output_dir(runner, write_file, tmp_path, project_files_output):
    path = write_file("out.txt", project_files_output)
    write_file(".llmarkuprc", "output_dir: configured\n")
    result = runner.invoke(cli, ["unpack", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "configured" / "a.ts").exists()


def test_unpack_with_explicit_config(runner, write_file, tmp_path):
    path = write_file("out.txt", '<files><file path="x.py">pass</file></files>')
    rc = write_file("conf/custom.yml", "manifest_section: files\nname_attribute: path\noutput_dir: py\n")
    result = runner.invoke(cli, ["--config", str(rc), "unpack", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "py" / "x.py").read_text() == "pass"


def test_unpack_whole_text(runner, write_file, tmp_path):
    path = write_file("out.txt", '<file name="only.txt">1</file>')
    result = runner.invoke(cli, ["unpack", "--whole-text", "--output-dir", "o", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "o" / "only.txt").read_text() == "1"


def test_unpack_missing_name_writes_nothing(runner, write_file, tmp_path):
    path = write_file(
        "out.txt",
        '<project_files><file name="a.ts">a</file><file>b</file></project_files>',
    )
    result = runner.invoke(cli, ["unpack", "--output-dir", "gen", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, MissingRequiredAttribute)
    assert not (tmp_path / "gen").exists()


def test_unpack_respects_force(runner, write_file, tmp_path, project_files_output):
    path = write_file("out.txt", project_files_output)
    write_file("gen/a.ts", "old")

    result = runner.invoke(cli, ["unpack", "--output-dir", "gen", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, FileExistsError)

    result = runner.invoke(cli, ["--force", "unpack", "--output-dir", "gen", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "gen" / "a.ts").read_text() == "console.log(1);"


def test_unpack_quiet(runner, write_file, project_files_output):
    path = write_file("out.txt", project_files_output)
    result = runner.invoke(cli, ["--quiet", "unpack", "--output-dir", "gen", str(path)])
    assert result.exit_code == 0, result.output
    assert "Wrote" not in result.output


def test_route_writes_worker_and_fetch_files(runner, write_file, tmp_path):
    path = write_file(
        "route.txt",
        "<code>export default app;</code>\n"
        "<fetch_implementations>\n"
        '<fetch_implementation route="GET /items">getItems()</fetch_implementation>\n'
        "</fetch_implementations>",
    )
    result = runner.invoke(cli, ["route", "--output-dir", "worker", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "worker" / "src" / "index.ts").read_text() == "export default app;"
    assert (tmp_path / "worker" / "fetch" / "get_items.ts").read_text() == "getItems()"


def test_route_prints_json(runner, write_file):
    path = write_file("route.txt", "<code>export default app;</code>")
    result = runner.invoke(cli, ["route", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["code"] == "export default app;"


def test_pack_prints_manifest(runner, write_file, tmp_path):
    write_file("site/index.html", "<h1>hi</h1>")
    write_file("site/debug.log", "x")
    write_file("site/.gitignore", "*.log\n")
    result = runner.invoke(cli, ["pack", str(tmp_path / "site")])
    assert result.exit_code == 0, result.output
    manifest = json.loads(result.stdout)
    assert [item["file"] for item in manifest] == [".gitignore", "index.html"]
    assert base64.b64decode(manifest[1]["data"]) == b"<h1>hi</h1>"


def test_pack_to_file_refuses_overwrite(runner, write_file, tmp_path):
    write_file("site/index.html", "x")
    write_file("manifest.json", "[]")
    result = runner.invoke(cli, ["pack", "--output", "manifest.json", str(tmp_path / "site")])
    assert result.exit_code == 1
    assert isinstance(result.exception, FileExistsError)


def test_unpack_then_pack_chain(runner, write_file, tmp_path, project_files_output):
    path = write_file("out.txt", project_files_output)
    result = runner.invoke(
        cli,
        ["unpack", "--output-dir", "gen", str(path), "pack", "--output", "manifest.json", "gen"],
    )
    assert result.exit_code == 0, result.output
    manifest = json.loads((tmp_path / "manifest.json").read_text())
    assert [item["file"] for item in manifest] == ["a.ts", "src/b.ts"]
    assert "Command Chain Summary" in result.output


def test_route_json_output_is_parseable_with_understanding(runner, write_file):
    path = write_file(
        "route.txt",
        "<understanding>List users.</understanding>\n<code>export default app;</code>",
    )
    result = runner.invoke(cli, ["route", str(path)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["understanding"] == "List users."
    assert payload["rejection"] == ""


def test_route_rejection_writes_nothing(runner, write_file, tmp_path):
    path = write_file("route.txt", "<rejection>Out of scope.</rejection>")
    result = runner.invoke(cli, ["route", "--output-dir", "worker", str(path)])
    assert result.exit_code == 0, result.output
    assert "Request rejected" in result.output
    assert "Out of scope." in result.output
    assert not (tmp_path / "worker").exists()


def test_route_rejection_as_json(runner, write_file):
    path = write_file("route.txt", "<rejection>Out of scope.</rejection>")
    result = runner.invoke(cli, ["route", str(path)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["rejection"] == "Out of scope."
    assert payload["code"] == ""


def test_unpack_fenced_format(runner, write_file, tmp_path):
    path = write_file(
        "out.txt",
        "Here you go:\n```tsx:src/App.tsx\nexport default function App() {}\n```\n",
    )
    result = runner.invoke(cli, ["unpack", "--format", "fenced", "--output-dir", "app", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "app" / "src" / "App.tsx").read_text() == "export default function App() {}"


def test_unpack_boilerplate_format(runner, write_file, tmp_path):
    path = write_file(
        "dump.txt",
        "================\nFile: package.json\n================\n{}\n\n"
        "================\nFile: public/logo.svg\n================\n<svg/>\n",
    )
    result = runner.invoke(cli, ["unpack", "--format", "boilerplate", "--output-dir", "app", str(path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "app" / "package.json").read_text() == "{}"
    assert not (tmp_path / "app" / "public").exists()


def test_unpack_rejects_unknown_format(runner, write_file):
    path = write_file("out.txt", "<project_files></project_files>")
    result = runner.invoke(cli, ["unpack", "--format", "yaml", str(path)])
    assert result.exit_code == 2
    assert "Invalid value for '--format'" in result.output
