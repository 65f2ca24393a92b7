import json

from object_compare import cli


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_equal_documents_exit_zero(tmp_path, capsys):
    left = write_json(tmp_path / "left.json", {"id": 1, "tags": ["a", "b"]})
    right = write_json(tmp_path / "right.json", {"tags": ["a", "b"], "id": 1})
    assert cli.main([left, right]) == cli.EXIT_EQUAL
    assert "- Result: equal" in capsys.readouterr().out


def test_different_documents_exit_one_and_write_reports(tmp_path):
    left = write_json(tmp_path / "left.json", {"id": 1, "updated_at": "2024-01-01", "items": [{"qty": 1}]})
    right = write_json(tmp_path / "right.json", {"id": 1, "updated_at": "2024-02-01", "items": [{"qty": 2}]})
    output = tmp_path / "reports" / "report.md"
    json_output = tmp_path / "reports" / "report.json"
    code = cli.main([left, right, "--output", str(output), "--json-output", str(json_output)])
    assert code == cli.EXIT_DIFFERENT
    assert "JsonObject.items[0].qty" in output.read_text(encoding="utf-8")
    payload = json.loads(json_output.read_text(encoding="utf-8"))
    assert [item["path"] for item in payload["mismatches"]] == [
        "JsonObject.updated_at",
        "JsonObject.items[0].qty",
    ]


def test_ignore_option_suppresses_named_members(tmp_path, capsys):
    left = write_json(tmp_path / "left.json", {"id": 1, "updated_at": "2024-01-01"})
    right = write_json(tmp_path / "right.json", {"id": 1, "updated_at": "2024-02-01"})
    assert cli.main([left, right, "--ignore", "updated_at", "--quiet"]) == cli.EXIT_EQUAL
    assert capsys.readouterr().out == ""


def test_unloadable_document_exit_two(tmp_path):
    right = write_json(tmp_path / "right.json", {})
    assert cli.main([str(tmp_path / "missing.json"), right]) == cli.EXIT_LOAD_ERROR
