"""Unit tests for wlc.cli.display.CLIDisplay module."""

import json

import yaml

from wlc.cli.display import CLIDisplay, Display


def test_is_a_display():
    assert isinstance(CLIDisplay(), Display)


def test_messages_go_to_stderr(capsys):
    display = CLIDisplay()

    display.status("Checking links of ./site ...")
    display.success("No broken links found")
    display.error("Path does not exist: [x]", details="more")
    display.warning("careful")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Checking links of ./site ..." in captured.err
    assert "No broken links found" in captured.err
    assert "Path does not exist: [x]" in captured.err
    assert "more" in captured.err
    assert "careful" in captured.err


def test_json_output(capsys):
    CLIDisplay().json_output({"target": "https://example.com", "errors": []}, format="json")

    assert json.loads(capsys.readouterr().out) == {"target": "https://example.com", "errors": []}


def test_yaml_output_keeps_key_order(capsys):
    CLIDisplay().json_output({"target": "x", "broken_links": [{"code": "404 Not Found"}]}, format="yaml")

    out = capsys.readouterr().out
    assert yaml.safe_load(out) == {"target": "x", "broken_links": [{"code": "404 Not Found"}]}
    assert out.index("target") < out.index("broken_links")
