"""Unit tests for wlc.api.link.build_invocation module."""

import pytest

from wlc.api.config.WLCConfig import WLCConfig
from wlc.api.link.build_invocation import build_invocation
from wlc.api.link.CheckOptions import CheckOptions
from wlc.api.link.CheckTarget import CheckTarget
from wlc.api.link.ToolLocation import ToolLocation

CHECKLINK = ToolLocation.path_resolved("/usr/bin/checklink")
DOCKER = ToolLocation.container("docker")


def test_url_target_is_passed_through():
    target = CheckTarget.classify("https://example.com/docs/")

    invocation = build_invocation(target, CHECKLINK, CheckOptions(), WLCConfig())

    assert invocation.command == "/usr/bin/checklink"
    assert invocation.args == ("https://example.com/docs/",)


def test_local_target_uses_server_url(tmp_path):
    target = CheckTarget.classify(str(tmp_path))
    options = CheckOptions(recursive=True, depth=2)

    invocation = build_invocation(target, CHECKLINK, options, WLCConfig(), "http://localhost:4000/")

    assert invocation.args == ("http://localhost:4000/", "--recursive", "--depth", "2")


def test_local_target_without_server_url_is_rejected(tmp_path):
    target = CheckTarget.classify(str(tmp_path))

    with pytest.raises(ValueError, match="No server url"):
        build_invocation(target, CHECKLINK, CheckOptions(), WLCConfig())


def test_default_args_come_before_options():
    target = CheckTarget.classify("https://example.com")
    config = WLCConfig(default_args=["--timeout", "10"])

    invocation = build_invocation(target, CHECKLINK, CheckOptions(summary=True), config)

    assert invocation.args == ("https://example.com", "--timeout", "10", "--summary")


def test_container_mounts_local_directory(tmp_path):
    target = CheckTarget.classify(str(tmp_path))
    options = CheckOptions(base_url="/docs/", broken=True)
    config = WLCConfig(container_image="example/checklink", container_doc_root="/srv/html")

    invocation = build_invocation(target, DOCKER, options, config)

    assert invocation.command == "docker"
    assert invocation.args == (
        "run",
        "--rm",
        "-v",
        f"{target.value}:/srv/html/docs/",
        "example/checklink",
        "http://localhost/docs/",
        "--broken",
    )


def test_container_checks_url_without_mount():
    target = CheckTarget.classify("https://example.com")

    invocation = build_invocation(target, DOCKER, CheckOptions(), WLCConfig())

    assert invocation.args == ("run", "--rm", WLCConfig().container_image, "https://example.com")
    assert "-v" not in invocation.args
