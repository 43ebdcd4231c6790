"""End to end: real static server and process runner, stand-in checklink script."""

import stat
import sys
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wlc.cli._create_app import _create_app

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("wlc_home", "restore_root_logger")

# Fetches every href of the start page and reports the broken ones like checklink does
FAKE_CHECKLINK = textwrap.dedent(
    """\
    import re
    import sys
    import urllib.error
    import urllib.request

    start = sys.argv[1]
    fetch_url = start.replace("localhost", "127.0.0.1")
    with urllib.request.urlopen(fetch_url, timeout=5) as response:
        page = response.read().decode()

    print("Processing\\t" + start)
    print("List of broken links and other issues:")
    for line_no, href in enumerate(re.findall(r'href="([^"]+)"', page), start=1):
        try:
            urllib.request.urlopen(fetch_url + href, timeout=5).close()
        except urllib.error.HTTPError as e:
            print(start + href)
            print(" Line: " + str(line_no))
            print(" Code: " + str(e.code) + " Not Found")
    print("Anchors")
    print("Found 0 anchors.")
    print("args: " + " ".join(sys.argv[2:]), file=sys.stderr)
    """
)


@pytest.fixture
def fake_checklink(tmp_path: Path) -> Path:
    script = tmp_path / "checklink"
    script.write_text(f"#!{sys.executable}\n{FAKE_CHECKLINK}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts")
def test_local_directory_is_served_and_checked(fake_checklink, site_dir):
    result = runner.invoke(
        _create_app(),
        [str(site_dir), "--checklink-command", str(fake_checklink), "--base-url", "/docs/", "-b"],
    )

    assert result.exit_code == 1
    assert "link-3.html" in result.stderr
    assert '/docs/link-3.html "2" "404 Not Found" "-"' in result.stderr
    assert "link-1.html" not in result.stderr.split("Error(s)")[-1]
    assert "args: --broken" in result.stdout


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts")
def test_failing_checklink_exits_non_zero(tmp_path, site_dir):
    script = tmp_path / "broken-checklink"
    script.write_text(f"#!{sys.executable}\nimport sys\nsys.exit(4)\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    result = runner.invoke(_create_app(), [str(site_dir), "--checklink-command", str(script), "--display", "json"])

    assert result.exit_code == 1
    assert "exit code 4" in result.stdout
