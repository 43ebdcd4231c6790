"""Link check API command."""

from collections.abc import Iterator
from typing import Any

from ..config.WLCConfig import WLCConfig
from ..StageResult import StageResult
from . import LinkCheckOutput
from .CheckOptions import CheckOptions
from .CheckTarget import CheckTarget
from .LinkChecker import LinkChecker
from .LinkCheckError import LinkCheckError
from .run_process import Echo
from .ToolNotFoundError import ToolNotFoundError

TOOL_NOT_FOUND_HINT = (
    "Install the W3C link checker (e.g. 'cpanm W3C::LinkChecker') or docker, "
    "or point --checklink-command at an existing checklink"
)


def _failed(result_obj: StageResult, target: str, message: str, warnings: list[str] | None = None,
            command: list[str] | None = None) -> None:
    result_obj.output = LinkCheckOutput(
        errors=[message],
        warnings=warnings or [],
        target=target,
        command=command or [],
        broken_links=[],
        suppressed_links=[],
    ).model_dump(mode="python")
    result_obj.result = f"Error: {message}"
    result_obj.success = False


def cmd_check(target: str, echo: Echo | None = None, **options: Any) -> StageResult:
    """Check the links of a local directory or a url with checklink.

    Args:
        target: Directory or url to check
        echo: Receives live checklink output, see ``run_process``
        **options: Command line options by Python name (``no_referer``, ``depth``, ...);
            ``None`` means "not given"
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = WLCConfig.load()
            check_options = CheckOptions.merged(config, options)
        except ValueError as e:
            yield (1.0, "Complete")
            _failed(result_obj, target, str(e))
            return

        yield (0.2, "Resolving target...")
        check_target = CheckTarget.classify(target)
        if not check_target.is_url:
            if not check_target.path.exists():
                yield (1.0, "Complete")
                _failed(result_obj, check_target.value, f"Path does not exist: {target}")
                return
            if not check_target.path.is_dir():
                yield (1.0, "Complete")
                _failed(result_obj, check_target.value, f"Path is not a directory: {target}")
                return

        yield (0.3, "Running link checker...")
        checker = LinkChecker(target, check_options, config)
        try:
            check_result = checker.check(echo=echo)
        except ToolNotFoundError as e:
            yield (1.0, "Complete")
            _failed(result_obj, check_target.value, str(e), warnings=[TOOL_NOT_FOUND_HINT])
            return
        except LinkCheckError as e:
            yield (1.0, "Complete")
            command = checker.invocation.redacted() if checker.invocation else []
            _failed(result_obj, check_target.value, str(e), command=command)
            return
        except Exception as e:
            yield (1.0, "Complete")
            _failed(result_obj, check_target.value, f"Unexpected error: {e}")
            return

        yield (1.0, "Complete")
        issues = check_result.to_dict()
        broken = issues.get("errors", [])
        suppressed = issues.get("warnings", [])
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=[],
            target=check_target.value,
            command=checker.invocation.redacted() if checker.invocation else [],
            broken_links=broken,
            suppressed_links=suppressed,
        ).model_dump(mode="python")

        suffix = f" ({len(suppressed)} ignored)" if suppressed else ""
        if broken:
            result_obj.result = f"Found {len(broken)} broken link(s) and other issue(s){suffix}"
            result_obj.success = False
        else:
            result_obj.result = f"No broken links found{suffix}"
            result_obj.success = True

    return StageResult(announce=f"Checking links of {target} ...", progress_callback=do_work)
