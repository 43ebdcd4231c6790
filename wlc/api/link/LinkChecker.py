"""Run checklink against a local directory or a url."""

import logging

from ..config.WLCConfig import WLCConfig
from .build_invocation import build_invocation
from .CheckOptions import CheckOptions
from .CheckResult import CheckResult
from .CheckTarget import CheckTarget
from .locate_tool import locate_tool
from .parse_report import parse_report
from .run_process import Echo, run_process
from .StaticServer import StaticServer
from .ToolInvocation import ToolInvocation

logger = logging.getLogger(__name__)


class LinkChecker:
    """Checks the links of one target.

    Serves a local directory on an ephemeral port when checklink runs on this
    host; a container mounts the directory instead. The server is always
    stopped before ``check`` returns or raises.
    """

    def __init__(self, target: str, options: CheckOptions | None = None, config: WLCConfig | None = None):
        self.options = options or CheckOptions()
        self.config = config or WLCConfig()
        self.target = CheckTarget.classify(target)
        self.server: StaticServer | None = None
        self.invocation: ToolInvocation | None = None

    def check(self, echo: Echo | None = None) -> CheckResult:
        """Run checklink and parse its report.

        Args:
            echo: Receives live tool output, see ``run_process``

        Raises:
            ToolNotFoundError: If checklink cannot be located
            ServerBindError: If the static server cannot listen
            ProcessFailure: If checklink cannot be started or fails
        """
        try:
            location = locate_tool(self.options.checklink_command, container_command=self.config.container_command)
            logger.info("checking links of %s ...", self.target.value)

            server_url = None
            if not self.target.is_url and not location.is_container:
                self.server = StaticServer(self.target.value, self.options.base_url)
                self.server.start()
                server_url = self.server.url

            self.invocation = build_invocation(self.target, location, self.options, self.config, server_url)
            logger.info("with command %s ...", self.invocation)

            output = run_process(self.invocation.command, self.invocation.args, echo=echo)
            errors, warnings = parse_report(
                output.stdout,
                ignore_robots_forbidden=self.options.ignore_robots_forbidden,
                ignore_broken_fragments=self.options.ignore_broken_fragments,
                ignore_redirection=self.options.ignore_redirection,
            )
            return CheckResult(errors=errors, warnings=warnings, stdout=output.stdout, stderr=output.stderr)
        except Exception as exc:
            logger.debug("throwing error %s", exc)
            raise
        finally:
            self._stop_server()

    def _stop_server(self) -> None:
        if self.server is not None:
            self.server.stop()
            self.server = None
