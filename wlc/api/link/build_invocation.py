"""Build the checklink command line for one run."""

from ..config.WLCConfig import WLCConfig
from .CheckOptions import CheckOptions
from .CheckTarget import CheckTarget
from .ToolInvocation import ToolInvocation
from .ToolKind import ToolKind
from .ToolLocation import ToolLocation
from .translate_options import translate_options


def build_invocation(
    target: CheckTarget,
    location: ToolLocation,
    options: CheckOptions,
    config: WLCConfig,
    server_url: str | None = None,
) -> ToolInvocation:
    """Build the command that checks ``target``.

    Args:
        target: What to check
        location: Where checklink was found
        options: Options of this run
        config: Container image and document root, default arguments
        server_url: Url of the local static server; required for a local
            target unless checklink runs in a container

    Raises:
        ValueError: If a local target is checked without a server url
    """
    base_url = options.base_url

    if location.kind is ToolKind.CONTAINER:
        args = ["run", "--rm"]
        if target.is_url:
            args += [config.container_image, target.value]
        else:
            # the image serves its document root on its own loopback interface
            args += [
                "-v",
                f"{target.value}:{config.container_doc_root}{base_url}",
                config.container_image,
                f"http://localhost{base_url}",
            ]
    elif target.is_url:
        args = [target.value]
    else:
        if not server_url:
            raise ValueError(f"No server url for local target {target.value}")
        args = [server_url]

    args += config.default_args
    args += translate_options(options.tool_options())
    return ToolInvocation(command=location.command, args=tuple(args))
