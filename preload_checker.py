import logging

from mitmproxy import ctx, exceptions, http

from hstspreload.response import Mode, check_response

logger = logging.getLogger(__name__)


class PreloadChecker:
    """MITMProxy Addon to check the STS header of received responses against the preload list rules."""
    def load(self, loader) -> None:
        loader.add_option(
            name="hsts_mode",
            typespec=str,
            default=Mode.PRELOADABLE.value,
            help=f"Rule set to check: {', '.join(m.value for m in Mode)}",
        )

    def configure(self, updated) -> None:
        if "hsts_mode" in updated and ctx.options.hsts_mode not in [m.value for m in Mode]:
            raise exceptions.OptionsError(
                f"Invalid hsts_mode: {ctx.options.hsts_mode}"
            )

    def response(self, flow: http.HTTPFlow) -> None:
        """Check the response and keep (header, issues) in the flow metadata."""
        # Receiving a CONNECT response means we hit an internal response of mitmproxy
        if flow.request.method == "CONNECT":
            return

        mode = Mode(ctx.options.hsts_mode)
        header, issues = check_response(flow.response, mode)
        flow.metadata["hsts_preload"] = (header, issues)

        url = flow.request.pretty_url
        if issues.passed:
            logger.info(f"{url}: {mode} ({header})")
        for issue in issues.errors:
            logger.warning(f"{url}: not {mode}: {issue.code}")


addons = [
    PreloadChecker(),
]
