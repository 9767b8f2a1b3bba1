"""Analytics command queue and the Countly browser loader.

Tracking directives are buffered in a ``CommandQueue`` until a client is
attached, then flushed to it in order. The only client shipped here is
``CountlyScriptClient``, which turns the directives into the inline
``Countly.q`` bootstrap plus a lazily loaded SDK ``<script>``. Nothing is
read back from the SDK; if it fails to load, analytics stays uninitialised.
"""

import json
import logging
from collections.abc import Iterable
from typing import Protocol

from habari.models.analytics import DEFAULT_COMMANDS, AnalyticsCommand
from habari.models.site import AnalyticsConfig

logger = logging.getLogger(__name__)


class AnalyticsClient(Protocol):
    """Anything that accepts tracking directives."""

    def send(self, command: AnalyticsCommand) -> None: ...


class CommandQueue:
    """Buffer of directives queued before a client is ready.

    Usage::

        queue = CommandQueue()
        queue.push(AnalyticsCommand.TRACK_PAGEVIEW)
        queue.attach(client)  # flushes, later pushes go straight through
    """

    def __init__(self, commands: Iterable[AnalyticsCommand] = ()) -> None:
        self._pending: list[AnalyticsCommand] = list(commands)
        self._client: AnalyticsClient | None = None

    @property
    def pending(self) -> tuple[AnalyticsCommand, ...]:
        return tuple(self._pending)

    @property
    def attached(self) -> bool:
        return self._client is not None

    def push(self, command: AnalyticsCommand) -> None:
        if self._client is not None:
            self._client.send(command)
        else:
            self._pending.append(command)

    def attach(self, client: AnalyticsClient) -> int:
        """Attach ``client`` and flush pending directives to it in order.

        Returns the number of directives flushed.
        """
        self._client = client
        flushed = 0
        while self._pending:
            client.send(self._pending.pop(0))
            flushed += 1
        return flushed


def _js(value: str) -> str:
    """Encode a string as a JS literal that is safe inside <script>."""
    return json.dumps(value).replace("</", "<\\/")


class CountlyScriptClient:
    """Collects directives and renders them as Countly browser markup."""

    def __init__(self, config: AnalyticsConfig) -> None:
        self._config = config
        self._commands: list[AnalyticsCommand] = []

    @property
    def commands(self) -> tuple[AnalyticsCommand, ...]:
        return tuple(self._commands)

    def send(self, command: AnalyticsCommand) -> None:
        self._commands.append(command)

    def render(self) -> str:
        """Return the bootstrap and loader ``<script>`` tags.

        The SDK is injected after the window ``load`` event and calls
        ``Countly.init()`` once it arrives, so it never blocks page content.
        """
        queued = "\n".join(
            f"Countly.q.push([{_js(c.value)}]);" for c in self._commands
        )
        return f"""<script id="countly-script">
var Countly = Countly || {{}};
Countly.q = Countly.q || [];
Countly.app_key = {_js(self._config.countly_app_key)};
Countly.url = {_js(self._config.countly_site_url)};
{queued}
</script>
<script>
window.addEventListener("load", function () {{
  var s = document.createElement("script");
  s.async = true;
  s.src = {_js(self._config.countly_sdk_url)};
  s.onload = function () {{ Countly.init(); }};
  document.body.appendChild(s);
}});
</script>"""


def render_analytics_snippet(
    config: AnalyticsConfig,
    commands: Iterable[AnalyticsCommand] = DEFAULT_COMMANDS,
) -> str:
    """Return the analytics markup for a page, or "" when analytics is off."""
    if not config.enabled:
        return ""
    queue = CommandQueue(commands)
    client = CountlyScriptClient(config)
    flushed = queue.attach(client)
    logger.debug("Rendered Countly snippet with %d directives", flushed)
    return client.render()
