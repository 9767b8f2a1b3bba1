"""Analytics tracking directives."""

from enum import Enum


class AnalyticsCommand(str, Enum):
    """Directives understood by the Countly command queue."""

    TRACK_SESSIONS = "track_sessions"
    TRACK_PAGEVIEW = "track_pageview"
    TRACK_CLICKS = "track_clicks"
    TRACK_SCROLLS = "track_scrolls"
    TRACK_LINKS = "track_links"
    COLLECT_FROM_FORMS = "collect_from_forms"


DEFAULT_COMMANDS: tuple[AnalyticsCommand, ...] = (
    AnalyticsCommand.TRACK_SESSIONS,
    AnalyticsCommand.TRACK_PAGEVIEW,
    AnalyticsCommand.TRACK_CLICKS,
    AnalyticsCommand.TRACK_SCROLLS,
    AnalyticsCommand.TRACK_LINKS,
    AnalyticsCommand.COLLECT_FROM_FORMS,
)
