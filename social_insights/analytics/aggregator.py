"""Aggregation of per-post analytics records."""

from __future__ import annotations

import datetime as dt
import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from social_insights.analytics.config import AnalyticsConfig
from social_insights.analytics.types import (
    AnalyticsOverview,
    AnalyticsRecord,
    AnalyticsTrend,
    BrandVoicePerformance,
    BrandVoiceProfile,
    Platform,
    PlatformSummary,
)
from social_insights.common.component import ComponentFactory

logger = logging.getLogger(__name__)


def _platform_names(platforms: Iterable[Platform | str]) -> list[str]:
    names = [p.value if isinstance(p, Platform) else str(p).strip().lower() for p in platforms]
    return list(dict.fromkeys(names))


def _utc(ts: dt.datetime) -> dt.datetime:
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(dt.timezone.utc).replace(tzinfo=None)


class MetricsAggregator(ComponentFactory[AnalyticsConfig]):
    """Reduces analytics records into platform and total summaries.

    All operations are pure: records are never modified and results do not
    depend on input order.
    """

    _config_type = AnalyticsConfig

    def _known(self, platforms: Iterable[Platform | str] | None) -> list[str]:
        return _platform_names(self.config.platforms if platforms is None else platforms)

    def summarize(
        self,
        records: Iterable[AnalyticsRecord],
        platforms: Iterable[Platform | str] | None = None,
    ) -> AnalyticsOverview:
        """Summarize reach, post count and engagement for each known platform."""
        known = self._known(platforms)
        reach = dict.fromkeys(known, 0)
        posts = dict.fromkeys(known, 0)
        engagement = dict.fromkeys(known, 0)

        ignored = 0
        for record in records:
            if record.platform not in reach:
                ignored += 1
                continue
            reach[record.platform] += record.reach
            posts[record.platform] += 1
            engagement[record.platform] += record.engagement

        if ignored:
            logger.debug(f"Ignored {ignored} records for unknown platforms")

        summaries = {
            name: PlatformSummary(reach=reach[name], posts=posts[name], engagement=engagement[name])
            for name in known
        }
        return AnalyticsOverview(
            platforms=summaries,
            total=sum(summaries.values(), PlatformSummary()),
        )

    @staticmethod
    def average_engagement_rate(records: Sequence[AnalyticsRecord]) -> float:
        """Mean engagement rate, 0 for no records."""
        if not records:
            return 0.0
        return sum(record.engagement_rate for record in records) / len(records)

    @staticmethod
    def average_sentiment(records: Iterable[AnalyticsRecord]) -> float:
        """Mean sentiment score over the records that have been scored."""
        scores = [r.sentiment_score for r in records if r.sentiment_score is not None]
        if not scores:
            return 0.0
        return sum(scores) / len(scores)

    def daily_trends(
        self,
        records: Iterable[AnalyticsRecord],
        platforms: Iterable[Platform | str] | None = None,
    ) -> list[AnalyticsTrend]:
        """Roll records up per platform and calendar day.

        Records without a timestamp or for unknown platforms are skipped. The
        engagement rate of a trend is total engagement over total reach.
        """
        known = self._known(platforms)
        order = {name: i for i, name in enumerate(known)}

        groups: dict[tuple, list[AnalyticsRecord]] = defaultdict(list)
        for record in records:
            if record.recorded_at is None or record.platform not in order:
                continue
            groups[(record.recorded_at.date(), record.platform)].append(record)

        trends = []
        for (day, platform), rows in sorted(groups.items(), key=lambda g: (g[0][0], order[g[0][1]])):
            total_reach = sum(r.reach for r in rows)
            total_engagement = sum(r.engagement for r in rows)
            trends.append(
                AnalyticsTrend(
                    platform=platform,
                    date=day,
                    total_reach=total_reach,
                    total_engagement=total_engagement,
                    total_posts=len(rows),
                    avg_engagement_rate=total_engagement / total_reach if total_reach > 0 else 0.0,
                )
            )

        logger.debug(f"Built {len(trends)} daily trends from {len(groups)} groups")
        return trends

    def top_posts(
        self,
        records: Iterable[AnalyticsRecord],
        limit: int | None = None,
        platform: Platform | str | None = None,
        days: int | None = None,
        now: dt.datetime | None = None,
    ) -> list[AnalyticsRecord]:
        """Best performing records by engagement rate, then reach.

        `platform` keeps a single platform. `days` keeps records measured in
        the last `days` days before `now` (default: the current UTC time);
        records without a timestamp are then dropped. Naive timestamps are
        taken as UTC.
        """
        limit = self.config.top_posts_limit if limit is None else limit
        if platform is not None:
            (name,) = _platform_names([platform])
            records = [r for r in records if r.platform == name]
        if days is not None:
            cutoff = _utc(now or dt.datetime.now(dt.timezone.utc)) - dt.timedelta(days=days)
            records = [
                r for r in records if r.recorded_at is not None and _utc(r.recorded_at) >= cutoff
            ]

        ranked = sorted(records, key=lambda r: (r.engagement_rate, r.reach), reverse=True)
        return ranked[: max(limit, 0)]

    def brand_voice_performance(
        self,
        records: Iterable[AnalyticsRecord],
        profiles: Iterable[BrandVoiceProfile],
    ) -> list[BrandVoicePerformance]:
        """Performance of the posts whose text mentions each profile's tone or style.

        Profiles without matching posts are left out. The engagement rate is
        total engagement over total reach, 0 when nothing was reached.
        """
        records = list(records)
        results = []
        for profile in profiles:
            matched = [r for r in records if profile.matches(r.content)]
            if not matched:
                logger.debug(f"No posts match brand voice {profile.id}")
                continue

            total_reach = sum(r.reach for r in matched)
            total_engagement = sum(r.engagement for r in matched)
            results.append(
                BrandVoicePerformance(
                    voice_profile_id=profile.id,
                    tone=profile.tone,
                    style=profile.style,
                    post_count=len(matched),
                    engagement_rate=total_engagement / total_reach if total_reach > 0 else 0.0,
                    sentiment_score=self.average_sentiment(matched),
                )
            )
        return results
