"""Analytics and sentiment report job."""

import asyncio
import json
import logging
import sys
from typing import Any

from social_insights import RootConfig
from social_insights.analytics import MetricsAggregator, read_records
from social_insights.common import CustomEncoder
from social_insights.inference import InferenceClient
from social_insights.sentiment import LexiconSentimentScorer

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.info("Signal received, exiting gracefully...")
    sys.exit(0)


async def score_texts(config: RootConfig, texts: list[str]) -> list[dict[str, Any]]:
    """Score texts, through the model when inference is configured."""
    if config.inference is None:
        scorer = LexiconSentimentScorer.from_config(config.sentiment)
        results = [scorer.analyze(text) for text in texts]
    else:
        async with InferenceClient.from_config(config.inference) as client:
            scorer = LexiconSentimentScorer.from_config(config.sentiment, client=client)
            results = await scorer.analyze_batch(texts)

    return [{"text": text, **result.model_dump(mode="json")} for text, result in zip(texts, results)]


async def main(
    config: RootConfig,
    records_path: str | None = None,
    texts: list[str] | None = None,
    top: int | None = None,
) -> dict[str, Any]:
    """Run the report."""
    logger.info("Starting report")
    logger.debug(f"Validated config: {config.model_dump_json(indent=2)}")

    report: dict[str, Any] = {}

    if records_path:
        records = read_records(records_path)
        aggregator = MetricsAggregator.from_config(config.analytics)

        overview = aggregator.summarize(records)
        logger.info(f"Summarized {overview.total.posts}/{len(records)} records")

        report["overview"] = overview.to_dict()
        report["average_engagement_rate"] = aggregator.average_engagement_rate(records)
        report["average_sentiment"] = aggregator.average_sentiment(records)
        report["trends"] = aggregator.daily_trends(records)
        report["top_posts"] = aggregator.top_posts(records, limit=top)

    if texts:
        logger.info(f"Scoring {len(texts)} texts")
        report["sentiment"] = await score_texts(config, texts)

    if not report:
        logger.warning("Nothing to report, pass --records and/or --text")

    return report


if __name__ == "__main__":
    import argparse
    import signal
    import time

    # Configure logging
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    parser = argparse.ArgumentParser(description="Summarize post analytics and score sentiment")
    parser.add_argument(
        "--config", type=str, default="config/insights.yaml", help="YAML configuration file"
    )
    parser.add_argument("--records", type=str, help="Parquet, csv or jsonl analytics records")
    parser.add_argument("--text", action="append", default=[], help="Text to score, repeatable")
    parser.add_argument("--top", type=int, default=None, help="Number of top posts to list")
    args = parser.parse_args()

    # Load and validate configuration
    logger.info(f"Loading config from {args.config}")
    config = RootConfig.from_yaml(args.config)

    # Run job and measure time
    start = time.time()
    report = asyncio.run(main(config, records_path=args.records, texts=args.text, top=args.top))
    end = time.time()

    print(json.dumps(report, cls=CustomEncoder, indent=2))
    logger.info(f"Report completed in {end - start:.2f} seconds")
