"""
SEO plan orchestrator.

Fetches every requested channel (and the optional target video)
concurrently, then runs the channel insight builder and the suggestion
generator over the results.

Failure policy is fail-fast: the first fetch error cancels the remaining
fetches and is raised as a single FetchError naming the handle or URL. No
partial result is ever returned.
"""

import asyncio
import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Optional, Sequence

import yaml
from pydantic import ValidationError

from .analyzer import build_channel_insights, generate_suggestions
from .config import Settings, DEFAULT_SETTINGS
from .errors import FetchError, InvalidInputError, SeoPlannerError
from .extractor import MetadataFetcher, YtDlpFetcher
from .models import AnalysisResult, ChannelSnapshot, PlanRequest, TargetVideo

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    message = error["msg"].removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


def parse_plan_request(body: Any) -> PlanRequest:
    """
    Validate a decoded JSON request body.

    Args:
        body: ``{"channelHandles": [...], "targetVideoUrl": "..."}`` or a
            PlanRequest.

    Returns:
        The validated PlanRequest.

    Raises:
        InvalidInputError: Anything that is not exactly that shape.
    """
    if isinstance(body, PlanRequest):
        return body
    try:
        return PlanRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidInputError(_describe_validation_error(e)) from e


def load_plan_request(path: str) -> PlanRequest:
    """Load and validate a plan request from a YAML or JSON file."""
    path = Path(path)

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return parse_plan_request(data)


async def _gather_fail_fast(jobs: Sequence[Awaitable]) -> list:
    """
    Run jobs concurrently and return their results in input order.

    The first failure cancels every unfinished job and is re-raised. Results
    are only returned once every job has completed.
    """
    tasks = [asyncio.ensure_future(job) for job in jobs]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        # Retrieve every finished task's exception, not just the one raised.
        errors = [
            task.exception() for task in tasks
            if task in done and not task.cancelled()
        ]
        failures = [e for e in errors if e is not None]
        if failures:
            raise failures[0]
        return [task.result() for task in tasks]
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


class SeoPlanner:
    """
    Builds SEO plans from channel uploads and an optional target video.
    """

    def __init__(
        self,
        fetcher: Optional[MetadataFetcher] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the planner.

        Args:
            fetcher: Metadata fetcher. Uses YtDlpFetcher if not provided.
            settings: Configuration settings. Uses defaults if not provided.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.fetcher = fetcher or YtDlpFetcher(self.settings)

    async def _fetch_channel(self, handle: str) -> ChannelSnapshot:
        logger.debug("Fetching channel %s", handle)
        try:
            snapshot = await self.fetcher.fetch_channel_snapshot(handle)
        except SeoPlannerError as e:
            logger.warning("Channel fetch failed for %s: %s", handle, e)
            raise
        except Exception as e:
            logger.warning("Channel fetch failed for %s: %s", handle, e)
            raise FetchError(handle, str(e)) from e

        if snapshot.handle != handle:
            snapshot = dataclasses.replace(snapshot, handle=handle)
        logger.debug("Fetched %d videos for %s", snapshot.video_count, handle)
        return snapshot

    async def _fetch_target(self, url: str) -> TargetVideo:
        logger.debug("Fetching target video %s", url)
        try:
            return await self.fetcher.fetch_video_metadata(url)
        except SeoPlannerError as e:
            logger.warning("Target video fetch failed for %s: %s", url, e)
            raise
        except Exception as e:
            logger.warning("Target video fetch failed for %s: %s", url, e)
            raise FetchError(url, str(e)) from e

    async def build_plan(self, request: Any) -> AnalysisResult:
        """
        Build the SEO plan for a request.

        Args:
            request: PlanRequest or a raw request body (validated first).

        Returns:
            AnalysisResult with channels in request order; suggestions only
            when a target video was requested.

        Raises:
            InvalidInputError: Malformed request; nothing is fetched.
            FetchError: Any channel or the target video failed to fetch.
        """
        request = parse_plan_request(request)
        handles = request.channel_handles
        target_url = request.target_video_url

        jobs = [self._fetch_channel(handle) for handle in handles]
        if target_url is not None:
            jobs.append(self._fetch_target(target_url))

        results = await _gather_fail_fast(jobs)
        snapshots = results[:len(handles)]
        target = results[len(handles)] if target_url is not None else None

        channels = build_channel_insights(snapshots, self.settings)
        suggestions = None
        if target is not None:
            suggestions = generate_suggestions(channels, target, self.settings)

        logger.info(
            "Built SEO plan for %d channel(s), %d video(s)%s",
            len(channels),
            sum(c.snapshot.video_count for c in channels),
            " with suggestions" if suggestions else "",
        )
        return AnalysisResult(channels=channels, target_video=target, suggestions=suggestions)

    async def handle_request(self, body: Any) -> tuple[dict, int]:
        """
        Answer a raw request body with a serializable payload and status code.

        Returns:
            ``(result, 200)`` on success, ``({"error": message}, status)``
            on failure.
        """
        try:
            result = await self.build_plan(body)
        except SeoPlannerError as e:
            logger.warning("Analyze request failed: %s", e)
            return {"error": str(e)}, e.status_code
        return result.to_dict(), 200


# ========================================
# Convenience functions
# ========================================

async def build_seo_plan(
    request: Any,
    fetcher: MetadataFetcher,
    settings: Optional[Settings] = None,
) -> AnalysisResult:
    return await SeoPlanner(fetcher, settings).build_plan(request)


async def handle_analyze_request(
    body: Any,
    fetcher: MetadataFetcher,
    settings: Optional[Settings] = None,
) -> tuple[dict, int]:
    return await SeoPlanner(fetcher, settings).handle_request(body)


def run_seo_plan(
    request: Any,
    fetcher: Optional[MetadataFetcher] = None,
    settings: Optional[Settings] = None,
) -> AnalysisResult:
    """Synchronous wrapper around build_seo_plan (yt-dlp fetcher by default)."""
    return asyncio.run(SeoPlanner(fetcher, settings).build_plan(request))
