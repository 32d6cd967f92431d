"""GitHub contribution calendar client and streak scan."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable

from streakcard_renderer import StreakCardData, StreakCardError

GITHUB_GRAPHQL_API = "https://api.github.com/graphql"

CONTRIBUTIONS_QUERY = """
query($login: String!) {
  user(login: $login) {
    createdAt
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            contributionCount
            date
          }
        }
      }
    }
  }
}
"""

logger = logging.getLogger("streakcard.github")


class GitHubApiError(StreakCardError):
    """The GraphQL API could not be reached or returned an unusable answer."""


@dataclass(frozen=True)
class ContributionDay:
    date: str
    count: int


@dataclass(frozen=True)
class ContributionCalendar:
    username: str
    created_at: str
    total_contributions: int
    days: tuple[ContributionDay, ...]


def compute_streaks(
    days: Iterable[ContributionDay],
    username: str,
    total_contributions: int,
    created_at: str,
    now: datetime | None = None,
) -> StreakCardData:
    ordered = sorted(days, key=lambda d: d.date)

    if not ordered:
        stamp = (now or datetime.now(timezone.utc)).isoformat()
        return StreakCardData(
            username=username,
            total_contributions=total_contributions,
            current_streak=0,
            longest_streak=0,
            streak_start_date=stamp,
            streak_end_date=stamp,
            longest_streak_start_date=stamp,
            longest_streak_end_date=stamp,
            first_contribution_date=created_at,
        )

    # Backward from the most recent day; a quiet "today" does not end the streak yet.
    current = 0
    current_start = ""
    current_end = ""
    last = len(ordered) - 1
    for index in range(last, -1, -1):
        day = ordered[index]
        if day.count > 0:
            current += 1
            current_end = current_end or day.date
            current_start = day.date
        elif index == last:
            continue
        else:
            break

    longest = 0
    longest_start = ""
    longest_end = ""
    run = 0
    run_start = ""
    for day in ordered:
        if day.count > 0:
            if run == 0:
                run_start = day.date
            run += 1
            if run > longest:
                longest = run
                longest_start = run_start
                longest_end = day.date
        else:
            run = 0

    fallback = ordered[-1].date
    return StreakCardData(
        username=username,
        total_contributions=total_contributions,
        current_streak=current,
        longest_streak=longest,
        streak_start_date=current_start or fallback,
        streak_end_date=current_end or fallback,
        longest_streak_start_date=longest_start or fallback,
        longest_streak_end_date=longest_end or fallback,
        first_contribution_date=created_at,
    )


class GitHubClient:
    def __init__(self, token: str, endpoint: str = GITHUB_GRAPHQL_API, timeout_s: int = 30) -> None:
        self.token = token
        self.endpoint = endpoint
        self.timeout_s = timeout_s

    def _post(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        body = json.dumps({"query": query, "variables": variables}).encode("utf-8")
        req = urllib.request.Request(self.endpoint, data=body, method="POST")
        req.add_header("Authorization", f"Bearer {self.token}")
        req.add_header("Content-Type", "application/json")
        req.add_header("User-Agent", "streakcard")

        try:
            with urllib.request.urlopen(req, timeout=self.timeout_s) as resp:
                payload = json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            raise GitHubApiError(f"GitHub API failed: {exc.code} {exc.reason}") from exc
        except urllib.error.URLError as exc:
            raise GitHubApiError(f"GitHub API unreachable: {exc.reason}") from exc
        except json.JSONDecodeError as exc:
            raise GitHubApiError("GitHub API returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise GitHubApiError("GitHub API returned an unexpected body")
        if payload.get("errors"):
            raise GitHubApiError(f"GitHub GraphQL errors: {json.dumps(payload['errors'])}")
        return payload

    def fetch_calendar(self, username: str) -> ContributionCalendar:
        payload = self._post(CONTRIBUTIONS_QUERY, {"login": username})
        data = payload.get("data")
        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise GitHubApiError(f"User {username} not found")

        try:
            calendar = user["contributionsCollection"]["contributionCalendar"]
            days = tuple(
                ContributionDay(date=d["date"], count=int(d["contributionCount"]))
                for week in calendar.get("weeks", [])
                for d in week.get("contributionDays", [])
            )
            total = int(calendar.get("totalContributions", 0))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GitHubApiError(f"GitHub API returned a malformed calendar for {username}") from exc
        logger.debug("fetched %d calendar days for %s", len(days), username)
        return ContributionCalendar(
            username=username,
            created_at=user.get("createdAt", ""),
            total_contributions=total,
            days=days,
        )

    def fetch_streak_data(self, username: str, now: datetime | None = None) -> StreakCardData:
        calendar = self.fetch_calendar(username)
        return compute_streaks(
            calendar.days,
            username=username,
            total_contributions=calendar.total_contributions,
            created_at=calendar.created_at,
            now=now,
        )


def fetch_streak_data(username: str, token: str, now: datetime | None = None) -> StreakCardData:
    return GitHubClient(token).fetch_streak_data(username, now=now)
