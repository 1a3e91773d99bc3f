"""User reviews of store applications and the filter used to query them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from steamstore.types import Language

MAX_REVIEW_NUM_PER_PAGE = 100
MAX_DAY_RANGE = 365


class Filter(str, Enum):
    """Ordering of returned reviews."""

    ALL = "all"
    RECENT = "recent"
    UPDATED = "updated"


class ReviewType(str, Enum):
    """Which reviews to return by verdict."""

    ALL = "all"
    POSITIVE = "positive"
    NEGATIVE = "negative"


class PurchaseType(str, Enum):
    """Which reviews to return by purchase origin."""

    ALL = "all"
    NON_STEAM_PURCHASE = "nonsteampurchase"
    STEAM = "steam"


class OfftopicActivity(Enum):
    """Whether off-topic reviews ("review bombs") are returned."""

    EXCLUDE = "exclude"
    INCLUDE = "include"


@dataclass
class ReviewsFilter:
    """Query options for a reviews request."""

    filter: Optional[Filter] = None
    review_type: Optional[ReviewType] = None
    purchase_type: Optional[PurchaseType] = None
    language: Optional[Language] = None
    day_range: Optional[int] = None
    cursor: Optional[str] = None
    num_per_page: Optional[int] = None
    offtopic_activity: OfftopicActivity = OfftopicActivity.EXCLUDE

    def to_url_params(self) -> list[tuple[str, str]]:
        """Return the query parameters for this filter, in request order."""
        params = [("json", "1")]
        if self.cursor is not None:
            params.append(("cursor", self.cursor))
        if self.filter is not None:
            params.append(("filter", self.filter.value))
        if self.language is not None:
            params.append(("language", self.language.value))
        if self.review_type is not None:
            params.append(("review_type", self.review_type.value))
        if self.purchase_type is not None:
            params.append(("purchase_type", self.purchase_type.value))
        if self.day_range is not None:
            params.append(("day_range", str(max(self.day_range, MAX_DAY_RANGE))))
        if self.num_per_page is not None:
            params.append(
                ("num_per_page", str(max(self.num_per_page, MAX_REVIEW_NUM_PER_PAGE)))
            )
        if self.offtopic_activity is OfftopicActivity.INCLUDE:
            params.append(("filter_offtopic_activity", "0"))
        return params


@dataclass
class QuerySummary:
    """Summary of a reviews query."""

    num_reviews: int
    review_score: Optional[int] = None
    review_score_desc: Optional[str] = None
    total_positive: Optional[int] = None
    total_negative: Optional[int] = None
    total_reviews: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuerySummary:
        return cls(
            num_reviews=data["num_reviews"],
            review_score=data.get("review_score"),
            review_score_desc=data.get("review_score_desc"),
            total_positive=data.get("total_positive"),
            total_negative=data.get("total_negative"),
            total_reviews=data.get("total_reviews"),
        )


@dataclass
class Author:
    """The user who wrote a review."""

    user_id: str
    num_games_owned: int
    num_reviews: int
    playtime_forever: int
    playtime_last_two_weeks: int
    playtime_at_review: int
    last_played: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Author:
        return cls(
            user_id=data["steamid"],
            num_games_owned=data["num_games_owned"],
            num_reviews=data["num_reviews"],
            playtime_forever=data["playtime_forever"],
            playtime_last_two_weeks=data["playtime_last_two_weeks"],
            playtime_at_review=data["playtime_at_review"],
            last_played=data["last_played"],
        )


@dataclass
class Review:
    """A single user review."""

    review_id: str
    author: Author
    language: str
    review: str
    timestamp_created: int
    timestamp_updated: int
    received_for_free: bool
    steam_purchase: bool
    voted_up: bool
    votes_up: int
    votes_funny: int
    weighted_vote_score: str
    written_during_early_access: bool
    comment_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Review:
        return cls(
            review_id=data["recommendationid"],
            author=Author.from_dict(data["author"]),
            language=data["language"],
            review=data["review"],
            timestamp_created=data["timestamp_created"],
            timestamp_updated=data["timestamp_updated"],
            received_for_free=data["received_for_free"],
            steam_purchase=data["steam_purchase"],
            voted_up=data["voted_up"],
            votes_up=data["votes_up"],
            votes_funny=data["votes_funny"],
            weighted_vote_score=data["weighted_vote_score"],
            written_during_early_access=data["written_during_early_access"],
            comment_count=data.get("comment_count"),
        )


@dataclass
class Reviews:
    """One page of reviews for an application."""

    success: int
    reviews: list[Review]
    query_summary: QuerySummary
    cursor: str
    app_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Reviews:
        return cls(
            success=data["success"],
            reviews=[Review.from_dict(item) for item in data["reviews"]],
            query_summary=QuerySummary.from_dict(data["query_summary"]),
            cursor=data["cursor"],
        )