"""Feed construction and search/filter/sort over feed entries."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from cookbook.repos import RecipeRepo
from .profiles import AuthorInfo, ProfileService
from .social import SocialCounterAggregator, SocialCounts

SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"
SORT_TITLE = "title"
SORT_DURATION = "duration"

SORT_CHOICES = (SORT_NEWEST, SORT_OLDEST, SORT_TITLE, SORT_DURATION)


@dataclass(frozen=True)
class FeedEntry:
    """A recipe enriched with social counters and author display info."""
    recipe: object
    author: AuthorInfo
    like_count: int = 0
    comment_count: int = 0
    is_liked_by_user: bool = False

    # Read-through accessors used by filtering and serializers
    @property
    def id(self):
        return self.recipe.id

    @property
    def title(self) -> str:
        return self.recipe.title or ""

    @property
    def ingredients(self) -> List[str]:
        return list(self.recipe.ingredients or [])

    @property
    def difficulty(self) -> Optional[str]:
        return self.recipe.difficulty

    @property
    def duration_min(self) -> Optional[int]:
        return self.recipe.duration_min

    @property
    def created_at(self) -> datetime:
        return self.recipe.created_at


@dataclass(frozen=True)
class SearchFilters:
    search_term: str = ""
    difficulty: str = ""
    max_duration: Optional[int] = None
    sort_by: str = SORT_NEWEST

    @classmethod
    def from_query_params(cls, params) -> "SearchFilters":
        """Build filters from request query params (q, difficulty, max_duration, sort)."""
        return cls(
            search_term=params.get("q") or "",
            difficulty=params.get("difficulty") or "",
            max_duration=_safe_int(params.get("max_duration")),
            sort_by=_sort_key(params.get("sort")),
        )


class FeedService:
    """Build enriched feeds and apply search controls to them."""

    def __init__(
        self,
        *,
        recipe_repo: RecipeRepo | None = None,
        profile_service: ProfileService | None = None,
        aggregator: SocialCounterAggregator | None = None,
    ) -> None:
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.profile_service = profile_service or ProfileService()
        self.aggregator = aggregator or SocialCounterAggregator()

    # --- feed construction ----------------------------------------------
    def build_feed(self, actor=None, owner=None) -> List[FeedEntry]:
        """Return feed entries newest first, for everyone or for one owner."""
        owner_id = getattr(owner, "pk", None)
        recipes = list(self.recipe_repo.list_for_feed(owner_id=owner_id))
        return self.enrich(recipes, actor)

    def enrich(self, recipes: Sequence, actor=None) -> List[FeedEntry]:
        """Join recipes with their authors and social counters."""
        if not recipes:
            return []
        authors = self.profile_service.authors_for(r.owner_id for r in recipes)
        counts = self.aggregator.counts_for([r.id for r in recipes], actor)
        return [self._entry(r, authors[r.owner_id], counts.get(r.id, SocialCounts())) for r in recipes]

    def entry_for(self, recipe, actor=None) -> FeedEntry:
        """Single-recipe form of enrich."""
        return self.enrich([recipe], actor)[0]

    def feed(self, actor=None, filters: SearchFilters | None = None, owner=None) -> List[FeedEntry]:
        """Build the feed then apply search filters and sorting."""
        return self.filter_and_sort(self.build_feed(actor, owner), filters or SearchFilters())

    # --- search / filter / sort -----------------------------------------
    def filter_and_sort(self, entries: Iterable, filters: SearchFilters) -> List:
        """Filter then sort entries; the input collection is left untouched."""
        result = list(entries)
        result = self._filter_by_search(result, filters.search_term)
        result = self._filter_by_difficulty(result, filters.difficulty)
        result = self._filter_by_max_duration(result, filters.max_duration)
        return self._sorted(result, filters.sort_by)

    def _filter_by_search(self, entries: List, search_term: str) -> List:
        term = (search_term or "").strip().lower()
        if not term:
            return entries
        return [e for e in entries if self._matches_term(e, term)]

    def _matches_term(self, entry, term: str) -> bool:
        if term in (entry.title or "").lower():
            return True
        return any(term in str(ingredient).lower() for ingredient in (entry.ingredients or []))

    def _filter_by_difficulty(self, entries: List, difficulty: str) -> List:
        if not difficulty:
            return entries
        return [e for e in entries if e.difficulty == difficulty]

    def _filter_by_max_duration(self, entries: List, max_duration) -> List:
        threshold = _safe_int(max_duration)
        if threshold is None:
            return entries
        return [e for e in entries if e.duration_min is not None and e.duration_min <= threshold]

    def _sorted(self, entries: List, sort_by: str) -> List:
        if sort_by == SORT_OLDEST:
            return sorted(entries, key=lambda e: e.created_at)
        if sort_by == SORT_TITLE:
            return sorted(entries, key=lambda e: (e.title or "").lower())
        if sort_by == SORT_DURATION:
            # recipes without a duration sort as 0 minutes
            return sorted(entries, key=lambda e: e.duration_min or 0)
        return sorted(entries, key=lambda e: e.created_at, reverse=True)

    def _entry(self, recipe, author: AuthorInfo, counts: SocialCounts) -> FeedEntry:
        return FeedEntry(
            recipe=recipe,
            author=author,
            like_count=counts.like_count,
            comment_count=counts.comment_count,
            is_liked_by_user=counts.is_liked_by_user,
        )


def _sort_key(value):
    return value if value in SORT_CHOICES else SORT_NEWEST


def _safe_int(value):
    """Safely convert a value to int, returning None on failure or blank input."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
