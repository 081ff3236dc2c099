"""Suggestion repository - Database operations for schedule suggestions"""

from ...models import ScheduleSuggestion
from ...repository import ChildRepository


class SuggestionRepository(ChildRepository[ScheduleSuggestion]):
    model = ScheduleSuggestion
    default_order = ("suggested_start_utc", "created_at", "id")
