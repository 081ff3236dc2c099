"""Suggestion service - Child upsert engine bound to schedule suggestions"""

from ...models import ScheduleSuggestion
from ..children import ChildService
from .repository import SuggestionRepository
from .schemas import SuggestionDelete, SuggestionUpsert


class SuggestionService(ChildService[ScheduleSuggestion]):
    """Service layer for suggestion business logic"""

    repository_class = SuggestionRepository
    upsert_schema = SuggestionUpsert
    delete_schema = SuggestionDelete
    label = "suggestion"
    not_found_message = "Suggestion not found for this schedule."

    def upsert_suggestion(self, data, user) -> list[ScheduleSuggestion]:
        return self.upsert(data, user)

    def delete_suggestion(self, data, user) -> None:
        self.delete(data, user)
