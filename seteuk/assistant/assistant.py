"""Per-category application flow over the generation core.

This is the composition root: storage, credential, knowledge base cache,
history and orchestrator are wired here and nowhere deeper.
"""

import dataclasses
from datetime import date

from seteuk.assistant.exceptions import EmptyInputError, NoCurrentResultError
from seteuk.config.settings import Settings
from seteuk.generation.composer import stamp_activity_draft
from seteuk.generation.exceptions import ConfigurationError
from seteuk.generation.factory import OrchestratorFactory
from seteuk.generation.orchestrator import GenerationOrchestrator
from seteuk.history.store import HistoryStore
from seteuk.knowledge.cache import KnowledgeBaseCache, as_entries
from seteuk.knowledge.factory import DocumentStoreFactory
from seteuk.knowledge.models import ACTIVITY_DOCUMENT
from seteuk.knowledge.resolver import KnowledgeBaseResolver
from seteuk.logging.logger import Log
from seteuk.records.category import RecordCategory
from seteuk.records.models import GeneratedResult, GenerationParams, HistoryItem, UploadedFile
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.credential_store import CredentialStore
from seteuk.storage.factory import StorageFactory


class RecordAssistant:
    """Generate, remember and edit records of one category."""

    def __init__(
        self,
        *,
        category: RecordCategory,
        orchestrator: GenerationOrchestrator,
        history: HistoryStore,
        knowledge_cache: KnowledgeBaseCache,
        credentials: CredentialStore,
        resolver: KnowledgeBaseResolver | None = None,
    ) -> None:
        self._category = category
        self._orchestrator = orchestrator
        self._history = history
        self._knowledge_cache = knowledge_cache
        self._credentials = credentials
        self._resolver = resolver
        self._knowledge_files = knowledge_cache.load()
        self._current_id: str | None = None
        self._current_result: GeneratedResult | None = None

    @property
    def category(self) -> RecordCategory:
        return self._category

    @property
    def history(self) -> list[HistoryItem]:
        return self._history.items

    @property
    def knowledge_files(self) -> list[UploadedFile]:
        return list(self._knowledge_files)

    @property
    def current_result(self) -> GeneratedResult | None:
        return self._current_result

    @property
    def has_credential(self) -> bool:
        return self._credentials.load() is not None

    def save_credential(self, credential: str) -> None:
        self._credentials.save(credential)

    def set_knowledge_files(self, files: list[UploadedFile]) -> None:
        self._knowledge_files = list(files)
        self._knowledge_cache.save(self._knowledge_files)

    def reset_knowledge_base(self) -> None:
        self._knowledge_files = []
        self._knowledge_cache.reset()

    async def generate(
        self,
        params: GenerationParams,
        *,
        activity: str | None = None,
        activity_date: date | None = None,
    ) -> tuple[str, GeneratedResult]:
        """Generate a record, add it to history and make it the current result.

        An activity with a date makes the text open with the dated activity and
        swaps the knowledge base for the activity exemplar document when it can
        be fetched.

        Raises:
            ConfigurationError: if no credential is stored.
            EmptyInputError: if there is no report, code, draft or activity.
        """
        credential = self._credentials.load()
        if credential is None:
            raise ConfigurationError("API 키를 먼저 설정해주세요.")
        activity = activity.strip() if activity else None
        if not (params.report_files or params.code_files or params.draft_text.strip() or activity):
            raise EmptyInputError(_empty_input_message(self._category))

        params = self._with_cached_preferences(params)
        if activity and activity_date is not None:
            params = await self._with_dated_activity(params, activity, activity_date)
        result = await self._orchestrator.generate(params, credential)
        summary = params.custom_subject_name or (
            f"{self._category.label} - {params.grade_level.value}"
        )
        history_id = self._history.add(result, summary)
        self._current_id = history_id
        self._current_result = result
        Log.info("History item added", category=self._category.value, history_id=history_id)
        return history_id, result

    async def revise_text(self, text: str) -> str:
        return await self._orchestrator.revise_text(text, self._credentials.load())

    def restore(self, history_id: str) -> GeneratedResult | None:
        item = self._history.get(history_id)
        if item is None:
            return None
        self._current_id = item.id
        self._current_result = item.result
        return item.result

    def save_edit(self, **updates: str) -> GeneratedResult:
        """Merge edited fields (grade_version, summary500...) into the current result."""
        if self._current_result is None:
            raise NoCurrentResultError("Nothing to edit: generate or restore a result first")
        self._current_result = dataclasses.replace(self._current_result, **updates)
        if self._current_id is not None:
            self._history.update(self._current_id, result=self._current_result)
        return self._current_result

    def delete_history(self, history_id: str) -> None:
        self._history.remove(history_id)
        if history_id == self._current_id:
            self._current_id = None

    async def _with_dated_activity(
        self, params: GenerationParams, activity: str, activity_date: date
    ) -> GenerationParams:
        changes: dict[str, object] = {
            "draft_text": stamp_activity_draft(activity, activity_date, params.draft_text)
        }
        if self._resolver is not None:
            entry = await self._resolver.fetch_entry(ACTIVITY_DOCUMENT)
            if entry is not None:
                changes["custom_knowledge_base"] = [entry]
        return dataclasses.replace(params, **changes)

    def _with_cached_preferences(self, params: GenerationParams) -> GenerationParams:
        changes: dict[str, object] = {}
        if not params.custom_knowledge_base and self._knowledge_files:
            changes["custom_knowledge_base"] = as_entries(self._knowledge_files)
        if params.custom_subject_name is None:
            subject_name = self._knowledge_cache.subject_name()
            if subject_name:
                changes["custom_subject_name"] = subject_name
        if params.custom_instructions is None:
            instructions = self._knowledge_cache.custom_instructions()
            if instructions:
                changes["custom_instructions"] = instructions
        if params.record_type is None and self._category.default_record_type is not None:
            changes["record_type"] = self._category.default_record_type
        return dataclasses.replace(params, **changes) if changes else params


def _empty_input_message(category: RecordCategory) -> str:
    if category is RecordCategory.AUTONOMY:
        return "최소한 하나 이상의 자료(보고서, 코드, 초안) 또는 활동 내용이 필요합니다."
    return "최소한 하나 이상의 자료(보고서, 코드, 초안)가 필요합니다."


def build_assistant(
    settings: Settings,
    category: RecordCategory | None = None,
    storage: BaseKeyValueStorage | None = None,
) -> RecordAssistant:
    """Build a RecordAssistant with all required adapters."""
    category = category or RecordCategory(settings.record_category)
    storage = storage if storage is not None else StorageFactory.create(settings)
    resolver = KnowledgeBaseResolver(DocumentStoreFactory.create(settings))
    return RecordAssistant(
        category=category,
        orchestrator=OrchestratorFactory.create(settings, resolver),
        history=HistoryStore(storage, category.history_key, settings.history_max_items),
        knowledge_cache=KnowledgeBaseCache(storage, category),
        credentials=CredentialStore(storage),
        resolver=resolver,
    )
