from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Request

from .config import Settings
from .dictionary import DictionaryService
from .managers.puzzle import PuzzleGenerator
from .managers.reports import ReportStore


@dataclass
class AppContext:
    """Everything a request handler needs, built once at startup."""

    settings: Settings
    dictionary: DictionaryService
    generator: PuzzleGenerator
    reports: ReportStore
    sio: Optional[Any] = None

    @classmethod
    def build(cls, settings: Settings, sio: Optional[Any] = None) -> 'AppContext':
        dictionary = DictionaryService.from_file(settings.dictionary_path)
        generator = PuzzleGenerator(
            dictionary.words,
            rng=random.Random(settings.random_seed),
            attempts=settings.generation_attempts,
        )
        reports = ReportStore(
            settings.add_reports_path,
            settings.remove_reports_path,
            max_words=settings.max_reported_words,
        )
        return cls(settings=settings, dictionary=dictionary, generator=generator, reports=reports, sio=sio)

    async def broadcast(self, event: str, data: Any) -> None:
        if self.sio is not None:
            await self.sio.emit(event, data)


def get_context(request: Request) -> AppContext:
    return request.app.state.context
