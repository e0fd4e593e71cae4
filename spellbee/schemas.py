from __future__ import annotations
import re
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal

ReportType = Literal['add', 'remove']

_WORD_RE = re.compile(r'^[A-Za-z]+$')

class DictionaryRequest(BaseModel):
    letters: List[str] = Field(..., min_length=1)
    minLength: int = Field(..., gt=0, strict=True)

    @field_validator('letters')
    @classmethod
    def single_characters(cls, value: List[str]) -> List[str]:
        letters = [l.strip().upper() for l in value]
        if any(len(l) != 1 for l in letters):
            raise ValueError('each letter must be a single character')
        return letters

class DictionaryResponse(BaseModel):
    validWords: List[str]
    count: int

class PuzzleStats(BaseModel):
    usedLetterCount: int
    totalPossibleScore: int
    heuristicScore: float

class NewGameResponse(BaseModel):
    letters: List[str]
    centerLetter: str
    validWords: List[str]
    stats: PuzzleStats

class ReportRequest(BaseModel):
    word: str
    type: ReportType

    @field_validator('word')
    @classmethod
    def alphabetic_word(cls, value: str) -> str:
        word = value.strip()
        if not _WORD_RE.match(word):
            raise ValueError('word must be a non-empty string of letters')
        return word.upper()

class ReportLists(BaseModel):
    add: List[str] = []
    remove: List[str] = []

class ValidateResponse(BaseModel):
    word: str
    valid: bool

class HealthResponse(BaseModel):
    status: Literal['ok'] = 'ok'
    dictionarySize: int

class ErrorResponse(BaseModel):
    error: str
