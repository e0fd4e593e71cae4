from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from ..context import AppContext, get_context
from ..exceptions import GenerationError
from ..schemas import (
    DictionaryRequest, DictionaryResponse, ErrorResponse, HealthResponse, NewGameResponse,
    PuzzleStats, ReportLists, ReportRequest,
)

router = APIRouter(prefix='/api', responses={400: {'model': ErrorResponse}})


@router.get('/health', response_model=HealthResponse)
async def health(ctx: AppContext = Depends(get_context)):
    return HealthResponse(dictionarySize=len(ctx.dictionary))


@router.post('/dictionary', response_model=DictionaryResponse)
async def valid_words(body: DictionaryRequest, ctx: AppContext = Depends(get_context)):
    words = ctx.dictionary.valid_words(body.letters, body.minLength)
    return DictionaryResponse(validWords=words, count=len(words))


@router.get('/newgame', response_model=NewGameResponse, responses={500: {'model': ErrorResponse}})
async def new_game(minLength: Optional[int] = Query(None, gt=0), ctx: AppContext = Depends(get_context)):
    min_length = minLength or ctx.settings.default_min_length
    puzzle = ctx.generator.generate(min_length)
    if puzzle is None:
        raise GenerationError('Failed to generate a new game')
    return NewGameResponse(
        letters=puzzle.letters,
        centerLetter=puzzle.center_letter,
        validWords=puzzle.valid_words,
        stats=PuzzleStats(
            usedLetterCount=puzzle.stats.used_letter_count,
            totalPossibleScore=puzzle.stats.total_possible_score,
            heuristicScore=puzzle.stats.heuristic_score,
        ),
    )


@router.post('/dictionary/report', responses={429: {'model': ErrorResponse}})
async def report_word(body: ReportRequest, ctx: AppContext = Depends(get_context)):
    # CapacityExceededError propagates to the 429 handler
    if ctx.reports.append(body.type, body.word):
        await ctx.broadcast('reports:updated', ctx.reports.read_all())
    return Response(status_code=200)


@router.get('/dictionary/report', response_model=ReportLists)
async def reported_words(ctx: AppContext = Depends(get_context)):
    return ReportLists(**ctx.reports.read_all())


@router.delete('/dictionary/report')
async def clear_reports(ctx: AppContext = Depends(get_context)):
    ctx.reports.clear()
    await ctx.broadcast('reports:updated', ctx.reports.read_all())
    return Response(status_code=200)
