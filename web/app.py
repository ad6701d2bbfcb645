from fastapi import FastAPI, HTTPException
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from herostats.api_client import (
    DotabuffClient,
    FetchError,
    InvalidPlayerIdError,
    PlayerNotFoundError,
    ScraperBlockedError,
)
from herostats.scraper import MarkupParseError
from herostats.service import HeroStatsService

LOGGER = logging.getLogger(__name__)

app = FastAPI()

timeout_seconds = int(os.environ.get("HEROSTATS_TIMEOUT_SECONDS", "20"))
service = HeroStatsService(DotabuffClient(timeout_seconds=timeout_seconds))


@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/api/players/{player_id}/heroes")
async def player_heroes(player_id: str) -> dict:
    try:
        report = await asyncio.to_thread(service.fetch_player_stats, player_id)
    except InvalidPlayerIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ScraperBlockedError as e:
        raise HTTPException(status_code=502, detail=f"Dotabuff blocked the request: {str(e)}")
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except MarkupParseError as e:
        LOGGER.error("Could not parse match page for %s: %s", player_id, e)
        raise HTTPException(status_code=422, detail=f"Unable to parse match data: {str(e)}")
    return report.to_dict()
