from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import pandas as pd

from starbattle import FormatError, grid_from_dataframe, parse_grid_text, solve
from starbattle.logging_utils import get_logger

logger = get_logger("api")

app = FastAPI()

class SolveRequest(BaseModel):
    board: list[list[str]] | None = None  # 2D array of region symbols
    text: str | None = None  # raw puzzle text (newlines are ignored)
    strict: bool = False

@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives the puzzle either as a 2D array or as raw text and returns the solved board.
    """
    if request.board is None and request.text is None:
        raise HTTPException(status_code=400, detail="either 'board' or 'text' is required")

    try:
        if request.board is not None:
            # 2D配列をDataFrameに変換
            grid = grid_from_dataframe(pd.DataFrame(request.board))
        else:
            grid = parse_grid_text(request.text)
        return solve(grid, strict=request.strict)
    except FormatError as e:
        logger.warning("Rejected puzzle: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/health")
def api_health():
    return {"status": "ok"}
