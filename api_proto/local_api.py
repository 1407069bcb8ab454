import logging
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sudoku_solver import solve
from sudoku_solver.config import DEFAULT_MODE

# ============================================================
# Configuration & Logging
# ============================================================
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("sudoku_web")

# フロントエンドが最初に描画する盤面サイズ
BOARD_SIZE = 9

# ============================================================
# FastAPI App
# ============================================================
app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Pydantic Models
# ============================================================
class SolveRequest(BaseModel):
    # 既存フロントエンドのフィールド名に合わせている
    sudokuBoard: List[List[Any]]
    mode: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool


# ============================================================
# Health
# ============================================================
@app.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True}


@app.get("/")
async def read_root():
    return {
        "status": "ok",
        "message": "Sudoku solver API is running.",
        "boardSize": BOARD_SIZE,
        "modes": ["naive", "mrv", "degree"],
    }


# ============================================================
# API Endpoints
# ============================================================
@app.post("/")
@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array) and a search mode, and calls solver logic.

    - solved    -> 200 {"status": "success", "message": ..., "data": [[...]]}
    - no answer -> 500 {"status": "failed", "message": "No solution exists."}
    - bad input -> 400 {"detail": ...}
    """
    mode = request.mode or DEFAULT_MODE
    try:
        result = solve(request.sudokuBoard, mode)
    except ValueError as e:
        # BoardValidationError（盤面の形・値）と不正な mode
        logger.info("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Solve Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    status_code = 200 if result.ok else 500
    return JSONResponse(status_code=status_code, content=result.to_dict())
