# FastAPI entry point; exposes the grading and analytics core over HTTP
# quiz_engine/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import os
import sys

# Add project root to sys.path to allow for absolute imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quiz_engine.endpoints import (
    answer as answer_router,
    attempts as attempts_router,
    questions as questions_router,
    quizzes as quizzes_router,
)
from quiz_engine.services.grader import registered_types
from quiz_engine.utils.config import settings
from quiz_engine.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    The service is stateless: nothing is loaded or persisted here.
    """
    logger.info("Quiz Grading API starting up...")
    logger.info(f"Graders registered for question types: {registered_types()}")
    logger.info(f"Default passing score: {settings.default_passing_score}, attempt order: {settings.default_attempt_order.value}")
    yield
    logger.info("Quiz Grading API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title=settings.api_title,
    description="Grades quiz attempts and summarizes attempt history.",
    version=settings.api_version,
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this to your frontend's domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Routers ---
app.include_router(answer_router.router, prefix="/answer", tags=["Answers"])
app.include_router(attempts_router.router, prefix="/attempts", tags=["Attempts"])
app.include_router(questions_router.router, prefix="/questions", tags=["Questions"])
app.include_router(quizzes_router.router, prefix="/quizzes", tags=["Quizzes"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Quiz Grading API"}
