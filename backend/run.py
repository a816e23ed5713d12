#!/usr/bin/env python3
# backend/run.py
"""
Development server runner.

Creates any missing tables on the configured database, then serves the API
with autoreload.
"""
import os
from pathlib import Path
import sys

# Add backend to path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))
os.chdir(backend_dir)

import uvicorn

from studio_scheduler.database import init_db

if __name__ == "__main__":
    init_db()
    print("🚀 Starting Studio Scheduler development server")
    print("🌐 Access at: http://localhost:8000")
    print("📚 API Docs: http://localhost:8000/docs")

    uvicorn.run("studio_scheduler.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
