"""Minimal example serving mcstats-api from a local data directory.

The application will:
    - Read the roster from ./data/usercache.json
    - Read statistics from ./data/stats and advancements from ./data/advancements
    - Probe a game server on localhost:25565
    - Mount /status, /players, /health and /ready

Running the Application:
    python examples/app.py

Then visit:
    - http://127.0.0.1:3000/schema - OpenAPI documentation
    - http://127.0.0.1:3000/players - Player summaries
    - http://127.0.0.1:3000/status - Game server status
"""

from __future__ import annotations

from pathlib import Path

from mcstats_api import McStatsSettings
from mcstats_api.app import create_app

data_dir = Path(__file__).parent / "data"

settings = McStatsSettings(
    usercache_path=data_dir / "usercache.json",
    stats_dir=data_dir / "stats",
    advancements_dir=data_dir / "advancements",
    server_address="localhost",
    server_port=25565,
    debug=True,
)

app = create_app(settings=settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="127.0.0.1",
        port=settings.port,
        log_level="info",
    )
