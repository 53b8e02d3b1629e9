"""
app.py
──────
Predictive Maintenance Monitor — Application Entry Point.

Startup sequence:
  1. Build the in-memory store and cold-start every equipment reading
  2. Start the simulation ticker (every TICK_INTERVAL_S)
  3. Create Dash app (mounted at /dashboard/) with DARKLY bootstrap theme
  4. Mount the REST API on the same Flask server and register callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc
import numpy as np

from config.settings import settings
from pdm.api import routes
from pdm.data.store import MonitorStore
from pdm.data.ticker import SimulationTicker
from pdm.layout.main import create_layout

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("pdm")

# ── 1. Seed state on startup ──────────────────────────────────────────────────
rng = np.random.default_rng(settings.SIMULATION_SEED)
store = MonitorStore()
store.seed_readings(rng)
logger.info("Seeded %d equipment readings", len(store.list_equipment()))

# ── 2. Simulation ticker ──────────────────────────────────────────────────────
ticker = SimulationTicker(store, interval_s=settings.TICK_INTERVAL_S, rng=rng)
ticker.start()

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    url_base_pathname="/dashboard/",
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="PdM Monitor",
)

server = app.server  # gunicorn entry point
app.layout = create_layout

# ── 4. REST API + callbacks ───────────────────────────────────────────────────
from pdm.callbacks import alerts, maintenance, monitor, navigation

routes.register(server, store)
navigation.register(app, store)
monitor.register(app, store)
alerts.register(app, store)
maintenance.register(app, store)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    logger.info("Predictive Maintenance backend listening on port %d", settings.PORT)
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
        use_reloader=False,  # the reloader would start a second ticker
    )
