import logging
import os

from portfolio import create_app

# Personal website: Home, Projects, Writing, Learning, Funsies.
# Start with: python3 run.py
app = create_app()

# Runs on 0.0.0.0:8080 unless PORTFOLIO_HOST / PORTFOLIO_PORT say otherwise.
if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("PORTFOLIO_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(
        host=os.getenv("PORTFOLIO_HOST", "0.0.0.0"),
        port=int(os.getenv("PORTFOLIO_PORT", "8080")),
        debug=True,
    )
