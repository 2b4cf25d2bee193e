from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

# picked up when create_app builds BaseConfig
load_dotenv(find_dotenv(usecwd=True))

from nammaraitha import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8080")))
