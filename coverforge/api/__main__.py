#!/usr/bin/env python3
"""
Entry point for running the API: python -m coverforge.api
"""
from ..config import PORT
from ..utils.logger import setup_logger
from .app import app


def main():
    setup_logger("api")
    # Port 5001 by default to avoid the AirPlay conflict on macOS
    app.run(debug=False, host='0.0.0.0', port=PORT)


if __name__ == '__main__':
    main()
