"""
Main entrypoint for the what3words command line interface.

Usage:
    python main.py --api-key KEY available-languages
    python main.py to-coords addresses.txt
    cat coordinates.txt | python main.py --output-format json to-3wa

The API key can also be given through the W3W_API_KEY environment variable.
"""
from w3w.cli.app import app


if __name__ == "__main__":
    app(prog_name="w3w")
