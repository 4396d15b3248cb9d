"""Allows the app to be started with: python -m keyboard_cli"""

from keyboard_cli.app import run

if __name__ == "__main__":
    run()
