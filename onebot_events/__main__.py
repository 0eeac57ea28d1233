"""Entry point for running onebot-events as a module: python -m onebot_events"""

from onebot_events.cli.commands import app

if __name__ == "__main__":
    app()
