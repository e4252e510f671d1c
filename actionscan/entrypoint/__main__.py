"""Provides an entrypoint for the Action Scan GitHub Action. """

from actionscan.entrypoint import cli

if __name__ == "__main__":
    cli.run()
