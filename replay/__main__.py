"""
Replay 진입점

실행 방법:
    python -m replay transactions.csv > accounts.csv
"""

from replay.bootstrap import cli

if __name__ == "__main__":
    cli()
