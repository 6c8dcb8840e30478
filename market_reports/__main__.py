"""Module execution entrypoint for `python -m market_reports`."""

from market_reports.main import main

if __name__ == "__main__":
    main()
