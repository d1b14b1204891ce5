"""Run the server with ``python -m tweeter``."""

from tweeter.web.main import main

main()
