import sys

from wallet_watcher_api.cli import main

if __name__ == "__main__":
    sys.exit(main())
