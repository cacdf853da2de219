import sys

from pactverify.cli.main import main

if __name__ == "__main__":  # pragma: no cover - exercised via module entrypoint
    sys.exit(main())
