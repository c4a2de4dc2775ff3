import sys

from src.console.cli import main

sys.exit(main())
