import sys

from meetcheck.cli import main

sys.exit(main())
