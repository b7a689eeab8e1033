import sys

from polypanel.cli import main

sys.exit(main())
