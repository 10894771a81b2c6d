import sys

from usngrid.cli import main

sys.exit(main())
