import sys

from gomatria.cli import main

sys.exit(main())
