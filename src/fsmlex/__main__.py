import sys

from fsmlex.cli import main

sys.exit(main())
