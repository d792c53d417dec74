import sys

from conslist.cli import main

sys.exit(main())
