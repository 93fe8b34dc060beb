import sys

from polyconst.cli import main

sys.exit(main())
