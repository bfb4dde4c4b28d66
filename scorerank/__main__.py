import sys

from scorerank.cli import main

sys.exit(main())
