import sys

from pairsum.cli import main

sys.exit(main())
