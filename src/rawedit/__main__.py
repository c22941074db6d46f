import sys

from rawedit.cli import main

sys.exit(main())
