import sys

from codereview.cli import main

sys.exit(main())
