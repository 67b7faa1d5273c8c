import sys

from ci_step_stats.main import main

sys.exit(main())
